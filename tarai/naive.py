"""Tarai by direct recursion: every sub-call is evaluated eagerly."""


def tarai_naive(x: int, y: int, z: int) -> int:
    if x <= y:
        return y
    else:
        return tarai_naive(
            tarai_naive(x - 1, y, z),
            tarai_naive(y - 1, z, x),
            tarai_naive(z - 1, x, y),
        )
