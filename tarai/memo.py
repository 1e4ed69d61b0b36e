"""Tarai with memoized recursion.

The cache maps an ``(x, y, z)`` triple to its result. It is created empty
for every top-level call and dropped when that call returns, so separate
calls never see each other's entries.
"""


def tarai_memo(x: int, y: int, z: int) -> int:
    memo: dict[tuple[int, int, int], int] = {}

    def t(x: int, y: int, z: int) -> int:
        # Every call site (the three arguments and the combining call)
        # goes through here, so each one is looked up before it is computed.
        key = (x, y, z)
        if key in memo:
            return memo[key]

        if x <= y:
            value = y
        else:
            a = t(x - 1, y, z)
            b = t(y - 1, z, x)
            c = t(z - 1, x, y)
            value = t(a, b, c)

        memo[key] = value
        return value

    return t(x, y, z)
