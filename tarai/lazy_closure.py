"""Tarai with call-by-need evaluation of the third argument, using closures.

The third argument travels as a zero-argument callable. It is only called
once the base-case test has failed, so ``t(x, y, z)`` with ``x <= y`` never
evaluates ``z`` at all.
"""

from typing import Callable

Thunk = Callable[[], int]


def tarai_deferred(x: int, y: int, z: Thunk) -> int:
    if x <= y:
        return y

    # Force once; everything below captures the concrete value.
    z_value = z()
    a = tarai_deferred(x - 1, y, lambda: z_value)
    b = tarai_deferred(y - 1, z_value, lambda: x)

    def c() -> int:
        return tarai_deferred(z_value - 1, x, lambda: y)

    return tarai_deferred(a, b, c)


def tarai_lazy_closure(x: int, y: int, z: int) -> int:
    return tarai_deferred(x, y, lambda: z)
