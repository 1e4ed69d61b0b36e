"""Tarai with call-by-need evaluation of the third argument, using a tagged value.

Instead of a closure the deferred argument is one of two plain objects:

- ``Args(x, y, z)``: pending, holds the triple still to be evaluated
- ``Result(value)``: resolved, holds the integer

``force`` turns either one into an int. Forcing an ``Args`` runs the
recursion on its triple; forcing a ``Result`` just reads the value back.
"""


class Deferred:
    pass


class Args(Deferred):
    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self):
        return f"Args({self.x!r}, {self.y!r}, {self.z!r})"


class Result(Deferred):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Result({self.value!r})"


def force(deferred: Deferred) -> int:
    if isinstance(deferred, Result):
        return deferred.value
    elif isinstance(deferred, Args):
        return tarai_thunk(deferred.x, deferred.y, Result(deferred.z))
    else:
        raise TypeError(f"cannot force {deferred!r}")


def tarai_thunk(x: int, y: int, z: Deferred) -> int:
    if x <= y:
        return y

    z_value = force(z)
    a = tarai_thunk(x - 1, y, Result(z_value))
    b = tarai_thunk(y - 1, z_value, Result(x))
    c = Args(z_value - 1, x, y)
    return tarai_thunk(a, b, c)


def tarai_lazy_enum(x: int, y: int, z: int) -> int:
    return tarai_thunk(x, y, Result(z))
