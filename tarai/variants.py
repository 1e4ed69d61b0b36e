"""Registry of the Tarai evaluators and the fixed benchmark cases."""

from typing import Callable, NamedTuple

from .lazy_closure import tarai_lazy_closure
from .lazy_enum import tarai_lazy_enum
from .memo import tarai_memo
from .naive import tarai_naive

BASELINE = "naive"


class Variant(NamedTuple):
    name: str
    label: str
    evaluate: Callable[[int, int, int], int]


class Case(NamedTuple):
    name: str
    args: tuple[int, int, int]
    expected: int


class UnknownVariantError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        known = ", ".join(VARIANTS)
        return f"unknown variant {self.name!r} (known: {known})"


VARIANTS = {
    v.name: v
    for v in [
        Variant("naive", "Naive recursion", tarai_naive),
        Variant("memo", "Memoized recursion", tarai_memo),
        Variant("lazy_closure", "Lazy (closure)", tarai_lazy_closure),
        Variant("lazy_enum", "Lazy (tagged value)", tarai_lazy_enum),
    ]
}

CASES = {
    c.name: c
    for c in [
        Case("case_10_5_0", (10, 5, 0), 10),
        Case("case_12_6_0", (12, 6, 0), 12),
    ]
}


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(name) from None


def get_case(name: str) -> Case:
    """Look up a benchmark case by name (``case_<x>_<y>_<z>``)."""
    return CASES[name]


def evaluate(name: str, x: int, y: int, z: int) -> int:
    return get_variant(name).evaluate(x, y, z)
