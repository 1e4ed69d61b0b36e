"""Tarai (Takeuchi) function evaluated four ways: naive, memoized and two lazy forms."""

from .lazy_closure import tarai_lazy_closure
from .lazy_enum import tarai_lazy_enum
from .memo import tarai_memo
from .naive import tarai_naive
from .variants import CASES, VARIANTS, evaluate, get_variant

__version__ = "0.1.0"

__all__ = [
    "CASES",
    "VARIANTS",
    "evaluate",
    "get_variant",
    "tarai_lazy_closure",
    "tarai_lazy_enum",
    "tarai_memo",
    "tarai_naive",
]
