"""Number utilities

The :mod:`utilkit.numeric` package contains helpers for rounding, distributing,
ranging and formatting numbers.
"""

from .distribute import RemainderPlacement, distribute
from .format_number import compact, currency, intl, percent, signed
from .random_number import random
from .ranges import clamp, in_range, map_range
from .rounding import Rounding, decimal_places, get_rounding, nearest, places

__all__ = [
    "RemainderPlacement",
    "Rounding",
    "clamp",
    "compact",
    "currency",
    "decimal_places",
    "distribute",
    "get_rounding",
    "in_range",
    "intl",
    "map_range",
    "nearest",
    "percent",
    "places",
    "random",
    "signed",
]
