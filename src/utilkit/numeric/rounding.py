"""Rounding to decimal places and multiples"""

from __future__ import annotations

from decimal import Decimal
from math import ceil, copysign, floor
from typing import Callable, Dict, Optional

try:
    from typing import Literal
except ImportError:  # Python < 3.8
    from typing_extensions import Literal  # type: ignore

__all__ = ["Rounding", "decimal_places", "get_rounding", "nearest", "places"]

Rounding = Optional[Literal["floor", "ceil", "round"]]
"""Rounding function name, None disables rounding"""


def _round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(copysign(floor(abs(value) + 0.5), value))


_rounding_functions: Dict[str, Callable[[float], float]] = {
    "floor": floor,
    "ceil": ceil,
    "round": _round_half_away_from_zero,
}


def get_rounding(rounding: Rounding) -> Callable[[float], float]:
    """Get the rounding function with the given name.

    Note that the built-in :func:`round` is not used since it rounds halves to
    the nearest even number.
    """
    if rounding is None:
        return lambda value: value
    try:
        return _rounding_functions[rounding]
    except KeyError:
        raise ValueError(
            f"Invalid rounding {rounding!r}, expected 'floor', 'ceil', 'round' or None."
        ) from None


def places(value: float, precision: int, rounding: Rounding = "round") -> float:
    """Round a number to the given number of decimal places.

    A negative precision rounds to tens, hundreds and so on::

        places(1.234567, 2)   # 1.23
        places(123.456, -1)   # 120

    The number is scaled, rounded and scaled back, so the usual binary floating
    point imprecision applies to values that cannot be represented exactly.
    """
    round_fn = get_rounding(rounding)
    if rounding is None:
        return value
    factor = 10**precision
    return round_fn(value * factor) / factor


def decimal_places(value: float) -> int:
    """Get the number of decimal places in the shortest representation of a number."""
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def nearest(value: float, step: float, rounding: Rounding = "round") -> float:
    """Get the multiple of ``step`` nearest to ``value``.

    The ``rounding`` decides in which direction to go::

        nearest(17, 5)             # 15
        nearest(17.5, 5)           # 20
        nearest(17.5, 5, "floor")  # 15
        nearest(-7, 3)             # -6

    The result is rounded to the decimal places of the step, so that
    ``nearest(1 / 3, 0.1)`` gives 0.3 and not 0.30000000000000004.
    """
    multiple = get_rounding(rounding)(value / step) * step
    return places(multiple, decimal_places(step))
