"""Number ranges"""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = ["clamp", "in_range", "map_range"]


def clamp(value: float, range_: Tuple[float, float]) -> float:
    """Limit a number to a range given as (minimum, maximum)."""
    low, high = range_
    if value < low:
        return low
    if value > high:
        return high
    return value


def map_range(
    value: float, in_range: Tuple[float, float], out_range: Tuple[float, float]
) -> float:
    """Map a number from one range to another.

    The result is clamped to the output range::

        map_range(5, (0, 10), (0, 1))  # 0.5
    """
    in_low, in_high = in_range
    out_low, out_high = out_range
    mapped = (value - in_low) * (out_high - out_low) / (in_high - in_low) + out_low
    return clamp(mapped, out_range)


def in_range(value: float, range_: Tuple[float, Optional[float]]) -> bool:
    """Check whether a number lies within a range.

    The maximum may be None for a range without upper bound.
    """
    low, high = range_
    return value >= low and (high is None or value <= high)
