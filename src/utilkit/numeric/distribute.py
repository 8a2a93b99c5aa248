"""Distribution of a total into parts"""

from __future__ import annotations

from math import inf
from typing import List

try:
    from typing import Literal
except ImportError:  # Python < 3.8
    from typing_extensions import Literal  # type: ignore

from ..pyutils import is_finite, is_integer
from .rounding import places

__all__ = ["RemainderPlacement", "distribute"]

RemainderPlacement = Literal["first", "last"]


def distribute(
    total: float,
    groups: int,
    decimals: float = 2,
    remainder: RemainderPlacement = "first",
) -> List[float]:
    """Distribute a total into equal parts that add up to the total.

    Every part is rounded down to the given number of decimals, and what is left
    over is added to the first or the last part::

        distribute(11, 6)                    # [1.85, 1.83, 1.83, 1.83, 1.83, 1.83]
        distribute(11, 6, remainder="last")  # [1.83, 1.83, 1.83, 1.83, 1.83, 1.85]

    Pass ``math.inf`` as decimals to get unrounded parts. Distributing into zero
    groups gives an empty list.
    """
    if not is_integer(groups) or groups < 0:
        raise ValueError(f"Invalid number of groups {groups!r}.")
    if remainder not in ("first", "last"):
        raise ValueError(
            f"Invalid remainder placement {remainder!r}, expected 'first' or 'last'."
        )
    if not (is_integer(decimals) and decimals >= 0) and decimals != inf:
        raise ValueError(
            f"Invalid number of decimals {decimals!r}, expected a non-negative"
            " integer or math.inf."
        )
    groups = int(groups)
    if not groups:
        return []
    if not is_finite(decimals):
        return [total / groups] * groups

    decimals = int(decimals)
    base = places(total / groups, decimals, "floor")
    parts = [base] * groups
    # the subtraction leaves floating point residue that must not end up in a part
    remaining = places(total - base * groups, decimals)
    if remaining > 0:
        index = 0 if remainder == "first" else -1
        parts[index] = places(parts[index] + remaining, decimals)
    return parts
