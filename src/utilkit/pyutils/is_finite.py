from math import isfinite
from typing import Any

__all__ = ["is_finite"]


def is_finite(value: Any) -> bool:
    """Return true if a value is a finite number (booleans excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and isfinite(value)
