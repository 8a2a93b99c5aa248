from math import isfinite
from typing import Any

__all__ = ["is_integer"]


def is_integer(value: Any) -> bool:
    """Return true if a value is an integral number, like 3 or 3.0."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and isfinite(value) and value.is_integer()
