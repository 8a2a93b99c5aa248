"""Python Utils

This package contains dependency-free helpers used throughout the library.

Each utility should belong in its own file and be the default export.

These functions are not part of the public interface and are subject to change.
"""

from .gather_with_cancel import gather_with_cancel
from .is_awaitable import is_awaitable
from .is_finite import is_finite
from .is_integer import is_integer
from .undefined import Undefined, UndefinedType

__all__ = [
    "gather_with_cancel",
    "is_awaitable",
    "is_finite",
    "is_integer",
    "Undefined",
    "UndefinedType",
]
