"""Sentinel for arguments that were not given"""

from __future__ import annotations

import warnings
from typing import Any, Optional

__all__ = ["Undefined", "UndefinedType"]


class UndefinedType:
    """Auxiliary class for creating the Undefined singleton."""

    _instance: Optional[UndefinedType] = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        else:
            warnings.warn("Redefinition of 'Undefined'", RuntimeWarning, stacklevel=2)
        return cls._instance

    def __reduce__(self) -> str:
        return "Undefined"

    def __repr__(self) -> str:
        return "Undefined"

    __str__ = __repr__

    def __hash__(self) -> int:
        return hash(UndefinedType)

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        return other is Undefined

    def __ne__(self, other: Any) -> bool:
        return not self == other


Undefined = UndefinedType()

Undefined.__doc__ = """Symbol for arguments that were not given

Functions taking a locale use it to tell apart "use the configured locale"
(``Undefined``, the default) from "use the system locale" (``None``).
"""
