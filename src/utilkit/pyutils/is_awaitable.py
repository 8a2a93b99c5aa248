"""Check whether objects are awaitable"""

from __future__ import annotations

import inspect
from types import CoroutineType
from typing import Any, Awaitable

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

__all__ = ["is_awaitable"]

_common_primitives = {int, float, bool, str, list, dict, tuple, type(None)}


def is_awaitable(value: Any) -> TypeGuard[Awaitable]:
    """Return True if object can be passed to an ``await`` expression.

    Callbacks handed to the async helpers may return plain values or awaitables,
    so this check runs for every result and must stay cheap: primitive types are
    rejected before looking for an ``__await__`` attribute.
    """
    if type(value) in _common_primitives:
        return False
    return (
        isinstance(value, CoroutineType)
        or hasattr(value, "__await__")
        or inspect.isawaitable(value)
    )
