"""Sequence methods with async callbacks

All callbacks get the item, its index and the sequence, like the callbacks of
the JavaScript array methods, and may return awaitables or plain values.
:func:`async_map` runs all callbacks concurrently, the other functions await
them one after another and stop as early as possible.
"""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, TypeVar

from ..pyutils import gather_with_cancel, is_awaitable

__all__ = ["async_every", "async_filter", "async_flat_map", "async_map", "async_some"]

T = TypeVar("T")

Callback = Callable[[T, int, Sequence[T]], Any]


async def _resolve(value: Any) -> Any:
    return await value if is_awaitable(value) else value


async def async_map(items: Sequence[T], callback: Callback) -> List[Any]:
    """Map items with an async callback, running the callbacks concurrently.

    The first error is raised immediately and the pending callbacks are cancelled.
    """
    return await gather_with_cancel(
        *(_resolve(callback(item, index, items)) for index, item in enumerate(items))
    )


async def async_flat_map(items: Sequence[T], callback: Callback) -> List[Any]:
    """Map items with an async callback and flatten the results by one level.

    Results that are lists or tuples are spliced in, other results are kept as
    they are.
    """
    flattened: List[Any] = []
    for result in await async_map(items, callback):
        if isinstance(result, (list, tuple)):
            flattened.extend(result)
        else:
            flattened.append(result)
    return flattened


async def async_filter(items: Sequence[T], callback: Callback) -> List[T]:
    """Filter items with an async predicate, awaited item by item."""
    return [
        item
        for index, item in enumerate(items)
        if await _resolve(callback(item, index, items))
    ]


async def async_some(items: Sequence[T], callback: Callback) -> bool:
    """Check whether an async predicate holds for at least one item."""
    for index, item in enumerate(items):
        if await _resolve(callback(item, index, items)):
            return True
    return False


async def async_every(items: Sequence[T], callback: Callback) -> bool:
    """Check whether an async predicate holds for all items."""
    for index, item in enumerate(items):
        if not await _resolve(callback(item, index, items)):
            return False
    return True
