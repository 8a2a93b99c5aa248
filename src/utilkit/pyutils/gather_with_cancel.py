"""Run awaitables concurrently with cancellation support."""

from __future__ import annotations

from asyncio import Task, ensure_future, gather
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

__all__ = ["gather_with_cancel"]


async def gather_with_cancel(*awaitables: Awaitable[Any]) -> list[Any]:
    """Run awaitable objects concurrently and return their results in order.

    The first raised exception is propagated immediately and all awaitables that
    are still pending get cancelled, unlike `asyncio.gather` which lets the
    other tasks run to completion.
    """
    tasks: list[Task[Any]] = [ensure_future(aw) for aw in awaitables]
    try:
        return await gather(*tasks)
    except Exception:
        for task in tasks:
            if not task.done():
                task.cancel()
        await gather(*tasks, return_exceptions=True)
        raise
