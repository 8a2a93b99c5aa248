"""Awaiting in sequence"""

from __future__ import annotations

from asyncio import sleep
from inspect import iscoroutine
from typing import Any, Awaitable, Iterable, List, TypeVar

__all__ = ["seq", "wait"]

T = TypeVar("T")


async def wait(ms: float) -> None:
    """Sleep for the given number of milliseconds."""
    await sleep(ms / 1000)


async def seq(awaitables: Iterable[Awaitable[T]]) -> List[T]:
    """Await the given awaitables one after another.

    This is like :func:`asyncio.gather`, but without concurrency. The results are
    returned in the same order. The first error is raised immediately, and
    coroutines that have not been awaited yet are closed so that they do not
    trigger "never awaited" warnings.
    """
    pending: List[Awaitable[Any]] = list(awaitables)
    results: List[T] = []
    try:
        for index, awaitable in enumerate(pending):
            results.append(await awaitable)
    except BaseException:
        for awaitable in pending[index + 1 :]:
            if iscoroutine(awaitable):
                awaitable.close()
        raise
    return results
