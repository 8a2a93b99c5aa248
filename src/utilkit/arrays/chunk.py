"""Chunking of sequences"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar, Union

from ..pyutils import is_awaitable

__all__ = ["chunk", "each_chunk"]

T = TypeVar("T")

ChunkLogger = Callable[[int], Any]
ChunkCallbackResult = Union[Optional[ChunkLogger], Awaitable[Optional[ChunkLogger]]]


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split a sequence into chunks of the given size.

    The last chunk is shorter if the items cannot be divided evenly::

        chunk(["a", "b", "c", "d"], 3)  # [["a", "b", "c"], ["d"]]
    """
    if not items:
        return []
    if size <= 0:
        raise ValueError("The chunk size must be a positive number.")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


async def each_chunk(
    items: Sequence[T],
    size: int,
    callback: Callable[[List[T], int], ChunkCallbackResult],
) -> None:
    """Split a sequence into chunks and call back with each chunk in turn.

    The callback gets the chunk and its index and may be a coroutine function, in
    which case every call is awaited before the next chunk is processed. If the
    callback returns a function, it is called with the total number of items that
    have been processed so far, which is handy for logging progress.
    """
    count = 0
    for index, current_chunk in enumerate(chunk(items, size)):
        log = callback(current_chunk, index)
        if is_awaitable(log):
            log = await log
        count += len(current_chunk)
        if log:
            log(count)
