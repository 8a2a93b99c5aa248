"""Duplicate handling"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, TypeVar

__all__ = ["dedup", "dupes"]

T = TypeVar("T")


def dedup(
    items: Sequence[T], compare: Optional[Callable[[List[T], T], bool]] = None
) -> List[T]:
    """Remove duplicates from a sequence, keeping the order of first occurrences.

    Items are compared by equality, so they do not need to be hashable. A
    ``compare`` function can be passed that gets the items kept so far and the
    current item and decides whether the current item is a duplicate.
    """
    result: List[T] = []
    append = result.append
    for item in items:
        if not (compare(result, item) if compare else item in result):
            append(item)
    return result


def dupes(
    items: Sequence[T], extract: Optional[Callable[[T, int, Sequence[T]], Any]] = None
) -> List[T]:
    """Get the items that occur more than once in a sequence.

    The result is deduplicated. An ``extract`` function can be passed that gets the
    item, its index and the sequence and returns the value to compare by::

        dupes([1, 2, 3, 3, 4, 5, 5])              # [3, 5]
        dupes([{"id": 1}, {"id": 1}], lambda v, i, s: v["id"])  # [{"id": 1}]
    """
    values = (
        [extract(item, index, items) for index, item in enumerate(items)]
        if extract
        else list(items)
    )
    return dedup(
        [item for index, item in enumerate(items) if values.index(values[index]) != index]
    )
