from typing import List, Sequence, TypeVar

__all__ = ["move"]

T = TypeVar("T")


def move(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Get a copy of a sequence with an item moved to a different position.

    A negative target index counts from the end. Target indices beyond the end
    move the item to the end::

        move(["a", "b", "c"], 0, 1)  # ["b", "a", "c"]
    """
    if not items:
        return []
    if to_index < 0:
        to_index += len(items)
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return moved
