from typing import Optional, Sequence, TypeVar

__all__ = ["first", "last"]

T = TypeVar("T")


def first(items: Optional[Sequence[T]]) -> Optional[T]:
    """Get the first item of a sequence, or None if it is empty."""
    return items[0] if items else None


def last(items: Optional[Sequence[T]]) -> Optional[T]:
    """Get the last item of a sequence, or None if it is empty."""
    return items[-1] if items else None
