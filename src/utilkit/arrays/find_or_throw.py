from typing import Callable, Optional, Sequence, TypeVar

from ..error import NotFoundError

__all__ = ["find_or_throw"]

T = TypeVar("T")


def find_or_throw(
    items: Sequence[T],
    predicate: Callable[[T, int, Sequence[T]], object],
    error: Optional[BaseException] = None,
) -> T:
    """Find the first item satisfying the predicate or raise an error.

    The predicate gets the item, its index and the sequence. Unlike ``next()`` on a
    generator expression this also tells apart a match that is None or otherwise
    falsy from no match at all.

    If nothing is found, the given error or a :class:`NotFoundError` is raised.
    """
    for index, item in enumerate(items):
        if predicate(item, index, items):
            return item
    raise error or NotFoundError("find_or_throw yielded no results")
