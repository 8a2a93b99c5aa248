from random import randint
from typing import List, Sequence, TypeVar

__all__ = ["shuffle"]

T = TypeVar("T")


def shuffle(items: Sequence[T]) -> List[T]:
    """Get a shuffled copy of a sequence (Fisher-Yates)."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
