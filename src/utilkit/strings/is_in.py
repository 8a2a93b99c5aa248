from typing import Collection

__all__ = ["is_in"]


def is_in(value: str, targets: Collection[str]) -> bool:
    """Check whether a string is one of the given targets."""
    return value in targets
