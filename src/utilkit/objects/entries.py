from typing import Any, Dict, Hashable, Iterable, List, Mapping, Tuple, TypeVar

__all__ = ["entries", "from_entries", "has_key", "keys"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def keys(mapping: Mapping[K, Any]) -> List[K]:
    """Get the keys of a mapping as a list."""
    return list(mapping)


def entries(mapping: Mapping[K, V]) -> List[Tuple[K, V]]:
    """Get the (key, value) pairs of a mapping as a list."""
    return list(mapping.items())


def from_entries(pairs: Iterable[Tuple[K, V]]) -> Dict[K, V]:
    """Build a dictionary from (key, value) pairs."""
    return dict(pairs)


def has_key(mapping: Mapping[Any, Any], key: Any) -> bool:
    """Check whether a mapping has the given key.

    Unhashable keys are never contained, so they give False instead of an error.
    """
    try:
        return key in mapping
    except TypeError:
        return False
