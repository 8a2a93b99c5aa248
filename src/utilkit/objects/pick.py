"""Selection of dictionary entries"""

from __future__ import annotations

from typing import Any, Callable, Collection, Dict, Hashable, List, Mapping, Tuple, TypeVar

__all__ = ["filter_entries", "omit", "pick", "remap", "split"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def pick(mapping: Mapping[K, V], keys: Collection[K]) -> Dict[K, V]:
    """Get a dictionary with only the given keys.

    Keys missing in the mapping are skipped.
    """
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: Mapping[K, V], keys: Collection[K]) -> Dict[K, V]:
    """Get a dictionary without the given keys."""
    return {key: value for key, value in mapping.items() if key not in keys}


def filter_entries(
    mapping: Mapping[K, V], predicate: Callable[[Tuple[K, V], int], Any]
) -> Dict[K, V]:
    """Get a dictionary with the entries satisfying the predicate.

    The predicate gets the (key, value) pair and its index::

        filter_entries({"x": 6, "y": "apple"}, lambda entry, i: entry[0] != "x")
    """
    return dict(
        entry
        for index, entry in enumerate(mapping.items())
        if predicate(entry, index)
    )


def remap(mapping: Mapping[K, Any], value: V) -> Dict[K, V]:
    """Get a dictionary with the same keys, all mapped to the given value."""
    return dict.fromkeys(mapping, value)


def split(mapping: Mapping[K, V], *groups: Collection[K]) -> List[Dict[K, V]]:
    """Split a mapping into one dictionary per group of keys.

    Keys that are not in the mapping are skipped::

        split({"a": 1, "b": 2, "c": 3}, ["a", "b"], ["c"])  # [{"a": 1, "b": 2}, {"c": 3}]
    """
    return [pick(mapping, group) for group in groups]
