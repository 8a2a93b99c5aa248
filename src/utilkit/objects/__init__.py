"""Dictionary utilities

The :mod:`utilkit.objects` package contains helpers for dictionaries and other
mappings. None of them changes the mapping it is given.
"""

from .entries import entries, from_entries, has_key, keys
from .flatten import flatten
from .pick import filter_entries, omit, pick, remap, split

__all__ = [
    "entries",
    "filter_entries",
    "flatten",
    "from_entries",
    "has_key",
    "keys",
    "omit",
    "pick",
    "remap",
    "split",
]
