"""Sequence utilities

The :mod:`utilkit.arrays` package contains helpers for lists and other
sequences. None of them changes the sequence it is given.
"""

from .async_iteration import (
    async_every,
    async_filter,
    async_flat_map,
    async_map,
    async_some,
)
from .chunk import chunk, each_chunk
from .dedup import dedup, dupes
from .find_or_throw import find_or_throw
from .first_last import first, last
from .move import move
from .shuffle import shuffle

__all__ = [
    "async_every",
    "async_filter",
    "async_flat_map",
    "async_map",
    "async_some",
    "chunk",
    "dedup",
    "dupes",
    "each_chunk",
    "find_or_throw",
    "first",
    "last",
    "move",
    "shuffle",
]
