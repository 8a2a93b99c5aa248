"""Awaitable utilities"""

from .sequential import seq, wait

__all__ = ["seq", "wait"]
