from typing import Iterable, Optional

__all__ = ["join"]


def join(values: Iterable[Optional[str]], delimiter: str) -> str:
    """Join strings with a delimiter, skipping None and empty strings."""
    return delimiter.join(value for value in values if value)
