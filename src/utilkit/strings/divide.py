"""Divide strings into groups"""

from __future__ import annotations

__all__ = ["divide"]


def divide(value: str, size: int, separator: str, align: str = "start") -> str:
    """Divide a string into groups of ``size`` characters joined by a separator.

    With ``align="start"`` the groups are counted from the start of the string so
    that the last group may be shorter, with ``align="end"`` they are counted from
    the end so that the first group may be shorter::

        divide("1234567890", 3, " ")               # "123 456 789 0"
        divide("1234567890", 3, " ", align="end")  # "1 234 567 890"
    """
    if size <= 0:
        raise ValueError("The group size must be a positive number.")
    if align == "start":
        offset = 0
    elif align == "end":
        offset = len(value) % size
    else:
        raise ValueError(f"Invalid alignment {align!r}, expected 'start' or 'end'.")
    groups = [value[:offset]] if offset else []
    groups.extend(value[i : i + size] for i in range(offset, len(value), size))
    return separator.join(groups)
