import re
from typing import Pattern, Union
from unicodedata import combining, normalize

__all__ = ["uri"]

_re_replace = re.compile(r"[^a-z0-9_]+", re.IGNORECASE)
_re_remove = re.compile(r"^-|-$")


def uri(
    value: str,
    replace_pattern: Union[str, Pattern[str]] = _re_replace,
    replace_character: str = "-",
    remove_pattern: Union[str, Pattern[str]] = _re_remove,
) -> str:
    """Transform a string into an URI-like slug.

    Accents are stripped, runs of characters matching the replace pattern are
    replaced with a dash, and matches of the remove pattern (a leading or trailing
    dash by default) are removed::

        uri("Nike Air Force 1 '07")  # "nike-air-force-1-07"
    """
    value = "".join(char for char in normalize("NFD", value) if not combining(char))
    value = re.sub(replace_pattern, replace_character, value)
    return re.sub(remove_pattern, "", value).lower()
