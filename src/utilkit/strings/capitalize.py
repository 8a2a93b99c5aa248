"""Capitalization"""

import re

__all__ = ["capitalize", "fcapitalize"]

# first non-space character of the string, after whitespace or after an opening
# quote or bracket
_re_word_start = re.compile(r"(?:^|\s|[\"'(\[{])+\S")


def capitalize(value: str, lower: bool = False) -> str:
    """Capitalize the first letter of every word in a string.

    If ``lower`` is set, all other letters are lowercased, otherwise they are left
    as they are::

        capitalize("fix this string")    # "Fix This String"
        capitalize("javaSCrIPT")         # "JavaSCrIPT"
        capitalize("javaSCrIPT", True)   # "Javascript"
    """
    if lower:
        value = value.lower()
    return _re_word_start.sub(lambda match: match.group().upper(), value)


def fcapitalize(value: str, lower: bool = False) -> str:
    """Capitalize only the first letter of a string."""
    if lower:
        value = value.lower()
    return value[:1].upper() + value[1:]
