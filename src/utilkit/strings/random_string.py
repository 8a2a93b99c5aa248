from random import choice
from string import ascii_letters, digits

__all__ = ["random"]

ALPHANUMERIC_CHARS = ascii_letters + digits
SYMBOLS = "!@#$%^&*()-_+=<>?"


def random(length: int, allow_symbols: bool = True) -> str:
    """Generate a random string of letters, digits and optionally symbols.

    Not suitable for secrets, use the :mod:`secrets` module for these.
    """
    chars = ALPHANUMERIC_CHARS + SYMBOLS if allow_symbols else ALPHANUMERIC_CHARS
    return "".join(choice(chars) for _i in range(length))
