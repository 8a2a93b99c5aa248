from random import random as random_float

from .ranges import clamp
from .rounding import Rounding, get_rounding

__all__ = ["random"]


def random(minimum: float, maximum: float, rounding: Rounding = "ceil") -> float:
    """Get a random number between minimum and maximum (inclusive).

    The number is rounded with the given rounding, so by default an integer is
    returned. Pass None as rounding to get a fractional number.
    """
    round_fn = get_rounding(rounding)
    value = round_fn(random_float() * (maximum - minimum + 1) + minimum)
    return clamp(value, (minimum, maximum))
