"""String utilities

The :mod:`utilkit.strings` package contains helpers for transforming and
formatting strings, including the conversion between string cases.
"""

from .capitalize import capitalize, fcapitalize
from .convert_case import (
    CaseConversion,
    CaseKind,
    case,
    convert_case,
    from_camel,
    from_kebab,
    from_pascal,
    from_snake,
    from_title,
    render_words,
    split_words,
)
from .divide import divide
from .ellipsis import ellipsis
from .is_in import is_in
from .join import join
from .random_string import random
from .uri import uri

__all__ = [
    "CaseConversion",
    "CaseKind",
    "capitalize",
    "case",
    "convert_case",
    "divide",
    "ellipsis",
    "fcapitalize",
    "from_camel",
    "from_kebab",
    "from_pascal",
    "from_snake",
    "from_title",
    "is_in",
    "join",
    "random",
    "render_words",
    "split_words",
    "uri",
]
