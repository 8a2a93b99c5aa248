"""Conversion between string cases

A string of a known case is first split into a sequence of lowercase words which
is then rendered in the target case. The input is not validated against the
source case; strings that do not follow it are converted on a best-effort basis.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, List, Union

__all__ = [
    "CaseKind",
    "CaseConversion",
    "case",
    "convert_case",
    "from_camel",
    "from_kebab",
    "from_pascal",
    "from_snake",
    "from_title",
    "render_words",
    "split_words",
]


class CaseKind(Enum):
    """String cases for multi-word identifiers"""

    TITLE = "title"  # My Example String
    CAMEL = "camel"  # myExampleString
    PASCAL = "pascal"  # MyExampleString
    SNAKE = "snake"  # my_example_string
    KEBAB = "kebab"  # my-example-string


CaseKindOrName = Union[CaseKind, str]

# A capital only starts a word in PascalCase if lowercase letters follow it,
# while in camelCase a lone capital is a word of its own.
_re_pascal_words = re.compile(r"[A-Z][a-z]+|[a-z]+")
_re_camel_words = re.compile(r"[A-Z][a-z]*|[a-z]+")
_re_whitespace = re.compile(r"\s+")


def _capitalize_words(words: List[str]) -> List[str]:
    return [word.capitalize() for word in words]


_splitters: Dict[CaseKind, Callable[[str], List[str]]] = {
    CaseKind.TITLE: lambda value: value.split(" "),
    CaseKind.CAMEL: _re_camel_words.findall,
    CaseKind.PASCAL: _re_pascal_words.findall,
    CaseKind.SNAKE: lambda value: value.split("_"),
    CaseKind.KEBAB: lambda value: value.split("-"),
}

_renderers: Dict[CaseKind, Callable[[List[str]], str]] = {
    CaseKind.TITLE: lambda words: " ".join(_capitalize_words(words)),
    CaseKind.CAMEL: lambda words: "".join(words[:1] + _capitalize_words(words[1:])),
    CaseKind.PASCAL: lambda words: "".join(_capitalize_words(words)),
    CaseKind.SNAKE: "_".join,
    CaseKind.KEBAB: "-".join,
}


def _case_kind(kind: CaseKindOrName) -> CaseKind:
    try:
        return CaseKind(kind)
    except ValueError:
        names = ", ".join(repr(member.value) for member in CaseKind)
        raise ValueError(f"Unknown case {kind!r}, expected one of {names}.") from None


def split_words(kind: CaseKindOrName, value: str) -> List[str]:
    """Split a string of the given case into a sequence of lowercase words."""
    kind = _case_kind(kind)
    words = _splitters[kind](value)
    if kind is not CaseKind.TITLE:
        words = [_re_whitespace.sub("", word) for word in words]
    return [word.lower() for word in words]


def render_words(kind: CaseKindOrName, words: List[str]) -> str:
    """Render a sequence of words in the given case."""
    return _renderers[_case_kind(kind)]([word.lower() for word in words])


def convert_case(source: CaseKindOrName, target: CaseKindOrName, value: str) -> str:
    """Convert a string from the source case to the target case.

    For example, ``convert_case("snake", "camel", "my_example_string")`` returns
    ``"myExampleString"``.
    """
    return render_words(target, split_words(source, value))


class CaseConversion:
    """Conversions of a string from a known case into the other cases.

    The conversions are available as ``to_<case>()`` methods, one for each case
    other than the source case, or through the generic :meth:`to` method.
    """

    __slots__ = "kind", "value"

    kind: CaseKind
    value: str

    def __init__(self, kind: CaseKindOrName, value: str) -> None:
        self.kind = _case_kind(kind)
        self.value = value

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} from {self.kind.value} {self.value!r}>"

    def to(self, target: CaseKindOrName) -> str:
        """Convert the string to the given case."""
        target = _case_kind(target)
        if target is self.kind:
            raise ValueError(f"The string is already in {target.value} case.")
        return convert_case(self.kind, target, self.value)

    def __getattr__(self, name: str) -> Callable[[], str]:
        if name.startswith("to_"):
            try:
                target = CaseKind(name[3:])
            except ValueError:
                pass
            else:
                if target is not self.kind:
                    return lambda: convert_case(self.kind, target, self.value)
        raise AttributeError(
            f"{self.__class__.__name__!r} object has no attribute {name!r}"
        )

    def __dir__(self) -> List[str]:
        targets = [f"to_{kind.value}" for kind in CaseKind if kind is not self.kind]
        return sorted(set(super().__dir__()) | set(targets))


def from_title(value: str) -> CaseConversion:
    """Convert a string from Title Case."""
    return CaseConversion(CaseKind.TITLE, value)


def from_camel(value: str) -> CaseConversion:
    """Convert a string from camelCase."""
    return CaseConversion(CaseKind.CAMEL, value)


def from_pascal(value: str) -> CaseConversion:
    """Convert a string from PascalCase."""
    return CaseConversion(CaseKind.PASCAL, value)


def from_snake(value: str) -> CaseConversion:
    """Convert a string from snake_case."""
    return CaseConversion(CaseKind.SNAKE, value)


def from_kebab(value: str) -> CaseConversion:
    """Convert a string from kebab-case."""
    return CaseConversion(CaseKind.KEBAB, value)


class _Case:
    """Namespace bundling the case conversion entry points."""

    __slots__ = ()

    from_title = staticmethod(from_title)
    from_camel = staticmethod(from_camel)
    from_pascal = staticmethod(from_pascal)
    from_snake = staticmethod(from_snake)
    from_kebab = staticmethod(from_kebab)
    convert = staticmethod(convert_case)


case = _Case()
