from typing import Optional

from .utilkit_error import UtilkitError

__all__ = ["LocaleError"]


class LocaleError(UtilkitError, ValueError):
    """A locale identifier could not be resolved."""

    locale: Optional[str]
    """The offending locale identifier"""

    def __init__(self, message: str, locale: Optional[str] = None) -> None:
        super().__init__(message)
        self.locale = locale
