"""Errors

The :mod:`utilkit.error` package contains the exceptions raised by utilkit.
"""

from .utilkit_error import UtilkitError

from .not_found_error import NotFoundError

from .locale_error import LocaleError

__all__ = ["LocaleError", "NotFoundError", "UtilkitError"]
