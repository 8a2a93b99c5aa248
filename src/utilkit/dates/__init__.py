"""Date utilities"""

from .format_date import STYLES, DateLike, intl, to_datetime

__all__ = ["DateLike", "STYLES", "intl", "to_datetime"]
