"""Locale-aware date formatting"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo as TzInfo
from typing import Any, Optional, Union

from babel.dates import format_date, format_datetime, format_time, get_datetime_format
from dateutil.parser import isoparse

from ..config import Config, resolve_locale
from ..pyutils import Undefined

__all__ = ["DateLike", "STYLES", "intl", "to_datetime"]

DateLike = Union[date, datetime, str, int, float]

STYLES = ("full", "long", "medium", "short")


def to_datetime(value: DateLike) -> date:
    """Convert a date-like value to a date or datetime object.

    Strings are parsed as ISO 8601, numbers are taken as milliseconds since the
    epoch (UTC) as in JavaScript.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return isoparse(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    raise TypeError(f"Cannot convert {value!r} to a date.")


def _check_style(style: Optional[str]) -> None:
    if style is not None and style not in STYLES:
        raise ValueError(f"Invalid style {style!r}, expected one of {STYLES}.")


def intl(
    value: DateLike,
    locale: Any = Undefined,
    *,
    date_style: Optional[str] = None,
    time_style: Optional[str] = None,
    pattern: Optional[str] = None,
    tzinfo: Optional[TzInfo] = None,
    config: Optional[Config] = None,
) -> str:
    """Format a date, a time or both according to the locale.

    Either pass a style for the date part, the time part or both, or a custom
    Babel/LDML ``pattern`` like ``"yyyy-MM-dd"``. Without any of these the date is
    formatted with the short style::

        intl(date(2024, 1, 2), "en-US", date_style="medium")  # "Jan 2, 2024"
    """
    _check_style(date_style)
    _check_style(time_style)
    locale = resolve_locale(locale, config)
    value = to_datetime(value)
    if (pattern or time_style) and not isinstance(value, datetime):
        value = datetime.combine(value, time())

    if pattern:
        return format_datetime(value, pattern, tzinfo=tzinfo, locale=locale)
    if not time_style:
        return format_date(value, date_style or "short", locale=locale)
    formatted_time = format_time(value, time_style, tzinfo=tzinfo, locale=locale)
    if not date_style:
        return formatted_time
    formatted_date = format_date(value, date_style, locale=locale)
    return (
        get_datetime_format(date_style, locale=locale)
        .replace("'", "")
        .replace("{0}", formatted_time)
        .replace("{1}", formatted_date)
    )
