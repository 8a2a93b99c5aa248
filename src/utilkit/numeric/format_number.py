"""Locale-aware number formatting

The functions in this module are thin wrappers around the number formatting of
Babel which take their defaults from the library configuration. The locale
argument follows :func:`utilkit.config.resolve_locale`.
"""

from __future__ import annotations

import re
from copy import copy
from decimal import ROUND_HALF_UP, localcontext
from typing import Any, Optional

from babel import Locale
from babel.numbers import (
    NumberPattern,
    format_compact_decimal,
    get_minus_sign_symbol,
    get_plus_sign_symbol,
)

from ..config import Config, NumberFormatOptions, get_config, resolve_locale
from ..pyutils import Undefined

__all__ = ["compact", "currency", "intl", "percent", "signed"]

_re_whitespace = re.compile(r"\s+")


def _apply_pattern(
    pattern: NumberPattern,
    value: float,
    locale: Locale,
    minimum_fraction_digits: Optional[int],
    maximum_fraction_digits: Optional[int],
    **kwargs: Any,
) -> str:
    if minimum_fraction_digits is not None or maximum_fraction_digits is not None:
        pattern = copy(pattern)
        low, high = pattern.frac_prec
        if minimum_fraction_digits is not None:
            low = minimum_fraction_digits
            high = max(high, low)
        if maximum_fraction_digits is not None:
            high = maximum_fraction_digits
            low = min(low, high)
        pattern.frac_prec = (low, high)
    # halves are rounded away from zero, as everywhere else in utilkit
    with localcontext() as context:
        context.rounding = ROUND_HALF_UP
        return pattern.apply(value, locale, **kwargs)


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def intl(
    value: float,
    locale: Any = Undefined,
    *,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: Optional[int] = None,
    config: Optional[Config] = None,
) -> str:
    """Format a number with the decimal pattern of the locale.

    For instance, ``intl(1234.5, "de-DE")`` gives ``"1.234,5"``.
    """
    locale = resolve_locale(locale, config)
    return _apply_pattern(
        locale.decimal_formats[None],
        value,
        locale,
        minimum_fraction_digits,
        maximum_fraction_digits,
    )


def _format_styled(
    pattern: NumberPattern,
    value: float,
    locale: Locale,
    defaults: NumberFormatOptions,
    minimum_fraction_digits: Optional[int],
    maximum_fraction_digits: Optional[int],
    spaced: Optional[bool],
    **kwargs: Any,
) -> str:
    formatted = _apply_pattern(
        pattern,
        value,
        locale,
        _pick(minimum_fraction_digits, defaults.minimum_fraction_digits),
        _pick(maximum_fraction_digits, defaults.maximum_fraction_digits),
        **kwargs,
    )
    if not _pick(spaced, defaults.spaced):
        formatted = _re_whitespace.sub("", formatted)
    return formatted


def currency(
    value: float,
    locale: Any = Undefined,
    *,
    currency: Optional[str] = None,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: Optional[int] = None,
    spaced: Optional[bool] = None,
    config: Optional[Config] = None,
) -> str:
    """Format a number as an amount of money.

    Options that are not given are taken from the currency options of the
    configuration. Without space, the number and the currency symbol are joined::

        currency(13.12, "de-DE", currency="EUR")                # "13,12 €"
        currency(13.12, "de-DE", currency="EUR", spaced=False)  # "13,12€"
    """
    config = config or get_config()
    locale = resolve_locale(locale, config)
    defaults = config.currency
    minimum_fraction_digits = _pick(
        minimum_fraction_digits, defaults.minimum_fraction_digits
    )
    maximum_fraction_digits = _pick(
        maximum_fraction_digits, defaults.maximum_fraction_digits
    )
    return _format_styled(
        locale.currency_formats["standard"],
        value,
        locale,
        defaults,
        minimum_fraction_digits,
        maximum_fraction_digits,
        spaced,
        currency=currency or defaults.currency or "USD",
        # fraction digits of the currency itself only apply if none were set
        currency_digits=minimum_fraction_digits is None
        and maximum_fraction_digits is None,
    )


def percent(
    value: float,
    locale: Any = Undefined,
    *,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: Optional[int] = None,
    spaced: Optional[bool] = None,
    config: Optional[Config] = None,
) -> str:
    """Format a fraction as a percentage, e.g. 0.1312 as ``"13.12%"``.

    Options that are not given are taken from the percent options of the
    configuration.
    """
    config = config or get_config()
    locale = resolve_locale(locale, config)
    return _format_styled(
        locale.percent_formats[None],
        value,
        locale,
        config.percent,
        minimum_fraction_digits,
        maximum_fraction_digits,
        spaced,
    )


def signed(
    value: float,
    locale: Any = Undefined,
    *,
    spaced: bool = False,
    zero: bool = False,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: Optional[int] = None,
    config: Optional[Config] = None,
) -> str:
    """Format a number with an explicit plus or minus sign.

    Zero gets no sign unless ``zero`` is set. With ``spaced``, the sign is
    separated from the number by a space (``"+ 1"``).
    """
    locale = resolve_locale(locale, config)
    formatted = intl(
        abs(value),
        locale,
        minimum_fraction_digits=minimum_fraction_digits,
        maximum_fraction_digits=maximum_fraction_digits,
    )
    if value == 0 and not zero:
        return formatted
    if value < 0:
        sign = get_minus_sign_symbol(locale)
    else:
        sign = get_plus_sign_symbol(locale)
    return f"{sign} {formatted}" if spaced else sign + formatted


def compact(
    value: float,
    locale: Any = Undefined,
    *,
    fraction_digits: int = 1,
    long: bool = False,
    config: Optional[Config] = None,
) -> str:
    """Format a number in its short compact form, e.g. 100333 as ``"100.3K"``.

    Set ``long`` to get the long form (``"100.3 thousand"``).
    """
    return format_compact_decimal(
        value,
        format_type="long" if long else "short",
        locale=resolve_locale(locale, config),
        fraction_digits=fraction_digits,
    )
