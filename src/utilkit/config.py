"""Library configuration

The configuration is an immutable snapshot. :func:`configure` never changes the
current snapshot in place, it builds a new one and replaces the old one wholesale.
All formatting functions also accept an explicit ``config`` argument, so callers
that need different settings can pass their own :class:`Config` around instead
of touching the process-wide one.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Optional, Union

from babel import Locale, UnknownLocaleError, default_locale

from .error import LocaleError
from .pyutils import Undefined

__all__ = [
    "Config",
    "NumberFormatOptions",
    "DEFAULT_CONFIG",
    "FALLBACK_LOCALE",
    "configure",
    "get_config",
    "reset_config",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en_US"


class NumberFormatOptions(NamedTuple):
    """Default options for a style of number formatting"""

    minimum_fraction_digits: Optional[int] = None
    maximum_fraction_digits: Optional[int] = None
    currency: Optional[str] = None
    """ISO 4217 currency code, only used for currencies"""
    spaced: bool = True
    """whether to keep the whitespace between number and symbol"""


OptionsOverride = Union[NumberFormatOptions, Mapping[str, Any], None]


class Config(NamedTuple):
    """Configuration snapshot"""

    locale: Optional[str] = None
    """default locale for all formatting functions, None for the system locale"""
    currency: NumberFormatOptions = NumberFormatOptions(2, 2, "USD")
    percent: NumberFormatOptions = NumberFormatOptions(2, 2)

    def merge(
        self,
        locale: Any = Undefined,
        currency: OptionsOverride = None,
        percent: OptionsOverride = None,
    ) -> Config:
        """Return a new snapshot with the given settings merged in."""
        return Config(
            self.locale if locale is Undefined else locale,
            _merge_options(self.currency, currency),
            _merge_options(self.percent, percent),
        )


def _merge_options(
    options: NumberFormatOptions, override: OptionsOverride
) -> NumberFormatOptions:
    if override is None:
        return options
    if isinstance(override, NumberFormatOptions):
        return override
    return options._replace(**override)


DEFAULT_CONFIG = Config()

_config = DEFAULT_CONFIG


def get_config() -> Config:
    """Get the current configuration snapshot."""
    return _config


def configure(
    locale: Any = Undefined,
    currency: OptionsOverride = None,
    percent: OptionsOverride = None,
) -> Config:
    """Replace the configuration with one merged from the current settings.

    Currency and percent options can be given as mappings, in which case only the
    given fields are replaced, or as complete :class:`NumberFormatOptions`.
    Unknown option names raise a ValueError.
    """
    global _config
    new_config = _config.merge(locale, currency, percent)
    logger.debug("Replacing configuration %r with %r.", _config, new_config)
    _config = new_config
    return new_config


def reset_config() -> Config:
    """Restore the default configuration."""
    global _config
    _config = DEFAULT_CONFIG
    return _config


def resolve_locale(locale: Any = Undefined, config: Optional[Config] = None) -> Locale:
    """Resolve a locale argument to a Babel locale.

    ``None`` selects the system locale, ``Undefined`` selects the configured
    locale (which may itself be the system locale), and any other value is parsed
    as a locale identifier. Both ``en-US`` and ``en_US`` are accepted, and Babel
    locales are returned as they are.
    """
    if isinstance(locale, Locale):
        return locale
    if locale is Undefined:
        locale = (config or _config).locale
    if locale is None:
        locale = default_locale() or FALLBACK_LOCALE
    try:
        return Locale.parse(str(locale).replace("-", "_"))
    except (UnknownLocaleError, ValueError) as error:
        raise LocaleError(f"Unknown locale {locale!r}.", locale) from error
