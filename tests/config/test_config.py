import logging

from babel import Locale
from pytest import raises

from utilkit import Undefined
from utilkit.config import (
    DEFAULT_CONFIG,
    Config,
    NumberFormatOptions,
    configure,
    get_config,
    reset_config,
    resolve_locale,
)
from utilkit.error import LocaleError


def describe_config():
    def has_defaults():
        config = get_config()
        assert config is DEFAULT_CONFIG
        assert config.locale is None
        assert config.currency == NumberFormatOptions(2, 2, "USD", True)
        assert config.percent == NumberFormatOptions(2, 2)

    def replaces_the_snapshot_on_configure():
        config = get_config()
        new_config = configure(locale="es-ES")
        assert new_config is get_config()
        assert new_config is not config
        assert new_config == config._replace(locale="es-ES")
        assert config.locale is None

    def merges_number_format_options():
        configure(currency={"currency": "EUR"})
        configure(currency={"spaced": False})
        assert get_config().currency == NumberFormatOptions(2, 2, "EUR", False)
        assert get_config().percent == DEFAULT_CONFIG.percent

    def replaces_complete_number_format_options():
        configure(percent=NumberFormatOptions(maximum_fraction_digits=1))
        assert get_config().percent == NumberFormatOptions(None, 1)

    def keeps_the_locale_unless_given():
        configure(locale="de-DE")
        configure(currency={"currency": "EUR"})
        assert get_config().locale == "de-DE"
        configure(locale=None)
        assert get_config().locale is None

    def rejects_unknown_options():
        with raises(ValueError):
            configure(currency={"colour": "red"})

    def can_be_reset():
        configure(locale="de-DE")
        assert reset_config() is DEFAULT_CONFIG
        assert get_config() is DEFAULT_CONFIG

    def is_immutable():
        config = get_config()
        with raises(AttributeError):
            config.locale = "de-DE"  # type: ignore

    def logs_reconfiguration(caplog):
        with caplog.at_level(logging.DEBUG, logger="utilkit.config"):
            configure(locale="fr-FR")
        assert "Replacing configuration" in caplog.text


def describe_resolve_locale():
    def parses_locale_identifiers():
        assert resolve_locale("en-US") == Locale("en", "US")
        assert resolve_locale("de_DE") == Locale("de", "DE")

    def keeps_locale_objects():
        locale = Locale("fr")
        assert resolve_locale(locale) is locale

    def uses_the_configured_locale_if_undefined():
        configure(locale="es-ES")
        assert resolve_locale() == Locale("es", "ES")
        assert resolve_locale(Undefined) == Locale("es", "ES")
        assert resolve_locale(Undefined, Config(locale="it")) == Locale("it")

    def uses_the_system_locale_if_none(monkeypatch):
        monkeypatch.setattr("utilkit.config.default_locale", lambda: "nl_NL")
        configure(locale="es-ES")
        assert resolve_locale(None) == Locale("nl", "NL")
        reset_config()
        assert resolve_locale() == Locale("nl", "NL")

    def falls_back_without_system_locale(monkeypatch):
        monkeypatch.setattr("utilkit.config.default_locale", lambda: None)
        assert resolve_locale(None) == Locale("en", "US")

    def rejects_unknown_locales():
        with raises(LocaleError) as exc_info:
            resolve_locale("xx-YY")
        assert exc_info.value.locale == "xx-YY"
        assert isinstance(exc_info.value, ValueError)
