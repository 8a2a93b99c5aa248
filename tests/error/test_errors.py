from utilkit.error import LocaleError, NotFoundError, UtilkitError


def describe_utilkit_error():
    def is_an_exception_with_a_message():
        error = UtilkitError("msg")
        assert isinstance(error, Exception)
        assert error.message == "msg"
        assert str(error) == "msg"
        assert repr(error) == "UtilkitError('msg')"


def describe_not_found_error():
    def is_a_lookup_error():
        error = NotFoundError("not found")
        assert isinstance(error, UtilkitError)
        assert isinstance(error, LookupError)
        assert repr(error) == "NotFoundError('not found')"


def describe_locale_error():
    def is_a_value_error_with_the_locale():
        error = LocaleError("bad locale", "xx")
        assert isinstance(error, UtilkitError)
        assert isinstance(error, ValueError)
        assert error.locale == "xx"
        assert LocaleError("bad locale").locale is None
