__all__ = ["UtilkitError"]


class UtilkitError(Exception):
    """Base class for all errors raised by utilkit.

    Invalid arguments still raise the built-in ``ValueError`` or ``TypeError``;
    subclasses of this class describe failures that are specific to the library.
    """

    message: str
    """A message describing the error"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"
