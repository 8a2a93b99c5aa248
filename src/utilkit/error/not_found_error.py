from .utilkit_error import UtilkitError

__all__ = ["NotFoundError"]


class NotFoundError(UtilkitError, LookupError):
    """A lookup yielded no results."""
