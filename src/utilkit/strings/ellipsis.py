__all__ = ["ellipsis"]


def ellipsis(value: str, length: int) -> str:
    """Cut a string at the given length and add an ellipsis if it was longer."""
    if len(value) <= length:
        return value
    return value[:length] + "..."
