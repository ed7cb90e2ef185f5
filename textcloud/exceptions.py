"""Exceptions raised by Textcloud."""


class InvalidInputError(ValueError):
    """Raised when the text argument is neither text, a text collection, nor a path."""
