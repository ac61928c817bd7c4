"""Custom exceptions for the structured logger."""


class SloggerError(Exception):
    """Base exception for all structured logger errors."""

    pass


class InvalidArgumentError(SloggerError, ValueError):
    """Raised when a required argument is missing or malformed.

    This covers a missing gate logger at construction time and an invalid
    context key passed to a fork.
    """

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(f"{argument} {message}")
