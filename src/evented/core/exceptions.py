"""Custom exceptions for evented.

The emitter operations themselves never raise for malformed input and never
wrap listener exceptions; these classes cover the configuration layer.
"""


class EventedError(Exception):
    """Base exception for all evented errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(EventedError):
    """Raised when there's a configuration problem."""

    pass
