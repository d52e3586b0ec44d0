"""Core types and interfaces for evented."""

from evented.core.exceptions import ConfigurationError, EventedError
from evented.core.interfaces import Emitter
from evented.core.models import ListenerRecord, OnceWrapper, bind_callback

__all__ = [
    # Models
    "ListenerRecord",
    "OnceWrapper",
    "bind_callback",
    # Interfaces
    "Emitter",
    # Exceptions
    "EventedError",
    "ConfigurationError",
]
