"""evented: named publish/subscribe for any Python object."""

from evented.core import ConfigurationError, Emitter, EventedError
from evented.events import ALL_EVENTS, EventBus, Events

__version__ = "0.1.0"

__all__ = [
    "ALL_EVENTS",
    "ConfigurationError",
    "Emitter",
    "EventBus",
    "EventedError",
    "Events",
]
