"""Events capability: mixin, bus and argument normalization."""

from evented.events.api import EVENT_SPLITTER, events_api, split_names
from evented.events.bus import EventBus
from evented.events.mixin import ALL_EVENTS, Events

__all__ = [
    "ALL_EVENTS",
    "EVENT_SPLITTER",
    "EventBus",
    "Events",
    "events_api",
    "split_names",
]
