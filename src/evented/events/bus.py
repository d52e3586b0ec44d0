"""Standalone event bus.

A host that carries nothing but the events capability, for code that
prefers holding an emitter to inheriting from ``Events``. Typed event
objects can be published too: they are dispatched under their class name.
"""

from __future__ import annotations

from typing import Any, Callable

from evented.events.mixin import Events


class EventBus(Events):
    """Synchronous in-memory event bus."""

    def subscribe(self, event_type: type, handler: Callable[..., Any]) -> EventBus:
        """Register *handler* to be called when an *event_type* is published."""
        return self.on(event_type.__name__, handler)

    def unsubscribe(self, event_type: type, handler: Callable[..., Any]) -> EventBus:
        return self.off(event_type.__name__, handler)

    def publish(self, event: Any) -> EventBus:
        """Dispatch *event* to the handlers subscribed to its type."""
        return self.trigger(type(event).__name__, event)

    def __repr__(self) -> str:
        events = self._events or {}
        return f"EventBus(events={sorted(map(str, events))})"
