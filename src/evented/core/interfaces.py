"""Protocol definitions.

An emitter is anything that carries the event operations, whether it mixes
in ``Events`` or implements them some other way. ``listen_to`` and
``stop_listening`` only rely on this surface plus the emitter's ``_events``
table.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Emitter(Protocol):
    """Object that accepts subscriptions and dispatches named events."""

    def on(
        self,
        name: Any,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Any: ...

    def off(
        self,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Any: ...

    def trigger(self, name: Any, *args: Any) -> Any: ...
