"""The ``Events`` mixin.

Any class can inherit ``Events`` to get named publish/subscribe::

    class Document(Events):
        ...

    doc = Document()
    doc.on("saved", lambda path: print("saved", path))
    doc.trigger("saved", "/tmp/a.txt")

Listeners registered under ``"all"`` receive every event, with the event
name prepended to the arguments. ``listen_to`` / ``stop_listening`` are the
inversion-of-control forms: the listener keeps track of the emitters it
subscribed to so it can unwind them in one call.

All operations return the host and never raise for malformed arguments.
Exceptions raised by listeners propagate out of ``trigger`` unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable

import structlog

from evented.config.settings import get_settings
from evented.core.interfaces import Emitter
from evented.core.models import ListenerRecord, OnceWrapper
from evented.events.api import events_api, is_name_list, map_context, split_names
from evented.utils.ids import unique_id

logger = structlog.get_logger(__name__)

ALL_EVENTS = "all"


def _is_name(name: Any) -> bool:
    if not name:
        return False
    try:
        hash(name)
    except TypeError:
        return False
    return True


def _forward(name: Any, callback: Any, context: Any) -> tuple[Any, ...]:
    if isinstance(name, Mapping):
        return (map_context(callback, context),)
    return (callback, context)


def _dispatch(records: Iterable[ListenerRecord], args: tuple[Any, ...]) -> None:
    for record in records:
        if record.removed:
            continue
        record.invoke(args)


class Events:
    """Mixin giving its host ``on``/``off``/``trigger`` and friends.

    State is created lazily: a host that never subscribes carries no
    tables.
    """

    _events: dict[Any, list[ListenerRecord]] | None = None
    _listening_to: dict[str, Any] | None = None
    _listen_id: str | None = None

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def on(
        self,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Events:
        """Bind *callback* to *name*. ``"all"`` binds it to every event."""
        if events_api(self, "on", name, _forward(name, callback, context)):
            return self
        if not _is_name(name) or not callable(callback):
            return self

        if self._events is None:
            self._events = {}

        self._events.setdefault(name, []).append(
            ListenerRecord(
                callback=callback,
                context=context,
                ctx=self if context is None else context,
            )
        )
        return self

    def once(
        self,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Events:
        """Bind *callback* for a single invocation, then remove it."""
        if events_api(self, "once", name, _forward(name, callback, context)):
            return self
        if not _is_name(name) or not callable(callback):
            return self

        wrapper = OnceWrapper(
            callback,
            self if context is None else context,
            lambda w: self.off(name, w),
        )
        return self.on(name, wrapper, context)

    def off(
        self,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
        context: Any = None,
    ) -> Events:
        """Remove one or many callbacks.

        With no arguments every listener is removed. Otherwise a record is
        removed when it matches every argument given: *name* restricts the
        events searched, *callback* matches the stored callback or the
        original behind a ``once`` wrapper, *context* matches by identity.
        """
        if self._events is None:
            return self
        if events_api(self, "off", name, _forward(name, callback, context)):
            return self

        if not name and callback is None and context is None:
            for records in self._events.values():
                for record in records:
                    record.removed = True
            self._events = None
            logger.debug("events.reset", host=type(self).__name__)
            return self

        if name:
            if not _is_name(name):
                return self
            names = [name]
        else:
            names = list(self._events)

        for event in names:
            records = self._events.get(event)
            if not records:
                continue

            remaining = []
            for record in records:
                if record.matches(callback, context):
                    record.removed = True
                else:
                    remaining.append(record)

            if remaining:
                self._events[event] = remaining
            else:
                del self._events[event]

        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def trigger(self, name: Any = None, *args: Any) -> Events:
        """Fire *name*, passing *args* to each listener.

        ``"all"`` listeners run after the specific ones and receive the
        event name as their first argument. With a map, each value is
        prepended to *args* for its event.
        """
        if not self._events:
            return self
        if events_api(self, "trigger", name, args):
            return self
        if not _is_name(name):
            return self

        # Snapshot at dispatch start; listeners added during dispatch wait
        # for the next trigger.
        records = tuple(self._events.get(name, ()))
        all_records = tuple(self._events.get(ALL_EVENTS, ()))

        if get_settings().trace_dispatch:
            logger.debug(
                "events.trigger",
                host=type(self).__name__,
                event_name=name,
                listeners=len(records),
                all_listeners=len(all_records),
            )

        if records:
            _dispatch(records, args)
        if all_records:
            _dispatch(all_records, (name, *args))

        return self

    # ------------------------------------------------------------------
    # Inversion of control
    # ------------------------------------------------------------------

    def listen_to(
        self,
        obj: Emitter | None = None,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
    ) -> Events:
        """Subscribe to *obj* with this object as the context.

        The emitter is remembered so ``stop_listening`` can unwind it. With an
        event map and no callback, the map values are the callbacks.
        """
        if obj is None or not name:
            return self
        if not isinstance(name, Mapping) and (
            not _is_name(name) or not callable(callback)
        ):
            return self

        if self._listening_to is None:
            self._listening_to = {}

        listen_id = getattr(obj, "_listen_id", None)
        if listen_id is None:
            listen_id = unique_id(get_settings().listen_id_prefix)
            obj._listen_id = listen_id

        self._listening_to[listen_id] = obj
        obj.on(name, callback, self)

        logger.debug(
            "events.listen_to",
            listener=type(self).__name__,
            emitter=listen_id,
            event_name=name if isinstance(name, str) else sorted(map(str, name)),
        )
        return self

    def listen_to_once(
        self,
        obj: Emitter | None = None,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
    ) -> Events:
        """Like ``listen_to`` but each event fires the callback only once."""
        if isinstance(name, Mapping):
            for event, handler in list(name.items()):
                self.listen_to_once(obj, event, handler)
            return self

        if is_name_list(name):
            for event in split_names(name):
                self.listen_to_once(obj, event, callback)
            return self

        if obj is None or not _is_name(name) or not callable(callback):
            return self

        wrapper = OnceWrapper(
            callback,
            self,
            lambda w: self.stop_listening(obj, name, w),
        )
        return self.listen_to(obj, name, wrapper)

    def stop_listening(
        self,
        obj: Emitter | None = None,
        name: Any = None,
        callback: Callable[..., Any] | None = None,
    ) -> Events:
        """Remove subscriptions this object made with ``listen_to``.

        With no arguments every emitter in the index is unwound. An emitter
        is dropped from the index once it holds nothing registered with this
        object as the context.
        """
        listening_to = self._listening_to
        if listening_to is None:
            return self

        remove = not name and callback is None

        if obj is not None:
            targets = {getattr(obj, "_listen_id", None): obj}
        else:
            targets = dict(listening_to)

        for listen_id, emitter in targets.items():
            emitter.off(name, callback, self)
            if remove or not self._is_listening_to(emitter):
                listening_to.pop(listen_id, None)

        if obj is None and remove:
            self._listening_to = None

        logger.debug(
            "events.stop_listening",
            listener=type(self).__name__,
            emitters=sorted(str(listen_id) for listen_id in targets),
            remaining=len(listening_to),
        )
        return self

    def _is_listening_to(self, emitter: Any) -> bool:
        table = getattr(emitter, "_events", None)
        if not table:
            return False
        return any(
            record.context is self
            for records in table.values()
            for record in records
        )
