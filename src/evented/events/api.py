"""Argument normalization for the events API.

Expands the convenience forms accepted by ``on``, ``once``, ``off`` and
``trigger`` into repeated single-event calls:

* event maps, ``{"change": on_change, "blur": on_blur}``
* space separated names, ``"change blur"``
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

EVENT_SPLITTER = re.compile(r"\s+")


def split_names(name: str) -> list[str]:
    """Split a space separated name list, ``" a  b"`` -> ``["a", "b"]``."""
    return [part for part in EVENT_SPLITTER.split(name) if part]


def is_name_list(name: Any) -> bool:
    return isinstance(name, str) and EVENT_SPLITTER.search(name) is not None


def map_context(callback: Any, context: Any) -> Any:
    """Context for an event-map call.

    With a map, the slot that normally holds the callback carries the
    context, so ``on({"a": f}, ctx)`` and ``on({"a": f}, context=ctx)`` agree.
    """
    return context if context is not None else callback


def events_api(obj: Any, action: str, name: Any, rest: tuple[Any, ...]) -> bool:
    """Re-dispatch a map or name-list call to ``obj.<action>``.

    Each map entry becomes ``action(key, value, *rest)`` and each listed name
    becomes ``action(name, *rest)``.

    Returns:
        True when the call was fully handled here, False when the caller
        should continue with *name* as one literal event name.
    """
    if isinstance(name, Mapping):
        method = getattr(obj, action)
        for key, value in list(name.items()):
            method(key, value, *rest)
        return True

    if is_name_list(name):
        method = getattr(obj, action)
        for single in split_names(name):
            method(single, *rest)
        return True

    return False
