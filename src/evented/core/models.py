"""Listener records stored in a host's subscription table."""

from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable


def bind_callback(callback: Callable[..., Any], target: Any) -> Callable[..., Any]:
    """Resolve *callback* against its call target.

    A plain function that is the class attribute of *target*'s type (an
    unbound method such as ``Widget.render``) is bound to *target*, so that
    *target* becomes ``self``. Static and class methods, and anything else,
    are returned unchanged.
    """
    if isinstance(callback, types.FunctionType) and target is not None:
        if inspect.getattr_static(type(target), callback.__name__, None) is callback:
            return types.MethodType(callback, target)
    return callback


class OnceWrapper:
    """A callback that runs its original at most once.

    ``remove`` is called with the wrapper itself before the original runs,
    so the record is gone from the table by the time user code executes.
    ``original`` stays reachable so ``off(name, original)`` still matches.
    """

    __slots__ = ("original", "target", "_remove", "_called")

    def __init__(
        self,
        original: Callable[..., Any],
        target: Any,
        remove: Callable[[OnceWrapper], Any],
    ) -> None:
        self.original = original
        self.target = target
        self._remove = remove
        self._called = False

    @property
    def called(self) -> bool:
        return self._called

    def __call__(self, *args: Any) -> Any:
        if self._called:
            return None
        self._called = True
        self._remove(self)
        return bind_callback(self.original, self.target)(*args)

    def __repr__(self) -> str:
        return f"OnceWrapper({self.original!r})"


@dataclass(eq=False)
class ListenerRecord:
    """One registration in a subscription table.

    ``context`` is what the caller passed (``None`` when absent) and is what
    removal compares against; ``ctx`` is the effective call target.
    """

    callback: Callable[..., Any]
    context: Any
    ctx: Any
    removed: bool = False

    def matches(self, callback: Any = None, context: Any = None) -> bool:
        """True when every given field matches this record."""
        if callback is not None and callback != self.callback:
            wrapper = self.callback
            if not isinstance(wrapper, OnceWrapper) or callback != wrapper.original:
                return False
        if context is not None and context is not self.context:
            return False
        return True

    def invoke(self, args: tuple[Any, ...]) -> Any:
        if isinstance(self.callback, OnceWrapper):
            return self.callback(*args)
        return bind_callback(self.callback, self.ctx)(*args)
