"""Synchronous observer registry for editor state changes."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Dispatch events to listeners on the caller's thread.

    A listener subscribed to a type also receives events of its subclasses.
    ``on_all`` listeners run first, then typed listeners from the most
    specific type outward, each group in registration order.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._wildcard: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function that unregisters it."""
        self._by_type.setdefault(event_type, []).append(callback)
        return lambda: self.unsubscribe(event_type, callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> None:
        """Remove a callback; unknown callbacks are ignored."""
        listeners = self._by_type.get(event_type)
        if listeners and callback in listeners:
            listeners.remove(callback)

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        self._wildcard.append(callback)

    def emit(self, event: Any) -> None:
        for callback in list(self._wildcard):
            callback(event)
        for klass in type(event).__mro__:
            for callback in list(self._by_type.get(klass, ())):
                callback(event)
