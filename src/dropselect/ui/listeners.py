"""Mixin that gives widgets DOM-style event listeners with auto-cleanup."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Listener = Callable[[Any], None]


class ListenerMixin:
    """Mixin for widgets that forward their events to registered listeners.

    Subclasses call ``self._emit(event_type, event)`` from their Textual
    handlers. ``listen()`` returns a callable that removes the listener.
    Listeners still registered on unmount are dropped.
    """

    def _init_listeners(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def listen(self, event_type: str, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns the unlisten function."""
        self._listeners.setdefault(event_type, []).append(callback)

        def unlisten() -> None:
            callbacks = self._listeners.get(event_type, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unlisten

    def listener_count(self, event_type: str | None = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(callbacks) for callbacks in self._listeners.values())

    def _emit(self, event_type: str, event: Any) -> None:
        for callback in list(self._listeners.get(event_type, ())):
            callback(event)

    def on_unmount(self) -> None:
        self._listeners.clear()
