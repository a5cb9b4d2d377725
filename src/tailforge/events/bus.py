"""Thread-safe synchronous event bus for build lifecycle events."""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners can subscribe to specific event types or receive all events.
    Events are dispatched in registration order on the thread that emits
    them, which for ``FileScanned`` is a scanner worker thread.  Registration
    is guarded by a lock; each ``emit`` dispatches to the listeners present
    when it started, so a listener may unsubscribe itself mid-dispatch.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> Callable[[], None]:
        """Register a callback for a specific event type.

        Returns a function that removes the registration again.
        """
        with self._lock:
            self._listeners.setdefault(event_type, []).append(callback)
        return lambda: self._remove(self._listeners.get(event_type, []), callback)

    def on_all(self, callback: Callable) -> Callable[[], None]:
        """Register a callback that receives every event; returns its remover."""
        with self._lock:
            self._global_listeners.append(callback)
        return lambda: self._remove(self._global_listeners, callback)

    def _remove(self, listeners: list[Callable], callback: Callable) -> None:
        with self._lock:
            if callback in listeners:
                listeners.remove(callback)

    def listener_count(self, event_type: type | None = None) -> int:
        """Listeners that would receive an event of *event_type* (global ones included)."""
        with self._lock:
            typed = len(self._listeners.get(event_type, [])) if event_type else 0
            return len(self._global_listeners) + typed

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        with self._lock:
            listeners = list(self._global_listeners)
            listeners.extend(self._listeners.get(type(event), []))
        logger.debug("%s -> %d listener(s)", type(event).__name__, len(listeners))
        for cb in listeners:
            cb(event)
