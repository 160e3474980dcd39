"""
Sportsday Event Bus

Process-wide publish/subscribe channel. Controllers never hold references
to each other; they agree on event names and payloads instead.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .events import coerce_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Envelope handed to every handler. Lives only for one delivery."""
    name: str
    detail: Any = None


Handler = Callable[[Event], None]


class EventBus:
    """
    Synchronous event bus.

    publish() delivers on the caller's stack, in subscription order, to the
    handlers registered at the moment of the call. Nothing is buffered, so a
    late subscriber never sees earlier events. A handler must not publish the
    event name it is currently handling; the bus does not guard against that.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> Handler:
        """Register a handler for an event name. Returns the handler."""
        with self._lock:
            self._handlers.setdefault(name, []).append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__qualname__', handler)} to {name}")
        return handler

    def unsubscribe(self, name: str, handler: Handler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        with self._lock:
            handlers = self._handlers.get(name)
            if handlers and handler in handlers:
                handlers.remove(handler)
                if not handlers:
                    del self._handlers[name]

    def on(self, name: str) -> Callable[[Handler], Handler]:
        """Decorator form of subscribe()."""
        def decorator(handler: Handler) -> Handler:
            return self.subscribe(name, handler)
        return decorator

    def publish(self, name: str, detail: Any = None) -> Event:
        """
        Deliver an event to every handler currently subscribed to name.

        Payloads for registered event names are checked against their type
        (dicts are converted). A handler that raises is logged and skipped.

        Raises:
            EventPayloadError: If detail does not fit the event name.
        """
        event = Event(name, coerce_payload(name, detail))
        with self._lock:
            handlers = list(self._handlers.get(name, ()))

        logger.debug(f"Publishing {name} to {len(handlers)} handler(s)")
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler {getattr(handler, '__qualname__', handler)} failed for {name}")
        return event

    def emit(self, payload) -> Event:
        """Publish a typed payload under its own event name."""
        return self.publish(payload.NAME, payload)

    def listener_count(self, name: str) -> int:
        with self._lock:
            return len(self._handlers.get(name, ()))

    def clear(self) -> None:
        """Drop every subscription."""
        with self._lock:
            self._handlers.clear()


# Global bus instance
bus = EventBus()
