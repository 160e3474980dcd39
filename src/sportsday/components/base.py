"""
Controller base class.

Mirrors the connect/disconnect lifecycle of a mounted page controller and
drops every bus subscription it made when it is disconnected.
"""

import logging
from typing import List, Optional, Tuple

from ..core.bus import EventBus, Handler, bus as default_bus

logger = logging.getLogger(__name__)


class Controller:
    """Base for page controllers."""

    def __init__(self, bus: Optional[EventBus] = None):
        self.bus = bus if bus is not None else default_bus
        self.connected = False
        self._subscriptions: List[Tuple[str, Handler]] = []

    def listen(self, name: str, handler: Handler) -> None:
        """Subscribe for as long as this controller stays connected."""
        self.bus.subscribe(name, handler)
        self._subscriptions.append((name, handler))

    def connect(self) -> None:
        """Connect once; repeated calls are ignored until disconnect()."""
        if self.connected:
            return
        self.connected = True
        self.on_connect()
        logger.debug(f"Connected {type(self).__name__}")

    def on_connect(self) -> None:
        """Subclass hook run by connect()."""

    def disconnect(self) -> None:
        for name, handler in self._subscriptions:
            self.bus.unsubscribe(name, handler)
        self._subscriptions.clear()
        self.connected = False
        logger.debug(f"Disconnected {type(self).__name__}")
