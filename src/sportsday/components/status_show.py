"""
Status Show Controller

Replaces its element's content with the latest status fragment.
"""

import logging
from typing import Optional

from ..core.bus import Event, EventBus
from ..core.events import UPDATE_STATUS
from ..core.page import Element
from .base import Controller

logger = logging.getLogger(__name__)


class StatusShow(Controller):
    """Status banner. The fragment is trusted and inserted as-is."""

    def __init__(self, element: Element, bus: Optional[EventBus] = None):
        super().__init__(bus)
        self.element = element

    def on_connect(self) -> None:
        logger.info("Connected status update controller")
        self.listen(UPDATE_STATUS, self._on_update_status)

    def _on_update_status(self, event: Event) -> None:
        self.element.inner_html = event.detail.status
