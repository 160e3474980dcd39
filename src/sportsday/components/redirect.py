"""
Safe Redirect Controller

Performs the navigation requested by doSafeScoreRedirect events.
"""

import logging
from typing import Optional

from ..core.bus import Event, EventBus
from ..core.events import SAFE_SCORE_REDIRECT
from ..core.page import Location
from .base import Controller

logger = logging.getLogger(__name__)


class SafeRedirect(Controller):
    """Applies redirect params to the page location."""

    def __init__(self, location: Location, bus: Optional[EventBus] = None):
        super().__init__(bus)
        self.location = location

    def on_connect(self) -> None:
        self.listen(SAFE_SCORE_REDIRECT, self._on_redirect)

    def _on_redirect(self, event: Event) -> None:
        params = event.detail.params
        if params == self.location.search:
            logger.debug(f"Already at {params}, not navigating")
            return
        self.location.navigate(params)
