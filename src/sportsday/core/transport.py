"""
Submission Transport

Carries score submissions off the bus to a backend and puts the
acknowledgement back on the bus once the backend has accepted them.
"""

import logging
from collections import deque
from typing import Callable, Deque, Optional

from .bus import Event, EventBus, bus as default_bus
from .events import SCORE_UPDATE, ScoreUpdate, ScoreUpdateSubmitted, UpdateStatus

logger = logging.getLogger(__name__)

Sink = Callable[[ScoreUpdate], None]


class SubmissionError(RuntimeError):
    """Raised by a sink when the backend did not accept a submission."""


class SubmissionRelay:
    """
    Queue submissions and replay their round-trips on drain().

    Submissions are not sent from inside the publishing call: the form that
    published them has not finished its own bookkeeping yet. drain() stands
    in for the network responses arriving later on the same thread.
    """

    def __init__(
        self,
        sink: Sink,
        bus: Optional[EventBus] = None,
        status_template: str = ""
    ):
        self.sink = sink
        self.bus = bus if bus is not None else default_bus
        self.status_template = status_template
        self._queue: Deque[ScoreUpdate] = deque()
        self._connected = False

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def connect(self) -> None:
        if not self._connected:
            self.bus.subscribe(SCORE_UPDATE, self._on_score_update)
            self._connected = True

    def disconnect(self) -> None:
        if self._connected:
            self.bus.unsubscribe(SCORE_UPDATE, self._on_score_update)
            self._connected = False

    def _on_score_update(self, event: Event) -> None:
        update: ScoreUpdate = event.detail
        self._queue.append(update)
        logger.debug(f"Queued submission for {update.event_id} ({len(self._queue)} outstanding)")

    def drain(self) -> int:
        """
        Send every queued submission in arrival order.

        Returns:
            Number of submissions the backend accepted
        """
        accepted = 0
        while self._queue:
            update = self._queue.popleft()
            try:
                self.sink(update)
            except SubmissionError as e:
                # No completion is published; the form stays pending.
                logger.warning(f"Submission for {update.event_id} rejected: {e}")
                continue

            accepted += 1
            logger.info(f"Submission for {update.event_id} accepted ({len(update.scores)} scores)")
            self.bus.emit(ScoreUpdateSubmitted(event_id=update.event_id))
            if self.status_template:
                self.bus.emit(UpdateStatus(status=self.status_template.format(event_id=update.event_id)))
        return accepted
