"""
Score Set Controller

Score entry form: collects the per-form scores of one event, publishes them
as a scoreUpdate and shows whether the backend has acknowledged them.

Status lifecycle:
    submit()                      any state -> pending
    scoreUpdateSubmitted received pending   -> completed

Only the button colour reflects the status. There is no failed state: a
submission that is never acknowledged stays pending.
"""

import logging
import re
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from ..config import get_config
from ..core.bus import Event, EventBus
from ..core.events import SCORE_UPDATE_SUBMITTED, ScoreUpdate, ScoreUpdateSubmitted
from ..core.page import Button, Element, Field
from .base import Controller

logger = logging.getLogger(__name__)

_ID_SEPARATOR = re.compile(r"[-:]")


class SubmissionStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


def field_id_from_element_id(element_id: str) -> Optional[str]:
    """
    Derive a field id from the 4th segment of an element id.

    "row-a-b-evt1" -> "evt1"; ids with fewer segments give None.
    """
    parts = _ID_SEPARATOR.split(element_id)
    return parts[3] if len(parts) > 3 else None


def build_envelope(fields: Iterable[Field]) -> Dict[Optional[str], str]:
    """
    Collect field values keyed by field id.

    A field without an explicit field_id falls back to its element id. When
    two fields share a field id the later one wins.
    """
    scores: Dict[Optional[str], str] = {}
    for f in fields:
        key = f.field_id if f.field_id is not None else field_id_from_element_id(f.id)
        scores[key] = f.value
    return scores


class ScoreSetForm(Controller):
    """
    Score entry form controller.

    Args:
        form: Element whose id is the event id sent with the scores
        fields: Score inputs, one per form
        button: Optional submit button used as the status cue
        status: Status the page was rendered with
        bus: Event bus (defaults to the global bus)
    """

    def __init__(
        self,
        form: Element,
        fields: List[Field],
        button: Optional[Button] = None,
        status: Union[SubmissionStatus, str] = SubmissionStatus.COMPLETED,
        bus: Optional[EventBus] = None
    ):
        super().__init__(bus)
        self.form = form
        self.fields = fields
        self.button = button
        self.initial_status = SubmissionStatus(status)
        self.status = self.initial_status

        config = get_config()
        self.pending_color = config.status.pending_color
        self.confirmed_color = config.status.confirmed_color
        self.keyed_completion = config.submission.keyed_completion

    @property
    def event_id(self) -> str:
        return self.form.id

    def on_connect(self) -> None:
        self.status = self.initial_status
        self.listen(SCORE_UPDATE_SUBMITTED, self._on_submitted)

    def submit(self) -> ScoreUpdate:
        """Publish the current field values and mark the form pending."""
        logger.info(f"Submitting scores for {self.event_id}")
        update = ScoreUpdate(event_id=self.event_id, scores=build_envelope(self.fields))
        self.bus.emit(update)

        if self.button is not None:
            self.button.background_color = self.pending_color
            self.status = SubmissionStatus.PENDING
        return update

    def _on_submitted(self, event: Event) -> None:
        ack: ScoreUpdateSubmitted = event.detail
        if self.keyed_completion and ack.event_id is not None and ack.event_id != self.event_id:
            return
        self.on_completion_signal()

    def on_completion_signal(self) -> None:
        """
        Mark the form completed if it is waiting for an acknowledgement.

        Unless keyed completion is enabled, any acknowledgement completes
        every pending form on the page, whichever form it was meant for.
        """
        if self.status is not SubmissionStatus.PENDING:
            return
        if self.button is not None:
            self.button.background_color = self.confirmed_color
        self.status = SubmissionStatus.COMPLETED
        logger.info(f"Scores for {self.event_id} confirmed")
