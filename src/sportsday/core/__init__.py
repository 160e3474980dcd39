"""Sportsday Core Components"""

from .bus import Event, EventBus, bus
from .events import (
    EventPayloadError,
    SafeScoreRedirect,
    ScoreUpdate,
    ScoreUpdateSubmitted,
    UpdateStatus,
)
from .page import Button, Element, Field, Location, Page, SelectControl
from .transport import SubmissionError, SubmissionRelay

__all__ = [
    "Event", "EventBus", "bus",
    "EventPayloadError", "SafeScoreRedirect", "ScoreUpdate", "ScoreUpdateSubmitted", "UpdateStatus",
    "Button", "Element", "Field", "Location", "Page", "SelectControl",
    "SubmissionError", "SubmissionRelay",
]
