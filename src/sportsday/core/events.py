"""
Sportsday Event Payloads

One payload type per event name. The names are shared with the page
templates and the socket transport, so they must not change.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional, Type


SCORE_UPDATE = "scoreUpdate"
SCORE_UPDATE_SUBMITTED = "scoreUpdateSubmitted"
UPDATE_STATUS = "updateStatus"
SAFE_SCORE_REDIRECT = "doSafeScoreRedirect"


class EventPayloadError(ValueError):
    """Raised when an event payload is missing fields or has the wrong type."""


def _require_str(data: dict, key: str, event_name: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise EventPayloadError(f"{event_name}: '{key}' must be a string, got {value!r}")
    return value


def _require_dict(data, event_name: str) -> dict:
    if not isinstance(data, dict):
        raise EventPayloadError(f"{event_name}: payload must be an object, got {type(data).__name__}")
    return data


@dataclass
class ScoreUpdate:
    """Scores submitted by a score entry form."""
    NAME: ClassVar[str] = SCORE_UPDATE

    event_id: str
    scores: Dict[Optional[str], str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"event_id": self.event_id, "scores": dict(self.scores)}

    @classmethod
    def from_dict(cls, data) -> "ScoreUpdate":
        data = _require_dict(data, cls.NAME)
        event_id = _require_str(data, "event_id", cls.NAME)
        scores = data.get("scores", {})
        if not isinstance(scores, dict):
            raise EventPayloadError(f"{cls.NAME}: 'scores' must be an object")
        for key, value in scores.items():
            if not isinstance(value, str):
                raise EventPayloadError(f"{cls.NAME}: score for {key!r} must be a string")
        return cls(event_id=event_id, scores=dict(scores))


@dataclass
class ScoreUpdateSubmitted:
    """
    Acknowledgement that a submission was persisted.

    event_id is optional: pages rendered by older backends send the
    acknowledgement without saying which form it belongs to.
    """
    NAME: ClassVar[str] = SCORE_UPDATE_SUBMITTED

    event_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {"event_id": self.event_id}

    @classmethod
    def from_dict(cls, data) -> "ScoreUpdateSubmitted":
        if data is None:
            return cls()
        data = _require_dict(data, cls.NAME)
        event_id = data.get("event_id")
        if event_id is not None and not isinstance(event_id, str):
            raise EventPayloadError(f"{cls.NAME}: 'event_id' must be a string")
        return cls(event_id=event_id)


@dataclass
class UpdateStatus:
    """Pre-rendered status fragment for the status banner."""
    NAME: ClassVar[str] = UPDATE_STATUS

    status: str

    def to_dict(self) -> dict:
        return {"status": self.status}

    @classmethod
    def from_dict(cls, data) -> "UpdateStatus":
        data = _require_dict(data, cls.NAME)
        return cls(status=_require_str(data, "status", cls.NAME))


@dataclass
class SafeScoreRedirect:
    """Navigation request produced by the filter controller."""
    NAME: ClassVar[str] = SAFE_SCORE_REDIRECT

    params: str

    def to_dict(self) -> dict:
        return {"params": self.params}

    @classmethod
    def from_dict(cls, data) -> "SafeScoreRedirect":
        data = _require_dict(data, cls.NAME)
        return cls(params=_require_str(data, "params", cls.NAME))


EVENT_TYPES: Dict[str, Type] = {
    SCORE_UPDATE: ScoreUpdate,
    SCORE_UPDATE_SUBMITTED: ScoreUpdateSubmitted,
    UPDATE_STATUS: UpdateStatus,
    SAFE_SCORE_REDIRECT: SafeScoreRedirect,
}


def coerce_payload(name: str, detail):
    """
    Check a payload against the type registered for an event name.

    Dicts are converted with the type's from_dict(); unregistered names
    pass through untouched.

    Raises:
        EventPayloadError: If the detail does not match the registered type.
    """
    payload_type = EVENT_TYPES.get(name)
    if payload_type is None or isinstance(detail, payload_type):
        return detail
    if detail is None or isinstance(detail, dict):
        return payload_type.from_dict(detail)
    raise EventPayloadError(
        f"{name}: expected {payload_type.__name__}, got {type(detail).__name__}"
    )
