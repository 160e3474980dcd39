"""
Score map parsing.

A score map is the JSON object rendered into a page: form id -> score.
"""

import json
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

Score = Optional[int]


class ScoreMapError(ValueError):
    """Raised when a serialized score map cannot be used."""


def parse_score_map(raw: Optional[str]) -> Dict[str, Score]:
    """
    Parse a serialized score map.

    Args:
        raw: JSON object text, e.g. '{"7a": 3, "7b": null}'

    Returns:
        Mapping of form id to score (None for "no score yet")

    Raises:
        ScoreMapError: If raw is empty, not JSON, or not a JSON object.
    """
    if not raw:
        raise ScoreMapError("score map is empty")
    try:
        data = json.loads(raw)
    except (TypeError, RecursionError, json.JSONDecodeError) as e:
        raise ScoreMapError(f"score map is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ScoreMapError(f"score map must be a JSON object, got {type(data).__name__}")
    return data


def format_score(score) -> str:
    """Render a score the way the select options spell their values."""
    if isinstance(score, bool):
        return "true" if score else "false"
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def score_for(scores: Dict[str, Score], form_id: Optional[str], default: str = "0") -> str:
    """Look up the display value for a form, falling back to default."""
    if not form_id:
        return default
    score = scores.get(form_id)
    if score is None:
        return default
    return format_score(score)
