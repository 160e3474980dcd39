"""
Score Dropdown Controller

Sets each score dropdown to the score already stored for its form.
"""

import logging
from typing import Iterable, List, Optional

from ..config import get_config
from ..core.bus import EventBus
from ..core.page import SelectControl
from ..core.scores import ScoreMapError, parse_score_map, score_for
from .base import Controller

logger = logging.getLogger(__name__)


def initialize(selects: Iterable[SelectControl], score_json: Optional[str], default: str = "0") -> None:
    """
    Set every select to its stored score.

    Selects without a data-form-id, forms missing from the map and null
    scores all show default. A score map that cannot be parsed puts every
    select on default; the error never reaches the page.
    """
    try:
        scores = parse_score_map(score_json)
    except ScoreMapError as e:
        logger.debug(f"Score map unusable, showing defaults: {e}")
        scores = {}

    for select in selects:
        select.value = score_for(scores, select.form_id, default)


class ScoreDropdown(Controller):
    """Runs the initializer over its select targets when connected."""

    def __init__(
        self,
        selects: List[SelectControl],
        score: Optional[str] = None,
        bus: Optional[EventBus] = None
    ):
        super().__init__(bus)
        self.selects = selects
        self.score = score
        self.default = get_config().display.default_score

    def on_connect(self) -> None:
        initialize(self.selects, self.score, self.default)
