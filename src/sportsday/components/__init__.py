"""Sportsday Page Controllers"""

from .base import Controller
from .filter import FilterController, filter_params
from .redirect import SafeRedirect
from .score_dropdown import ScoreDropdown, initialize
from .score_set import ScoreSetForm, SubmissionStatus, build_envelope
from .status_show import StatusShow

__all__ = [
    "Controller",
    "FilterController", "filter_params",
    "SafeRedirect",
    "ScoreDropdown", "initialize",
    "ScoreSetForm", "SubmissionStatus", "build_envelope",
    "StatusShow",
]
