"""FLL 2015 TRASH TREK robot game scorer.

Turns the missions state observed by the referee into a score, following the
season rule book.
"""

from .core.enums import MissionGroup
from .core.errors import CannotScoreBothError, InvalidValueError, ScoringError
from .core.missions_state import INITIAL_MISSIONS_STATE, MissionsState
from .core.rules import RULE_BOOKS, TRASH_TREK_2015, RuleBook, get_rule_book
from .scoring import (
    apply_demolition,
    compute_score,
    has_leniency_bonus,
    macro_demolish_building,
    score_breakdown,
)

__version__ = "1.0.0"

__all__ = [
    "MissionGroup",
    "MissionsState",
    "INITIAL_MISSIONS_STATE",
    "RuleBook",
    "TRASH_TREK_2015",
    "RULE_BOOKS",
    "get_rule_book",
    "ScoringError",
    "InvalidValueError",
    "CannotScoreBothError",
    "compute_score",
    "score_breakdown",
    "has_leniency_bonus",
    "apply_demolition",
    "macro_demolish_building",
]
