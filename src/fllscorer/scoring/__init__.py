"""Deterministic robot game scoring.

Scoring is pure: the same missions state always gives the same score, or the
same error.
"""

from .calculator import compute_score, has_leniency_bonus, score_breakdown, validate_state
from .macros import apply_demolition, macro_demolish_building

__all__ = [
    "compute_score",
    "score_breakdown",
    "validate_state",
    "has_leniency_bonus",
    "apply_demolition",
    "macro_demolish_building",
]
