"""
Assessment Package

Score averaging, predicate band resolution and per-student
recalculation for knowledge and skills reports.
"""

from .aggregator import average, qualifying_scores, round_half_up
from .predicates import UnresolvedPredicateError, resolve, sort_bands
from .schemes import KNOWLEDGE_SCHEME, SKILLS_SCHEME, AssessmentScheme, ScoreComponent
from .recalculator import (
    apply_score_edit,
    parse_score_input,
    recalculate,
    recalculate_all,
)

__all__ = [
    "average",
    "qualifying_scores",
    "round_half_up",
    "resolve",
    "sort_bands",
    "UnresolvedPredicateError",
    "AssessmentScheme",
    "ScoreComponent",
    "KNOWLEDGE_SCHEME",
    "SKILLS_SCHEME",
    "recalculate",
    "recalculate_all",
    "parse_score_input",
    "apply_score_edit",
]
