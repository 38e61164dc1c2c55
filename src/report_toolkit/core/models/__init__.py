"""
Core Models Package

Immutable data models shared by the assessment and reporting packages.
All models are frozen dataclasses: every change (a score edit, a
predicate assignment) produces a new instance, so values are safe to
share between threads and derived data is always rebuilt from inputs.
"""

from .bands import PredicateBand, PredicateResolution, ResolutionStatus
from .scores import FinalAssessment, ScoreRecord
from .indicators import Indicator, Subtheme, Theme, PidAssessment
from .rows import FlattenedRow, SubjectReport

__all__ = [
    "PredicateBand",
    "PredicateResolution",
    "ResolutionStatus",
    "FinalAssessment",
    "ScoreRecord",
    "Indicator",
    "Subtheme",
    "Theme",
    "PidAssessment",
    "FlattenedRow",
    "SubjectReport",
]
