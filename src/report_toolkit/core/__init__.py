"""
Report Toolkit Core Package

Shared data models and boundary utilities.

1. **Immutable Data Models**
   Frozen dataclasses; a score edit or predicate assignment creates a
   new instance instead of mutating the old one.

2. **Calculated Values (Never Stored)**
   Averages, final scores, predicates and row spans are always derived
   from raw inputs, never read back from a payload.

3. **Typed Boundary**
   Payloads are validated (core.schemas) and parsed (core.utils) before
   any computation sees them.
"""

from .models import (
    PredicateBand,
    PredicateResolution,
    ResolutionStatus,
    FinalAssessment,
    ScoreRecord,
    Indicator,
    Subtheme,
    Theme,
    PidAssessment,
    FlattenedRow,
    SubjectReport,
)

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
