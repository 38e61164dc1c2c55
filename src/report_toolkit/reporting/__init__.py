"""
Reporting Package

PID tree flattening, predicate assignment, subject report assembly and
period/phase helpers.
"""

from .flattener import flatten, flatten_assessment
from .assignment import (
    IncompleteAssessmentError,
    assign_predicates,
    assignment_payload,
    missing_assignments,
)
from .periods import determine_phase, period_key, period_label
from .subject_report import build_subject_report, build_subject_reports, subject_description

__all__ = [
    "flatten",
    "flatten_assessment",
    "assign_predicates",
    "missing_assignments",
    "assignment_payload",
    "IncompleteAssessmentError",
    "determine_phase",
    "period_key",
    "period_label",
    "build_subject_report",
    "build_subject_reports",
    "subject_description",
]
