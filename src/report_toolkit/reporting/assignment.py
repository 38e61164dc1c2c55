"""
Module: reporting.assignment

Purpose:
    Writes per-student PID predicates onto an indicator tree and checks
    which indicators are still pending before a report is submitted.

Key Functions:
    - assign_predicates(): New tree with predicates set by indicator id
    - missing_assignments(): Indicators that still have no predicate
    - assignment_payload(): Submission rows for a fully assigned tree

Dependencies:
    - report_toolkit.core.models.indicators
    - report_toolkit.config: Allowed predicate values

Used By:
    - PID report input screen (external)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from report_toolkit.config import DEFAULT_CONFIG, ReportConfig
from report_toolkit.core.models.indicators import Indicator, PidAssessment

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = "No description provided."


class IncompleteAssessmentError(ValueError):
    """Raised when a submission still has indicators without a predicate."""

    def __init__(self, missing: List[Indicator]):
        numbers = ", ".join(str(indicator.sequence_number) for indicator in missing)
        super().__init__(f"Predicate missing for indicator(s): {numbers}")
        self.missing = missing


def assign_predicates(
    assessment: PidAssessment,
    assignments: Mapping[int, Optional[str]],
    description: Optional[str] = None,
    config: Optional[ReportConfig] = None,
) -> PidAssessment:
    """
    Return a copy of assessment with predicates set by indicator id.

    Indicators not named in assignments keep their current values. A
    None value clears the predicate. The description (the student's
    comment) is stored on every indicator that receives a predicate.

    Args:
        assessment: Source tree (left unchanged)
        assignments: Indicator id -> predicate ("T", "C", "I") or None
        description: Comment stored alongside each assigned predicate
        config: Allowed predicate values (defaults to DEFAULT_CONFIG)

    Returns:
        New PidAssessment

    Raises:
        ValueError: If a predicate is not one of config.indicator_predicates
    """
    config = config or DEFAULT_CONFIG

    for indicator_id, predicate in assignments.items():
        if predicate is not None and predicate not in config.indicator_predicates:
            raise ValueError(
                f"Invalid predicate {predicate!r} for indicator {indicator_id} "
                f"(expected one of {config.indicator_predicates})"
            )

    unknown = set(assignments) - {i.id for i in assessment.iter_indicators()}
    if unknown:
        logger.warning("Ignoring predicates for unknown indicator ids: %s", sorted(unknown))

    def _assign(indicator: Indicator) -> Indicator:
        if indicator.id not in assignments:
            return indicator
        predicate = assignments[indicator.id]
        return indicator.assign(predicate, description if predicate else None)

    themes = tuple(
        replace(
            theme,
            subthemes=tuple(
                replace(
                    subtheme,
                    indicators=tuple(_assign(i) for i in subtheme.indicators or ()),
                )
                for subtheme in theme.subthemes or ()
            ),
        )
        for theme in assessment.themes or ()
    )
    return replace(assessment, themes=themes)


def missing_assignments(assessment: PidAssessment) -> List[Indicator]:
    """Indicators without a predicate, in traversal order."""
    return [i for i in assessment.iter_indicators() if not i.is_assigned]


def assignment_payload(
    assessment: PidAssessment,
    comment: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Build the submission rows for one student.

    Every indicator must carry a predicate; the comment falls back to a
    placeholder when blank.

    Raises:
        IncompleteAssessmentError: If any indicator is still pending
    """
    missing = missing_assignments(assessment)
    if missing:
        raise IncompleteAssessmentError(missing)

    return [
        {
            "indicator_id": indicator.id,
            "predicate": indicator.assigned_predicate,
            "description": comment or indicator.assigned_description or DEFAULT_COMMENT,
        }
        for indicator in assessment.iter_indicators()
    ]
