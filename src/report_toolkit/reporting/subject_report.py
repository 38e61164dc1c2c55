"""
Module: reporting.subject_report

Purpose:
    Builds the per-subject sections of a printable PID report: flattened
    rows plus the subject description shown under the table.

Key Functions:
    - build_subject_report(): One SubjectReport from a subject's tree
    - build_subject_reports(): All subjects of a report payload
    - subject_description(): First non-empty indicator description

Dependencies:
    - reporting.flattener
    - core.utils.serialization (payload parsing)
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from report_toolkit.core.models.indicators import PidAssessment
from report_toolkit.core.models.rows import SubjectReport
from report_toolkit.core.utils.serialization import deserialize_subject_entries

from .flattener import flatten_assessment

logger = logging.getLogger(__name__)


def subject_description(assessment: Optional[PidAssessment]) -> Optional[str]:
    """First non-empty indicator description in traversal order."""
    if assessment is None:
        return None
    for indicator in assessment.iter_indicators():
        if indicator.assigned_description:
            return indicator.assigned_description
    return None


def build_subject_report(
    subject_id: int,
    subject_name: str,
    assessment: Optional[PidAssessment],
) -> SubjectReport:
    """Flatten one subject's tree into a SubjectReport."""
    return SubjectReport(
        subject_id=subject_id,
        subject_name=subject_name,
        rows=tuple(flatten_assessment(assessment)),
        description=subject_description(assessment),
    )


def build_subject_reports(
    payload: dict[str, Any],
    *,
    validate: bool = True,
) -> List[SubjectReport]:
    """
    Build a SubjectReport for every entry of a student report payload.

    Args:
        payload: ``{"reportData": [{"subject": {...}, "pidAssessment": {...}}]}``
        validate: Validate the payload structure first

    Returns:
        Reports in payload order

    Raises:
        ValidationError: If validate=True and the payload is malformed
    """
    reports = [
        build_subject_report(subject_id, name, assessment)
        for subject_id, name, assessment in deserialize_subject_entries(
            payload, validate=validate
        )
    ]
    empty = [r.subject_name for r in reports if r.is_empty]
    if empty:
        logger.info("Subjects with no indicators: %s", ", ".join(empty))
    return reports
