"""
Module: rows

Purpose:
    Display-ready output of the flattener: FlattenedRow (one table row per
    indicator, with merged-cell spans) and SubjectReport (rows for one
    subject plus its report description).

Dependencies:
    - dataclasses (std)

Used By:
    - reporting.flattener
    - reporting.subject_report
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True, slots=True)
class FlattenedRow:
    """
    One indicator rendered as a table row.

    Span contract: ``theme_row_span``/``subtheme_row_span`` hold the group
    size on the first row of a group and 0 on every following row of the
    same group. A renderer merges cells by honouring non-zero spans and
    suppressing cells whose span is 0.

    Attributes:
        row_index: 1-based position in traversal order
        theme_title: Title of the owning Theme
        subtheme_title: Title of the owning Subtheme
        indicator_text: Indicator statement
        domain: Indicator domain
        predicate: Assigned predicate, "" when pending
        theme_row_span: Rows covered by the Theme cell (0 = merged away)
        subtheme_row_span: Rows covered by the Subtheme cell (0 = merged away)
        theme_id: Owning Theme id
        subtheme_id: Owning Subtheme id
        indicator_id: Indicator id
        sequence_number: Indicator "ic" number
        description: Comment stored with the predicate, "" when none
    """

    row_index: int
    theme_title: str
    subtheme_title: str
    indicator_text: str
    domain: str
    predicate: str
    theme_row_span: int
    subtheme_row_span: int
    theme_id: Optional[int]
    subtheme_id: Optional[int]
    indicator_id: Optional[int]
    sequence_number: int = 0
    description: str = ""

    @property
    def key(self) -> str:
        """Stable row key (theme-subtheme-indicator ids, row index if any id is missing)."""
        ids = (self.theme_id, self.subtheme_id, self.indicator_id)
        if None in ids:
            return f"row-{self.row_index}"
        return "-".join(str(i) for i in ids)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "rowIndex": self.row_index,
            "themaName": self.theme_title,
            "subthemaName": self.subtheme_title,
            "ic": self.sequence_number,
            "indicator": self.indicator_text,
            "domain": self.domain,
            "predicate": self.predicate,
            "description": self.description,
            "rowSpanThema": self.theme_row_span,
            "rowSpanSubthema": self.subtheme_row_span,
        }


@dataclass(frozen=True, slots=True)
class SubjectReport:
    """
    Flattened PID report for one subject.

    Attributes:
        subject_id: Subject identifier
        subject_name: Subject display name
        rows: Flattened rows in traversal order
        description: First non-empty indicator description, None if none
    """

    subject_id: int
    subject_name: str
    rows: Tuple[FlattenedRow, ...] = ()
    description: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "subjectId": self.subject_id,
            "subjectName": self.subject_name,
            "indicators": [row.to_dict() for row in self.rows],
            "subjectDescription": self.description,
        }
