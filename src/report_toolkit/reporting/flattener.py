"""
Module: reporting.flattener

Purpose:
    Flattens a PID tree (Theme -> Subtheme -> Indicator) into ordered
    table rows with merged-cell spans for the Theme and Subtheme columns.

Key Functions:
    - flatten(): Rows for a sequence of Themes
    - flatten_assessment(): Rows for a PidAssessment

Dependencies:
    - report_toolkit.core.models: Theme, FlattenedRow

Used By:
    - reporting.subject_report
    - Report preview/print screens (external)

Algorithm:
    Two passes. Pass 1 walks the tree depth-first and records, for each
    indicator, the group keys of its Theme and Subtheme. Pass 2 counts
    rows per group and writes the count on the first row of each group
    and 0 on the rest. Groups are keyed by tree position + id, so equal
    titles in different Themes never merge, and empty Themes/Subthemes
    produce no rows and no spans.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from report_toolkit.core.models.indicators import Indicator, PidAssessment, Subtheme, Theme
from report_toolkit.core.models.rows import FlattenedRow

logger = logging.getLogger(__name__)

GroupKey = Tuple[int, ...]


@dataclass(frozen=True)
class _Visit:
    """Indicator reached in pass 1 with its group keys."""
    theme: Theme
    subtheme: Subtheme
    indicator: Indicator
    theme_key: GroupKey
    subtheme_key: GroupKey


def _present(items: Optional[Iterable], owner: str) -> list:
    """Items of a child collection, None collection/entries dropped."""
    if items is None:
        logger.debug("%s has no children, treating as empty", owner)
        return []
    items = list(items)
    present = [item for item in items if item is not None]
    if len(present) != len(items):
        logger.debug("%s has null children, skipping them", owner)
    return present


def _walk(themes: Optional[Iterable[Theme]]) -> List[_Visit]:
    """Pass 1: depth-first traversal in input order."""
    visits: List[_Visit] = []
    for t_pos, theme in enumerate(_present(themes, "Theme list")):
        theme_key = (t_pos, theme.id)
        for s_pos, subtheme in enumerate(_present(theme.subthemes, f"Theme {theme.id}")):
            subtheme_key = (t_pos, theme.id, s_pos, subtheme.id)
            for indicator in _present(subtheme.indicators, f"Subtheme {subtheme.id}"):
                visits.append(_Visit(theme, subtheme, indicator, theme_key, subtheme_key))
    return visits


def _first_of_group_spans(keys: List[GroupKey]) -> List[int]:
    """Pass 2: group size on the first row of each group, 0 elsewhere."""
    sizes = Counter(keys)
    seen = set()
    spans = []
    for key in keys:
        if key in seen:
            spans.append(0)
        else:
            seen.add(key)
            spans.append(sizes[key])
    return spans


def flatten(themes: Optional[Iterable[Theme]]) -> List[FlattenedRow]:
    """
    Flatten themes into display rows.

    Each Indicator yields exactly one row, numbered from 1 in traversal
    order. Indicators without an assigned predicate get a blank predicate.
    A None collection anywhere in the tree is read as empty.

    Args:
        themes: Ordered Themes (None or empty -> no rows)

    Returns:
        New list of FlattenedRow

    Example:
        >>> rows = flatten(assessment.themes)
        >>> [(r.theme_row_span, r.subtheme_row_span) for r in rows]
        [(3, 2), (0, 0), (0, 1)]
    """
    visits = _walk(themes)
    theme_spans = _first_of_group_spans([v.theme_key for v in visits])
    subtheme_spans = _first_of_group_spans([v.subtheme_key for v in visits])

    rows = []
    for index, (visit, theme_span, subtheme_span) in enumerate(
        zip(visits, theme_spans, subtheme_spans), start=1
    ):
        indicator = visit.indicator
        rows.append(
            FlattenedRow(
                row_index=index,
                theme_title=visit.theme.title,
                subtheme_title=visit.subtheme.title,
                indicator_text=indicator.text,
                domain=indicator.domain,
                predicate=indicator.assigned_predicate or "",
                theme_row_span=theme_span,
                subtheme_row_span=subtheme_span,
                theme_id=visit.theme.id,
                subtheme_id=visit.subtheme.id,
                indicator_id=indicator.id,
                sequence_number=indicator.sequence_number,
                description=indicator.assigned_description or "",
            )
        )
    return rows


def flatten_assessment(assessment: Optional[PidAssessment]) -> List[FlattenedRow]:
    """Flatten the themes of assessment (None -> no rows)."""
    if assessment is None:
        return []
    return flatten(assessment.themes)
