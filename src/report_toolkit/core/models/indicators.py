"""
Module: indicators

Purpose:
    Provides the Personal Indicator Development (PID) tree:
    Theme -> Subtheme -> Indicator. Indicators are the scored leaves and
    optionally carry an assigned predicate and description.

Key Functions:
    - Theme.iter_indicators() / Subtheme.iter_indicators(): Leaf iteration
    - PidAssessment.iter_indicators(): All leaves in traversal order
    - PidAssessment.find_indicator(id): Lookup by indicator id
    - *.to_dict() / *.from_dict(): Serialization in the report API shape

Dependencies:
    - dataclasses (std)
    - logging (std)

Used By:
    - reporting.flattener
    - reporting.assignment
    - reporting.subject_report
    - core.utils.serialization

Note:
    ``from_dict`` tolerates partially loaded report data: a null or
    missing child list is read as empty rather than rejected, and node
    ids are optional (the flattener groups by position). Structural
    problems are reported by core.schemas.validator instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


def _child_list(data: dict[str, Any], key: str, owner: str) -> list:
    """Child list at key, None/missing read as empty, null entries dropped."""
    children = data.get(key)
    if children is None:
        logger.debug("%s has no %r list, treating as empty", owner, key)
        return []
    return [child for child in children if child is not None]


@dataclass(frozen=True, slots=True)
class Indicator:
    """
    Leaf of the PID tree.

    Attributes:
        id: Indicator identifier, None when the source omits it
        sequence_number: Position label within the subject ("ic")
        domain: Development domain the indicator belongs to
        text: Indicator statement
        assigned_predicate: Predicate set for a student, None if pending
        assigned_description: Comment stored with the predicate
    """

    id: Optional[int]
    sequence_number: int
    domain: str
    text: str
    assigned_predicate: Optional[str] = None
    assigned_description: Optional[str] = None

    @property
    def is_assigned(self) -> bool:
        return bool(self.assigned_predicate)

    def assign(self, predicate: Optional[str], description: Optional[str] = None) -> Indicator:
        """Copy with a new predicate and description."""
        return replace(
            self,
            assigned_predicate=predicate,
            assigned_description=description,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ic": self.sequence_number,
            "indicator": self.text,
            "domain": self.domain,
            "predicate": self.assigned_predicate,
            "description": self.assigned_description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Indicator:
        return cls(
            id=data.get("id"),
            sequence_number=data.get("ic", 0),
            domain=data.get("domain") or "",
            text=data.get("indicator") or "",
            assigned_predicate=data.get("predicate") or None,
            assigned_description=data.get("description") or None,
        )


@dataclass(frozen=True, slots=True)
class Subtheme:
    """Sub-theme owning an ordered tuple of Indicators."""

    id: Optional[int]
    title: str
    indicators: Tuple[Indicator, ...] = ()

    @property
    def indicator_count(self) -> int:
        return len(self.indicators or ())

    def iter_indicators(self) -> Iterator[Indicator]:
        yield from self.indicators or ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "subthema": self.title,
            "indicators": [indicator.to_dict() for indicator in self.iter_indicators()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subtheme:
        return cls(
            id=data.get("id"),
            title=data.get("subthema") or "",
            indicators=tuple(
                Indicator.from_dict(item)
                for item in _child_list(data, "indicators", f"Subtheme {data.get('id')}")
            ),
        )


@dataclass(frozen=True, slots=True)
class Theme:
    """
    Top-level theme owning an ordered tuple of Subthemes.

    The tree structure is:
        Theme ("Aku dan Keluargaku")
        ├── Subtheme ("Anggota Keluarga")
        │   ├── Indicator (ic=1) [leaf]
        │   └── Indicator (ic=2) [leaf]
        └── Subtheme ("Rumahku") [no indicators -> no rows]
    """

    id: Optional[int]
    title: str
    subthemes: Tuple[Subtheme, ...] = ()

    @property
    def indicator_count(self) -> int:
        """Count of indicators across all subthemes."""
        return sum(subtheme.indicator_count for subtheme in self.subthemes or ())

    def iter_indicators(self) -> Iterator[Indicator]:
        for subtheme in self.subthemes or ():
            yield from subtheme.iter_indicators()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "thema": self.title,
            "subthemas": [subtheme.to_dict() for subtheme in self.subthemes or ()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Theme:
        return cls(
            id=data.get("id"),
            title=data.get("thema") or "",
            subthemes=tuple(
                Subtheme.from_dict(item)
                for item in _child_list(data, "subthemas", f"Theme {data.get('id')}")
            ),
        )


@dataclass(frozen=True, slots=True)
class PidAssessment:
    """
    Root of a PID tree for one subject and period.

    Attributes:
        themes: Ordered themes
        semester: Semester label from the report source, if any
        period: Period key such as "triwulan_1", if any
    """

    themes: Tuple[Theme, ...] = ()
    semester: Optional[str] = None
    period: Optional[str] = None

    @property
    def indicator_count(self) -> int:
        return sum(theme.indicator_count for theme in self.themes or ())

    def iter_indicators(self) -> Iterator[Indicator]:
        """All indicators in depth-first traversal order."""
        for theme in self.themes or ():
            yield from theme.iter_indicators()

    def find_indicator(self, indicator_id: int) -> Optional[Indicator]:
        for indicator in self.iter_indicators():
            if indicator.id == indicator_id:
                return indicator
        return None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"themas": [theme.to_dict() for theme in self.themes or ()]}
        if self.semester is not None:
            d["semester"] = self.semester
        if self.period is not None:
            d["priode"] = self.period
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PidAssessment:
        return cls(
            themes=tuple(
                Theme.from_dict(item)
                for item in _child_list(data, "themas", "PidAssessment")
            ),
            semester=data.get("semester"),
            period=data.get("priode") or data.get("periode"),
        )
