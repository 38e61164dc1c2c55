"""
Module: scores

Purpose:
    Provides ScoreRecord - one student's raw assessment inputs for one
    subject - and FinalAssessment, the derived averages and predicate
    computed from those inputs.

Key Functions:
    - FinalAssessment.empty(keys): All-zero derived fields
    - ScoreRecord.values_for(fields): Raw values in field order
    - ScoreRecord.with_score(field, value): Copy with one input replaced
    - ScoreRecord.to_dict() / ScoreRecord.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .bands.ResolutionStatus

Used By:
    - assessment.recalculator
    - core.utils.serialization

Note:
    FinalAssessment is never stored on its own. It is always rebuilt from
    the raw scores, so a record and its derived fields cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .bands import ResolutionStatus

Score = Union[int, float, None]


@dataclass(frozen=True, slots=True)
class FinalAssessment:
    """
    Derived assessment values for one ScoreRecord.

    Attributes:
        component_averages: Average per component, keyed by output name
            (e.g. {"uh_avg": 89, "avg": 90})
        overall_average: Final score
        predicate: Resolved predicate label, "" when unassigned
        description: Resolved predicate description
        status: How the predicate was obtained
    """

    component_averages: Dict[str, float] = field(default_factory=dict)
    overall_average: float = 0
    predicate: str = ""
    description: str = ""
    status: ResolutionStatus = ResolutionStatus.UNASSIGNED

    @classmethod
    def empty(cls, component_keys: Iterable[str] = ()) -> FinalAssessment:
        """Derived fields reset to 0/empty."""
        return cls(component_averages={key: 0 for key in component_keys})

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = dict(self.component_averages)
        d["final"] = self.overall_average
        d["predicate"] = self.predicate
        d["description"] = self.description
        return d


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    """
    One student's raw scores plus the derived assessment.

    The raw ``scores`` mapping keeps the input field order
    (e.g. uh1..uh4, t1, t2, uts, uas). A value of 0 or None means
    "not entered yet".

    Attributes:
        student_id: Student identifier
        scores: Raw inputs keyed by field name
        full_name: Optional display name
        report_id: Id of the saved report, None if never saved
        assessment: Derived fields (replaced wholesale on recalculation)

    Example:
        >>> r = ScoreRecord(7, {"uh1": 90, "uh2": 0})
        >>> r.values_for(["uh1", "uh2"])
        [90, 0]
    """

    student_id: int
    scores: Dict[str, Score]
    full_name: str = ""
    report_id: Optional[int] = None
    assessment: FinalAssessment = field(default_factory=FinalAssessment)

    def values_for(self, fields: Sequence[str]) -> List[Score]:
        """Raw values for fields, missing fields read as None."""
        return [self.scores.get(name) for name in fields]

    def with_score(self, name: str, value: Score) -> ScoreRecord:
        """Copy of this record with one raw input replaced."""
        scores = dict(self.scores)
        scores[name] = value
        return replace(self, scores=scores)

    def with_assessment(self, assessment: FinalAssessment) -> ScoreRecord:
        """Copy of this record carrying a new derived assessment."""
        return replace(self, assessment=assessment)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the report payload shape (raw + derived fields)."""
        d: dict[str, Any] = {"student_id": self.student_id}
        if self.report_id is not None:
            d["id"] = self.report_id
        if self.full_name:
            d["full_name"] = self.full_name
        d.update(self.scores)
        d.update(self.assessment.to_dict())
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any], fields: Sequence[str]) -> ScoreRecord:
        """
        Deserialize raw inputs from a report payload.

        Derived fields in the payload are ignored; they are recomputed
        by the recalculator.

        Args:
            data: Payload dict
            fields: Names of the raw score fields to read
        """
        return cls(
            student_id=data["student_id"],
            scores={name: data.get(name) for name in fields},
            full_name=data.get("full_name") or "",
            report_id=data.get("id"),
        )
