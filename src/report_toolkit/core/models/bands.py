"""
Module: bands

Purpose:
    Provides the PredicateBand dataclass - a qualitative grade label bound
    to an inclusive numeric score range - and PredicateResolution, the
    result of matching a score against a band collection.

Key Functions:
    - PredicateBand.contains(score): Inclusive range check
    - PredicateBand.to_dict() / PredicateBand.from_dict(): Serialization
    - PredicateResolution.unassigned(): Sentinel for "not yet gradable"
    - PredicateResolution.from_band(band): Result for a matched band

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - assessment.predicates
    - core.models.scores.FinalAssessment
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ResolutionStatus(str, Enum):
    """How a predicate was obtained for a score."""
    ASSIGNED = "assigned"        # A band matched the score
    UNASSIGNED = "unassigned"    # Score is zero/absent or no bands are active
    FALLBACK = "fallback"        # Non-zero score fell into a gap between bands

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PredicateBand:
    """
    Predicate band bound to an inclusive score range.

    Attributes:
        label: Short predicate label, e.g. "A"
        description: Human readable description of the band
        min: Lowest score in the band (inclusive)
        max: Highest score in the band (inclusive)

    Invariants:
        - min <= max

    Example:
        >>> band = PredicateBand("B", "Baik", 81, 90)
        >>> band.contains(90)
        True
        >>> band.contains(91)
        False
    """

    label: str
    description: str
    min: float
    max: float

    def __post_init__(self) -> None:
        """Validate band range on construction."""
        if self.min > self.max:
            raise ValueError(
                f"Band {self.label!r} has min > max: {self.min} > {self.max}"
            )

    def contains(self, score: float) -> bool:
        """Check if score lies within [min, max]."""
        return self.min <= score <= self.max

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the predicate API field names."""
        return {
            "predicate": self.label,
            "descriptive": self.description,
            "min_value": self.min,
            "max_value": self.max,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PredicateBand:
        """
        Deserialize from the predicate API shape.

        Accepts both ``{predicate, descriptive, min_value, max_value}``
        and ``{label, description, min, max}``.
        """
        if "predicate" in data:
            return cls(
                label=data["predicate"],
                description=data.get("descriptive") or "",
                min=data["min_value"],
                max=data["max_value"],
            )
        return cls(
            label=data["label"],
            description=data.get("description") or "",
            min=data["min"],
            max=data["max"],
        )

    def __repr__(self) -> str:
        return f"PredicateBand({self.label!r}, {self.min}-{self.max})"


@dataclass(frozen=True, slots=True)
class PredicateResolution:
    """
    Outcome of resolving a score against a band collection.

    Attributes:
        predicate: Band label, "" when unassigned
        description: Band description, "" when unassigned
        status: How the predicate was obtained
        band: The matched band (None when unassigned or fallback)
    """

    predicate: str
    description: str
    status: ResolutionStatus
    band: Optional[PredicateBand] = None

    @classmethod
    def unassigned(cls) -> PredicateResolution:
        """Blank result for scores that cannot be graded yet."""
        return cls(predicate="", description="", status=ResolutionStatus.UNASSIGNED)

    @classmethod
    def from_band(cls, band: PredicateBand) -> PredicateResolution:
        """Result for a score that matched band."""
        return cls(
            predicate=band.label,
            description=band.description,
            status=ResolutionStatus.ASSIGNED,
            band=band,
        )

    @property
    def is_assigned(self) -> bool:
        """True when a real predicate (matched or fallback) was produced."""
        return self.status != ResolutionStatus.UNASSIGNED
