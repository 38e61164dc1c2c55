"""
Module: config

Purpose:
    Configuration dataclass for the assessment engine. Immutable
    settings with validation on construction.

Key Classes:
    - ReportConfig: Score scale, fallback band and predicate settings

Dependencies:
    - dataclasses (std)

Used By:
    - assessment.aggregator: Score scale bounds
    - assessment.predicates: Fallback band, strict mode
    - assessment.recalculator: Edit clamping
    - reporting.assignment: Allowed PID predicate values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ReportConfig:
    """
    Configuration for score aggregation and predicate resolution (immutable).

    Attributes:
        score_min: Lowest value on the score scale
        score_max: Highest value on the score scale
        fallback_predicate: Label used when no band matches a non-zero score
        fallback_description: Description paired with the fallback label
        strict_predicates: Raise UnresolvedPredicateError instead of falling back
        indicator_predicates: Values a PID indicator may be assigned

    Invariants:
        - score_min < score_max
        - indicator_predicates is non-empty

    Example:
        >>> config = ReportConfig(strict_predicates=True)
        >>> config.clamp(140)
        100
    """

    score_min: int = 0
    score_max: int = 100

    fallback_predicate: str = "D"
    fallback_description: str = "Perlu Perbaikan/Bimbingan"
    strict_predicates: bool = False

    # One check column per value on the printed PID report
    indicator_predicates: Tuple[str, ...] = ("T", "C", "I")

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.score_min >= self.score_max:
            raise ValueError(
                f"score_min ({self.score_min}) must be < score_max ({self.score_max})"
            )
        if not self.indicator_predicates:
            raise ValueError("indicator_predicates must not be empty")

    def in_scale(self, value: float) -> bool:
        """Check if value lies on the closed score scale."""
        return self.score_min <= value <= self.score_max

    def clamp(self, value: int) -> int:
        """Clamp value onto the score scale."""
        if value < self.score_min:
            return self.score_min
        if value > self.score_max:
            return self.score_max
        return value


DEFAULT_CONFIG = ReportConfig()
