"""
Module: assessment.predicates

Purpose:
    Resolves a final numeric score to a qualitative predicate band.

Key Functions:
    - resolve(): First band (in given order) whose range contains the score
    - sort_bands(): Order bands highest-first for callers

Dependencies:
    - report_toolkit.core.models.bands
    - report_toolkit.config: Fallback band and strict mode

Used By:
    - assessment.recalculator

Ordering precondition:
    resolve() never re-sorts. Bands must already be ordered (normally
    descending by min); first match wins, so overlapping bands are
    settled by iteration order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from report_toolkit.config import DEFAULT_CONFIG, ReportConfig
from report_toolkit.core.models.bands import (
    PredicateBand,
    PredicateResolution,
    ResolutionStatus,
)

logger = logging.getLogger(__name__)


class UnresolvedPredicateError(LookupError):
    """Raised in strict mode when a non-zero score matches no band."""

    def __init__(self, score: float, bands: Sequence[PredicateBand]):
        ranges = ", ".join(f"{b.label}={b.min}-{b.max}" for b in bands)
        super().__init__(f"No predicate band contains score {score} ({ranges})")
        self.score = score
        self.bands = tuple(bands)


def sort_bands(bands: Iterable[PredicateBand]) -> List[PredicateBand]:
    """
    Order bands descending by min (stable for equal mins).

    The predicate API returns bands unordered; this is the sort the
    report screens apply before handing them to resolve().
    """
    return sorted(bands, key=lambda band: band.min, reverse=True)


def resolve(
    score: Optional[float],
    bands: Sequence[PredicateBand],
    config: Optional[ReportConfig] = None,
) -> PredicateResolution:
    """
    Resolve score against an ordered band collection.

    Args:
        score: Final score (0 or None means "not gradable yet")
        bands: Bands in precedence order
        config: Fallback/strict settings (defaults to DEFAULT_CONFIG)

    Returns:
        PredicateResolution with status:
            - UNASSIGNED: score is 0/None or bands is empty
            - ASSIGNED: first band whose [min, max] contains score
            - FALLBACK: nothing matched, configured worst band returned

    Raises:
        UnresolvedPredicateError: No band matched and strict_predicates is set

    Example:
        >>> bands = [PredicateBand("A", "", 91, 100), PredicateBand("B", "", 81, 90)]
        >>> resolve(90, bands).predicate
        'B'
    """
    config = config or DEFAULT_CONFIG

    if not score or not bands:
        return PredicateResolution.unassigned()

    for band in bands:
        if band.contains(score):
            return PredicateResolution.from_band(band)

    if config.strict_predicates:
        raise UnresolvedPredicateError(score, bands)

    logger.warning(
        "Score %s matches no predicate band, using fallback %r",
        score,
        config.fallback_predicate,
    )
    return PredicateResolution(
        predicate=config.fallback_predicate,
        description=config.fallback_description,
        status=ResolutionStatus.FALLBACK,
    )
