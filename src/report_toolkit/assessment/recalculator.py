"""
Module: assessment.recalculator

Purpose:
    Full per-student recomputation of derived assessment fields from raw
    scores. Runs on every score edit, so it is pure and idempotent: the
    derived fields depend only on the raw scores and the bands, never on
    the previous derived values.

Key Functions:
    - recalculate(): Rebuild a record's FinalAssessment
    - recalculate_all(): Batch form over many records
    - parse_score_input(): Turn a raw edit into a clamped score
    - apply_score_edit(): Replace one raw score and recalculate

Dependencies:
    - assessment.aggregator: average()
    - assessment.predicates: resolve()
    - assessment.schemes: field layout per record type

Used By:
    - Report input screens (external)
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from numbers import Real
from typing import Iterable, List, Optional, Sequence

from report_toolkit.config import DEFAULT_CONFIG, ReportConfig
from report_toolkit.core.models.bands import PredicateBand
from report_toolkit.core.models.scores import FinalAssessment, ScoreRecord

from .aggregator import average, round_half_up
from .predicates import resolve
from .schemes import KNOWLEDGE_SCHEME, AssessmentScheme

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def recalculate(
    record: ScoreRecord,
    bands: Sequence[PredicateBand],
    scheme: AssessmentScheme = KNOWLEDGE_SCHEME,
    config: Optional[ReportConfig] = None,
) -> ScoreRecord:
    """
    Recompute the derived fields of record.

    Steps:
        1. Group raw inputs into the scheme's components
        2. All inputs absent/zero -> derived fields reset, no predicate lookup
        3. Average each component
        4. Final = average of non-zero component averages + standalone scores
        5. Resolve the predicate of the final score

    Args:
        record: Record holding the raw scores
        bands: Predicate bands, already in precedence order
        scheme: Field layout (defaults to KNOWLEDGE_SCHEME)
        config: Engine settings (defaults to DEFAULT_CONFIG)

    Returns:
        New ScoreRecord with identity and raw scores unchanged and a
        freshly computed assessment

    Example:
        >>> r = ScoreRecord(1, {"uh1": 90, "uh2": 90, "uh3": 85, "uh4": 90,
        ...                     "t1": 90, "t2": 90, "uts": 90, "uas": 90})
        >>> recalculate(r, bands).assessment.to_dict()
        {'uh_avg': 89, 'avg': 90, 'final': 90, 'predicate': 'B', 'description': 'Baik'}
    """
    config = config or DEFAULT_CONFIG

    if all(not value for value in record.values_for(scheme.fields)):
        return record.with_assessment(FinalAssessment.empty(scheme.component_keys))

    component_averages = {
        component.output_key: average(
            record.values_for(component.fields),
            ndigits=scheme.component_ndigits,
            config=config,
        )
        for component in scheme.components
    }

    final_inputs: List[object] = [v for v in component_averages.values() if v > 0]
    final_inputs.extend(record.values_for(scheme.standalone))
    final = average(final_inputs, ndigits=scheme.final_ndigits, config=config)

    resolution = resolve(final, bands, config)

    return record.with_assessment(
        FinalAssessment(
            component_averages=component_averages,
            overall_average=final,
            predicate=resolution.predicate,
            description=resolution.description,
            status=resolution.status,
        )
    )


def recalculate_all(
    records: Iterable[ScoreRecord],
    bands: Sequence[PredicateBand],
    scheme: AssessmentScheme = KNOWLEDGE_SCHEME,
    config: Optional[ReportConfig] = None,
) -> List[ScoreRecord]:
    """Recalculate every record against the same bands."""
    return [recalculate(record, bands, scheme, config) for record in records]


def parse_score_input(raw: object, config: Optional[ReportConfig] = None) -> int:
    """
    Convert a raw score edit into a score on the scale.

    Text keeps its digits only ("8a5" -> 85, "" -> 0, "-5" -> 5);
    numbers are rounded half-up. The result is clamped to the scale,
    never rejected.

    Args:
        raw: Text typed into a score cell, a number, or None
        config: Score scale (defaults to DEFAULT_CONFIG)

    Returns:
        Integer score within [score_min, score_max]
    """
    config = config or DEFAULT_CONFIG

    if raw is None or isinstance(raw, bool):
        value = 0
    elif isinstance(raw, (Real, Decimal)):
        if math.isnan(raw):
            value = 0
        elif math.isinf(raw):
            value = config.score_max if raw > 0 else config.score_min
        else:
            value = round_half_up(raw)
    else:
        digits = _NON_DIGITS.sub("", str(raw))
        value = int(digits) if digits else 0

    clamped = config.clamp(value)
    if clamped != value:
        logger.debug("Clamped score edit %r to %d", raw, clamped)
    return clamped


def apply_score_edit(
    record: ScoreRecord,
    field: str,
    raw: object,
    bands: Sequence[PredicateBand],
    scheme: AssessmentScheme = KNOWLEDGE_SCHEME,
    config: Optional[ReportConfig] = None,
) -> ScoreRecord:
    """
    Write one score edit into record and recalculate.

    Args:
        record: Current record
        field: Raw field being edited, e.g. "uh3"
        raw: Edited value (text or number), clamped via parse_score_input()
        bands: Predicate bands, already in precedence order
        scheme: Field layout (defaults to KNOWLEDGE_SCHEME)
        config: Engine settings

    Returns:
        New, recalculated ScoreRecord

    Raises:
        KeyError: If field is not part of scheme
    """
    if field not in scheme.fields:
        raise KeyError(f"{field!r} is not a {scheme.name} score field")
    value = parse_score_input(raw, config)
    return recalculate(record.with_score(field, value), bands, scheme, config)
