"""
Serialization Utilities

To/from JSON helpers for the report models.

Parsing happens once, at the boundary: payloads from the report API are
validated, then turned into frozen models. Derived values (averages,
predicates of score records, row spans) are never read back from a
payload; they are always recalculated.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from ..models.bands import PredicateBand
from ..models.indicators import PidAssessment
from ..models.rows import FlattenedRow, SubjectReport
from ..models.scores import ScoreRecord
from ..schemas.validator import (
    ValidationError,
    validate_bands,
    validate_pid_assessment,
    validate_report_payload,
    validate_score_record,
)

SubjectEntry = Tuple[int, str, Optional[PidAssessment]]


# ─────────────────────────────────────────────────────────────────────────────
# Predicate Bands
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_bands(
    data: Any,
    *,
    validate: bool = True,
    strict: bool = False,
) -> List[PredicateBand]:
    """
    Deserialize a predicate band list.

    Order is preserved; use assessment.predicates.sort_bands() when the
    source does not deliver bands highest-first.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_bands(data, strict=strict)
    return [PredicateBand.from_dict(item) for item in data]


def serialize_bands(bands: Sequence[PredicateBand]) -> List[dict[str, Any]]:
    return [band.to_dict() for band in bands]


# ─────────────────────────────────────────────────────────────────────────────
# PID Trees
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_pid_assessment(
    data: Any,
    *,
    validate: bool = True,
    strict: bool = False,
) -> PidAssessment:
    """
    Deserialize a PID tree payload.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_pid_assessment(data, strict=strict)
    return PidAssessment.from_dict(data)


def deserialize_subject_entries(
    payload: Any,
    *,
    validate: bool = True,
    strict: bool = False,
) -> List[SubjectEntry]:
    """
    Split a student report payload into (subject id, name, tree) entries.

    A null ``pidAssessment`` yields None for that subject.

    Raises:
        ValidationError: If validate=True and payload is invalid
    """
    if validate:
        validate_report_payload(payload, strict=strict)

    entries = []
    for item in payload.get("reportData") or []:
        if item is None:
            continue
        subject = item["subject"]
        tree = item.get("pidAssessment")
        entries.append(
            (
                subject["id"],
                subject.get("name") or "",
                PidAssessment.from_dict(tree) if tree is not None else None,
            )
        )
    return entries


def serialize_rows(rows: Sequence[FlattenedRow]) -> List[dict[str, Any]]:
    """Rows in the table-renderer shape."""
    return [row.to_dict() for row in rows]


def serialize_subject_reports(reports: Sequence[SubjectReport]) -> List[dict[str, Any]]:
    return [report.to_dict() for report in reports]


# ─────────────────────────────────────────────────────────────────────────────
# Score Records
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_score_record(
    data: Any,
    fields: Sequence[str],
    *,
    validate: bool = True,
) -> ScoreRecord:
    """
    Deserialize the raw inputs of a score record.

    Args:
        data: Report payload for one student
        fields: Raw score field names (e.g. KNOWLEDGE_SCHEME.fields)
        validate: Whether to validate first

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_score_record(data, fields)
    return ScoreRecord.from_dict(data, fields)


def serialize_score_record(record: ScoreRecord) -> dict[str, Any]:
    return record.to_dict()


# ─────────────────────────────────────────────────────────────────────────────
# JSON Files
# ─────────────────────────────────────────────────────────────────────────────

def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Error parsing {path.name}: {e}",
                path=str(path),
                errors=[str(e)],
            )


def _unwrap(data: Any) -> Any:
    """Strip the API's ``{"data": ...}`` envelope if present."""
    if isinstance(data, dict) and "data" in data and len(data) <= 2:
        return data["data"]
    return data


def load_bands_json(path: Path, *, validate: bool = True) -> List[PredicateBand]:
    """
    Load predicate bands from a JSON file.

    Accepts a bare list or the API envelope ``{"data": [...]}``.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    return deserialize_bands(_unwrap(_load_json(path)), validate=validate)


def load_pid_assessment_json(path: Path, *, validate: bool = True) -> PidAssessment:
    """
    Load a PID tree from a JSON file.

    Accepts a tree object, or a list of trees (the API returns a list
    whose first element is the tree for the requested period).

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    data = _unwrap(_load_json(path))
    if isinstance(data, list):
        if not data:
            return PidAssessment()
        data = data[0]
    return deserialize_pid_assessment(data, validate=validate)


def load_report_json(path: Path, *, validate: bool = True) -> List[SubjectEntry]:
    """Load a student report payload from a JSON file."""
    return deserialize_subject_entries(_load_json(path), validate=validate)
