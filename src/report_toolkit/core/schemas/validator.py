"""
Schema Validation Utilities

Validates loosely typed report payloads before they are turned into
models, so the assessment and reporting code never sees untyped data.

Basic checks always run. In strict mode the payload is additionally
validated against the bundled JSON Schema files with ``jsonschema``.

Null child lists (``"subthemas": null``) are accepted: partially loaded
report data is normal and those nodes are read as empty. A child list
of the wrong type (a string, a dict) is rejected.
"""

from __future__ import annotations

import json
from decimal import Decimal
from numbers import Real
from pathlib import Path
from typing import Any, Iterable, Sequence

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate_against_schema(data: Any, name: str) -> None:
    schema = _load_schema(name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        )


def _require(data: Any, required: Iterable[str], path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError(f"Expected an object, got {type(data).__name__}", path=path)
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )


def _children(data: dict[str, Any], key: str, path: str) -> list:
    """Child list at key; None/missing allowed, other types rejected."""
    children = data.get(key)
    if children is None:
        return []
    if not isinstance(children, list):
        raise ValidationError(f"{key} must be a list", path=f"{path}.{key}".lstrip("."))
    return [child for child in children if child is not None]


def _is_number(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


# ─────────────────────────────────────────────────────────────────────────────
# Predicate Bands
# ─────────────────────────────────────────────────────────────────────────────

def validate_bands(data: Any, *, strict: bool = False) -> None:
    """
    Validate a predicate band list.

    Each band uses either the API shape (predicate, descriptive,
    min_value, max_value) or the model shape (label, description, min,
    max). Strict mode checks the API shape with JSON Schema.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list):
        raise ValidationError("Predicate bands must be a list", path="")

    for i, band in enumerate(data):
        path = f"[{i}]"
        if isinstance(band, dict) and "predicate" in band:
            label_key, low_key, high_key = "predicate", "min_value", "max_value"
        else:
            label_key, low_key, high_key = "label", "min", "max"
        _require(band, [label_key, low_key, high_key], path)

        low, high = band[low_key], band[high_key]
        if not _is_number(low):
            raise ValidationError(f"Invalid {low_key}: {low!r}", path=f"{path}.{low_key}")
        if not _is_number(high):
            raise ValidationError(f"Invalid {high_key}: {high!r}", path=f"{path}.{high_key}")
        if low > high:
            raise ValidationError(
                f"Band {band[label_key]!r} has min > max ({low} > {high})",
                path=path,
            )

    if strict:
        _validate_against_schema(data, "predicate_bands")


# ─────────────────────────────────────────────────────────────────────────────
# PID Tree
# ─────────────────────────────────────────────────────────────────────────────

def validate_pid_assessment(data: Any, *, strict: bool = False) -> None:
    """
    Validate a PID tree payload ``{"themas": [...]}``.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("PID assessment must be an object", path="")

    for t, theme in enumerate(_children(data, "themas", "")):
        t_path = f"themas[{t}]"
        _require(theme, [], t_path)
        for s, subtheme in enumerate(_children(theme, "subthemas", t_path)):
            s_path = f"{t_path}.subthemas[{s}]"
            _require(subtheme, [], s_path)
            for i, indicator in enumerate(_children(subtheme, "indicators", s_path)):
                _require(indicator, [], f"{s_path}.indicators[{i}]")

    if strict:
        _validate_against_schema(data, "pid_assessment")


def validate_report_payload(data: Any, *, strict: bool = False) -> None:
    """
    Validate a student report payload ``{"reportData": [...]}``.

    Each entry needs a ``subject`` with id and name; its
    ``pidAssessment`` may be null (subject without indicators).

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, ["reportData"], "")
    entries = _children(data, "reportData", "")
    for n, entry in enumerate(entries):
        path = f"reportData[{n}]"
        _require(entry, ["subject"], path)
        _require(entry["subject"], ["id", "name"], f"{path}.subject")
        assessment = entry.get("pidAssessment")
        if assessment is not None:
            try:
                validate_pid_assessment(assessment, strict=strict)
            except ValidationError as e:
                prefix = f"{path}.pidAssessment"
                raise ValidationError(
                    str(e),
                    path=f"{prefix}.{e.path}" if e.path else prefix,
                    errors=e.errors,
                )


# ─────────────────────────────────────────────────────────────────────────────
# Score Records
# ─────────────────────────────────────────────────────────────────────────────

def validate_score_record(data: Any, fields: Sequence[str]) -> None:
    """
    Validate a score record payload.

    Score fields may be missing or null (not entered yet). Present
    values must be numbers; range is not checked here because
    out-of-range scores are simply ignored by the aggregator.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, ["student_id"], "")
    bad = [
        name for name in fields
        if data.get(name) is not None and not _is_number(data[name])
    ]
    if bad:
        raise ValidationError(
            f"Non-numeric score fields: {bad}",
            path=bad[0],
            errors=[f"Invalid score: {name}={data[name]!r}" for name in bad],
        )
