"""
Schemas Package

Payload validation (basic checks + JSON Schema in strict mode).
"""

from .validator import (
    validate_bands,
    validate_pid_assessment,
    validate_report_payload,
    validate_score_record,
    ValidationError,
)

__all__ = [
    "validate_bands",
    "validate_pid_assessment",
    "validate_report_payload",
    "validate_score_record",
    "ValidationError",
]
