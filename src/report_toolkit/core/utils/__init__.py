"""
Utils Package

Serialization and JSON loading.
"""

from .serialization import (
    deserialize_bands,
    serialize_bands,
    deserialize_pid_assessment,
    deserialize_subject_entries,
    deserialize_score_record,
    serialize_score_record,
    serialize_rows,
    serialize_subject_reports,
    load_bands_json,
    load_pid_assessment_json,
    load_report_json,
)

__all__ = [
    "deserialize_bands",
    "serialize_bands",
    "deserialize_pid_assessment",
    "deserialize_subject_entries",
    "deserialize_score_record",
    "serialize_score_record",
    "serialize_rows",
    "serialize_subject_reports",
    "load_bands_json",
    "load_pid_assessment_json",
    "load_report_json",
]
