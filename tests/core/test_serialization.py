"""
Unit Tests for Serialization

Tests for deserialize_*/serialize_* helpers and JSON file loading.
"""

import json

import pytest

from report_toolkit.core.models.bands import PredicateBand
from report_toolkit.core.models.indicators import PidAssessment
from report_toolkit.core.schemas.validator import ValidationError
from report_toolkit.core.utils.serialization import (
    deserialize_bands,
    deserialize_pid_assessment,
    deserialize_score_record,
    deserialize_subject_entries,
    load_bands_json,
    load_pid_assessment_json,
    load_report_json,
    serialize_bands,
    serialize_score_record,
)


class TestBandSerialization:
    """Tests for predicate band (de)serialization."""

    def test_deserialize_when_api_list_then_order_preserved(self):
        """Deserialization never re-sorts; that is the caller's job."""
        bands = deserialize_bands([
            {"predicate": "C", "descriptive": "Cukup", "min_value": 71, "max_value": 80},
            {"predicate": "A", "descriptive": "Sangat Baik", "min_value": 91, "max_value": 100},
        ])
        assert [b.label for b in bands] == ["C", "A"]

    def test_deserialize_when_invalid_then_raises_error(self):
        with pytest.raises(ValidationError):
            deserialize_bands([{"predicate": "A", "min_value": 100, "max_value": 1}])

    def test_serialize_when_round_tripped_then_equal(self, knowledge_bands):
        assert deserialize_bands(serialize_bands(knowledge_bands)) == knowledge_bands


class TestTreeSerialization:
    """Tests for PID tree and report payload parsing."""

    def test_deserialize_when_valid_then_tree(self, pid_payload):
        tree = deserialize_pid_assessment(pid_payload)
        assert isinstance(tree, PidAssessment)
        assert tree.indicator_count == 4

    def test_deserialize_when_nodes_without_ids_then_tree(self, bare_pid_payload):
        tree = deserialize_pid_assessment(bare_pid_payload, strict=True)
        assert tree.indicator_count == 3
        assert [i.id for i in tree.iter_indicators()] == [None, None, None]
        assert tree.themes[0].subthemes[1].indicators[0].assigned_description == "Aktif"

    def test_deserialize_subject_entries_when_null_tree_then_none(self, pid_payload):
        entries = deserialize_subject_entries({
            "reportData": [
                {"subject": {"id": 1, "name": "PAI"}, "pidAssessment": pid_payload},
                {"subject": {"id": 2, "name": "Seni"}, "pidAssessment": None},
            ]
        })
        assert [(sid, name) for sid, name, _ in entries] == [(1, "PAI"), (2, "Seni")]
        assert entries[0][2].indicator_count == 4
        assert entries[1][2] is None


class TestScoreRecordSerialization:
    """Tests for score record parsing."""

    def test_deserialize_when_valid_then_record(self):
        record = deserialize_score_record({"student_id": 4, "uh1": 90}, ["uh1", "uh2"])
        assert record.scores == {"uh1": 90, "uh2": None}
        assert serialize_score_record(record)["student_id"] == 4

    def test_deserialize_when_text_score_then_raises_error(self):
        with pytest.raises(ValidationError):
            deserialize_score_record({"student_id": 4, "uh1": "ninety"}, ["uh1"])


class TestJsonLoading:
    """Tests for JSON file helpers."""

    def test_load_bands_when_api_envelope_then_unwrapped(self, tmp_path):
        path = tmp_path / "bands.json"
        path.write_text(json.dumps({
            "academicYear": "2025/2026",
            "data": [{"predicate": "A", "descriptive": "x", "min_value": 91, "max_value": 100}],
        }))
        assert load_bands_json(path) == [PredicateBand("A", "x", 91, 100)]

    def test_load_bands_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_bands_json(tmp_path / "nope.json")

    def test_load_bands_when_bad_json_then_validation_error(self, tmp_path):
        path = tmp_path / "bands.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="Error parsing"):
            load_bands_json(path)

    def test_load_tree_when_list_then_first_element(self, tmp_path, pid_payload):
        path = tmp_path / "pid.json"
        path.write_text(json.dumps([pid_payload]))
        assert load_pid_assessment_json(path).indicator_count == 4

    def test_load_tree_when_empty_list_then_empty_tree(self, tmp_path):
        path = tmp_path / "pid.json"
        path.write_text("[]")
        assert load_pid_assessment_json(path) == PidAssessment()

    def test_load_report_when_valid_then_entries(self, tmp_path, pid_payload):
        path = tmp_path / "report.json"
        path.write_text(json.dumps({
            "students": {"id": 1, "fullname": "Ahmad"},
            "reportData": [{"subject": {"id": 9, "name": "PAI"}, "pidAssessment": pid_payload}],
        }))
        entries = load_report_json(path)
        assert entries[0][0] == 9
