"""
Unit Tests for Score Record Models

Tests for ScoreRecord and FinalAssessment.
"""

import pytest

from report_toolkit.core.models.bands import ResolutionStatus
from report_toolkit.core.models.scores import FinalAssessment, ScoreRecord


class TestFinalAssessment:
    """Tests for FinalAssessment dataclass."""

    def test_empty_when_keys_given_then_zeroes_each(self):
        fa = FinalAssessment.empty(["uh_avg", "avg"])
        assert fa.component_averages == {"uh_avg": 0, "avg": 0}
        assert fa.overall_average == 0
        assert fa.predicate == ""
        assert fa.status == ResolutionStatus.UNASSIGNED

    def test_to_dict_when_called_then_payload_keys(self):
        fa = FinalAssessment({"uh_avg": 89, "avg": 90}, 90, "B", "Baik", ResolutionStatus.ASSIGNED)
        assert fa.to_dict() == {
            "uh_avg": 89, "avg": 90, "final": 90, "predicate": "B", "description": "Baik",
        }


class TestScoreRecord:
    """Tests for ScoreRecord dataclass."""

    def test_values_for_when_field_missing_then_none(self):
        r = ScoreRecord(1, {"uh1": 80})
        assert r.values_for(["uh1", "uh2"]) == [80, None]

    def test_with_score_when_called_then_original_unchanged(self):
        r = ScoreRecord(1, {"uh1": 80})
        r2 = r.with_score("uh1", 95)
        assert r.scores["uh1"] == 80
        assert r2.scores["uh1"] == 95
        assert r2.student_id == 1

    def test_with_score_when_frozen_then_cannot_assign(self):
        r = ScoreRecord(1, {"uh1": 80})
        with pytest.raises(AttributeError):
            r.student_id = 2  # type: ignore

    def test_from_dict_when_derived_fields_present_then_ignored(self):
        """Stored averages are not trusted; only raw fields are read."""
        r = ScoreRecord.from_dict(
            {"id": 12, "student_id": 7, "uh1": 90, "uh_avg": 12, "final": 3, "predicate": "A"},
            ["uh1", "uh2"],
        )
        assert r.report_id == 12
        assert r.scores == {"uh1": 90, "uh2": None}
        assert r.assessment == FinalAssessment()

    def test_to_dict_when_called_then_raw_then_derived(self):
        r = ScoreRecord(7, {"uh1": 90}, full_name="Siti", report_id=3)
        d = r.to_dict()
        assert d["student_id"] == 7
        assert d["id"] == 3
        assert d["full_name"] == "Siti"
        assert d["uh1"] == 90
        assert d["final"] == 0
        assert d["predicate"] == ""
