"""
Unit Tests for PID Predicate Assignment
"""

import logging

import pytest

from report_toolkit.reporting.assignment import (
    DEFAULT_COMMENT,
    IncompleteAssessmentError,
    assign_predicates,
    assignment_payload,
    missing_assignments,
)


class TestAssignPredicates:
    """Tests for assign_predicates()."""

    def test_assign_when_ids_given_then_new_tree(self, pid_assessment):
        updated = assign_predicates(pid_assessment, {101: "C", 103: "T"}, "Rajin")
        assert updated.find_indicator(101).assigned_predicate == "C"
        assert updated.find_indicator(101).assigned_description == "Rajin"
        assert updated.find_indicator(103).assigned_predicate == "T"
        # untouched indicator keeps its values
        assert updated.find_indicator(100).assigned_predicate == "T"
        assert updated.find_indicator(100).assigned_description == "Baik sekali"

    def test_assign_when_called_then_source_unchanged(self, pid_assessment):
        assign_predicates(pid_assessment, {101: "C"})
        assert pid_assessment.find_indicator(101).assigned_predicate is None

    def test_assign_when_none_then_clears(self, pid_assessment):
        updated = assign_predicates(pid_assessment, {100: None}, "x")
        assert updated.find_indicator(100).assigned_predicate is None
        assert updated.find_indicator(100).assigned_description is None

    def test_assign_when_invalid_value_then_raises(self, pid_assessment):
        with pytest.raises(ValueError, match="Invalid predicate 'B'"):
            assign_predicates(pid_assessment, {100: "B"})

    def test_assign_when_unknown_id_then_warns_and_skips(self, pid_assessment, caplog):
        with caplog.at_level(logging.WARNING):
            updated = assign_predicates(pid_assessment, {999: "T"})
        assert updated == pid_assessment
        assert "999" in caplog.text

    def test_assign_when_tree_then_structure_preserved(self, pid_assessment):
        updated = assign_predicates(pid_assessment, {101: "I"})
        assert [t.id for t in updated.themes] == [1, 2]
        assert updated.indicator_count == pid_assessment.indicator_count
        assert updated.period == pid_assessment.period


class TestMissingAssignments:
    """Tests for missing_assignments() and assignment_payload()."""

    def test_missing_when_pending_then_listed(self, pid_assessment):
        assert [i.id for i in missing_assignments(pid_assessment)] == [101]

    def test_payload_when_pending_then_raises(self, pid_assessment):
        with pytest.raises(IncompleteAssessmentError, match="indicator\\(s\\): 2") as exc:
            assignment_payload(pid_assessment)
        assert [i.id for i in exc.value.missing] == [101]

    def test_payload_when_complete_then_rows(self, pid_assessment):
        complete = assign_predicates(pid_assessment, {101: "C"})
        rows = assignment_payload(complete, comment="Aktif")
        assert [r["indicator_id"] for r in rows] == [100, 101, 102, 103]
        assert rows[1] == {"indicator_id": 101, "predicate": "C", "description": "Aktif"}

    def test_payload_when_no_comment_then_placeholder(self, pid_assessment):
        complete = assign_predicates(pid_assessment, {101: "C"})
        rows = assignment_payload(complete)
        assert rows[0]["description"] == "Baik sekali"
        assert rows[1]["description"] == DEFAULT_COMMENT
