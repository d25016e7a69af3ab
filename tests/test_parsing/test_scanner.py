"""Tests for decision_brief.parsing.scanner - label find / minimal capture."""

from __future__ import annotations

from decision_brief.parsing.scanner import (
    capture_field,
    capture_until,
    earliest,
    first_line,
    label_ends,
    skip_whitespace,
)


class TestLabelEnds:
    def test_yields_end_of_each_occurrence(self):
        text = "a: 1\na: 2"
        assert list(label_ends(text, "a:")) == [2, 7]

    def test_no_occurrence(self):
        assert list(label_ends("nothing here", "- Status:")) == []


class TestEarliest:
    def test_nearest_wins_regardless_of_order(self):
        text = "x\n- Status: A\n- Source(s): B"
        assert earliest(text, ("\n- Source", "\n- Status")) == 1

    def test_respects_start(self):
        text = "\n- Status\n- Status"
        assert earliest(text, ("\n- Status",), start=1) == 9

    def test_none_found(self):
        assert earliest("abc", ("x", "y")) == -1


class TestCaptureUntil:
    def test_stops_at_terminator(self):
        assert capture_until("abc\n- Status: x", 0, ("\n- Status",)) == "abc"

    def test_runs_to_end_without_terminator(self):
        assert capture_until("abc def", 4, ("\n",)) == "def"

    def test_empty_capture_when_terminator_immediate(self):
        assert capture_until("\n- Status", 0, ("\n- Status",)) == ""


class TestCaptureField:
    def test_trimmed_value(self):
        block = "- Status:   APPROVED  \n- Other: x"
        assert capture_field(block, "- Status:", ("\n",)) == "APPROVED"

    def test_missing_label_is_none(self):
        assert capture_field("- Priority: HIGH", "- Status:", ("\n",)) is None

    def test_first_occurrence_used(self):
        block = "- Status: one\n- Status: two"
        assert capture_field(block, "- Status:", ("\n",)) == "one"

    def test_label_match_is_case_sensitive(self):
        assert capture_field("- status: APPROVED", "- Status:", ("\n",)) is None


def test_skip_whitespace():
    assert skip_whitespace("  \n\tX", 0) == 4
    assert skip_whitespace("   ", 0) == 3


def test_first_line():
    assert first_line(" R-001\n- Priority: HIGH") == " R-001"
    assert first_line("no break") == "no break"
    assert first_line("") == ""
