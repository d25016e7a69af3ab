"""Tests for AnalysisSession and derive_session_title."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from decision_brief.models.session import (
    AnalysisSession,
    AnalyticsSummary,
    derive_session_title,
)


class TestDeriveSessionTitle:
    def test_first_line(self):
        assert derive_session_title("Market entry\nmore detail") == "Market entry"

    def test_truncated(self):
        assert derive_session_title("x" * 80) == "x" * 50
        assert derive_session_title("abcdef", max_chars=3) == "abc"

    def test_empty_context(self):
        assert derive_session_title("") == "Untitled Session"
        assert derive_session_title("\nsecond line") == "Untitled Session"

    def test_blank_first_line(self):
        assert derive_session_title("   \nx") == "Untitled Session"
        assert derive_session_title("\t \r\nreal title") == "Untitled Session"

    def test_first_line_trimmed(self):
        assert derive_session_title("  Market entry  \nmore") == "Market entry"


class TestAnalysisSession:
    def test_defaults(self):
        s = AnalysisSession(owner="a", title="t")
        assert s.recommendations == []
        assert s.session_id is None
        assert s.created_at is None

    def test_blank_owner_raises(self):
        with pytest.raises(ValidationError, match="blank"):
            AnalysisSession(owner=" ", title="t")

    def test_blank_title_raises(self):
        with pytest.raises(ValidationError):
            AnalysisSession(owner="a", title="")


def test_analytics_summary_defaults():
    s = AnalyticsSummary()
    assert s.priority_counts == {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
    assert s.monthly_activity == []
