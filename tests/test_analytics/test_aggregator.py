"""Tests for decision_brief.analytics.aggregator."""

from __future__ import annotations

from datetime import datetime, timezone

from decision_brief.analytics.aggregator import compute_analytics
from decision_brief.models.recommendation import Recommendation
from decision_brief.models.session import AnalysisSession


def _session(month: int | None, *priorities: str) -> AnalysisSession:
    return AnalysisSession(
        owner="a",
        title="t",
        recommendations=[
            Recommendation(statement=f"s{i}", priority=p) for i, p in enumerate(priorities)
        ],
        created_at=(
            datetime(2025, month, 10, tzinfo=timezone.utc) if month is not None else None
        ),
    )


def test_empty() -> None:
    summary = compute_analytics([])
    assert summary.total_sessions == 0
    assert summary.total_recommendations == 0
    assert summary.priority_counts == {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
    assert summary.monthly_activity == []


def test_totals_and_priority_counts() -> None:
    summary = compute_analytics([
        _session(1, "HIGH", "LOW"),
        _session(1, "HIGH", "MEDIUM", "HIGH"),
        _session(2),
    ])
    assert summary.total_sessions == 3
    assert summary.total_recommendations == 5
    assert summary.priority_counts == {"HIGH": 3, "MEDIUM": 1, "LOW": 1}


def test_monthly_activity_first_seen_order() -> None:
    summary = compute_analytics([
        _session(3),
        _session(1),
        _session(3),
    ])
    assert [(m.name, m.count) for m in summary.monthly_activity] == [("Mar", 2), ("Jan", 1)]


def test_session_without_created_at_counts_in_totals_only() -> None:
    summary = compute_analytics([_session(None, "LOW")])
    assert summary.total_sessions == 1
    assert summary.priority_counts["LOW"] == 1
    assert summary.monthly_activity == []


def test_accepts_generator(sample_session) -> None:
    summary = compute_analytics(s for s in [sample_session])
    assert summary.total_recommendations == 3
    assert summary.monthly_activity[0].name == "Mar"
