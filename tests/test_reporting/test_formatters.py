"""Tests for decision_brief.reporting.formatters."""

from __future__ import annotations

from datetime import datetime, timezone

from decision_brief.models.recommendation import Recommendation
from decision_brief.models.session import (
    AnalyticsSummary,
    MonthlyActivity,
    SessionSummary,
)
from decision_brief.parsing.extractor import BlockOutcome
from decision_brief.parsing.sections import split_sections
from decision_brief.reporting.formatters import (
    format_analytics_summary,
    format_recommendation_card,
    format_recommendations,
    format_section_overview,
    format_session_detail,
    format_session_list,
    format_skipped_blocks,
    priority_label,
)
from decision_brief.taxonomy.report_taxonomy import Priority


# ── Cards ─────────────────────────────────────────────────────────────────────


def test_card_header_shows_id_priority_and_status(sample_recommendation) -> None:
    card = format_recommendation_card(sample_recommendation)
    first = card.split("\n")[0]
    assert "R-001" in first
    assert "[HIGH PRIORITY]" in first
    assert "[APPROVED] APPROVED" in first


def test_card_border_encodes_priority() -> None:
    high = format_recommendation_card(Recommendation(statement="x", priority="HIGH"))
    low = format_recommendation_card(Recommendation(statement="x", priority="LOW"))
    assert all(line.startswith("!!") for line in high.split("\n"))
    assert all(line.startswith(" .") for line in low.split("\n"))


def test_card_missing_facts_and_sources_show_na() -> None:
    card = format_recommendation_card(Recommendation(statement="x"))
    assert "Supporting Facts: N/A" in card
    assert "Source:           N/A" in card
    assert "[PENDING]" in card


def test_card_wraps_long_statement() -> None:
    rec = Recommendation(statement="word " * 40)
    card = format_recommendation_card(rec, width=40)
    assert all(len(line) <= 40 for line in card.split("\n")[1:-2])


def test_blocked_status_tag() -> None:
    rec = Recommendation(statement="x", status="BLOCKED – INSUFFICIENT DATA")
    assert "[BLOCKED]" in format_recommendation_card(rec)


def test_priority_label() -> None:
    assert priority_label(Priority.MEDIUM) == "MEDIUM PRIORITY"


# ── Recommendation list ───────────────────────────────────────────────────────


def test_recommendations_counts_line(sample_recommendations) -> None:
    out = format_recommendations(sample_recommendations)
    assert "3 recommendation(s): HIGH 1, MEDIUM 1, LOW 1" in out
    assert out.index("R-001") < out.index("R-002") < out.index("R-003")


def test_recommendations_empty() -> None:
    out = format_recommendations([])
    assert "no recommendations found" in out


def test_skipped_blocks() -> None:
    skipped = [BlockOutcome(index=1, block_id="R-002", skip_reason="missing decision statement")]
    out = format_skipped_blocks(skipped)
    assert "Skipped 1 block(s)" in out
    assert "R-002" in out
    assert format_skipped_blocks([]) == "  No blocks skipped."


def test_section_overview(sample_report) -> None:
    out = format_section_overview(split_sections(sample_report))
    assert out.count("[OK]") == 5
    partial = format_section_overview(split_sections("SECTION 2 — DATA GAPS\n- x"))
    assert "[MISSING] SECTION 3 — DECISION RECOMMENDATIONS" in partial


# ── Sessions / analytics ──────────────────────────────────────────────────────


def test_session_list() -> None:
    summaries = [
        SessionSummary(
            session_id=7,
            title="Market entry",
            created_at=datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc),
        )
    ]
    out = format_session_list(summaries, "analyst")
    assert "Saved Sessions (analyst)" in out
    assert "2025-03-14 09:30" in out
    assert "Market entry" in out


def test_session_list_empty() -> None:
    assert "no saved sessions" in format_session_list([], "local")


def test_session_detail(sample_session) -> None:
    out = format_session_detail(sample_session)
    assert "Freelance market entry" in out
    assert "Owner:   analyst" in out
    assert "R-003" in out


def test_analytics_summary() -> None:
    summary = AnalyticsSummary(
        total_sessions=2,
        total_recommendations=4,
        priority_counts={"HIGH": 2, "MEDIUM": 1, "LOW": 1},
        monthly_activity=[MonthlyActivity(name="Mar", count=2)],
    )
    out = format_analytics_summary(summary, "local")
    assert "Total sessions:   2" in out
    assert "Total decisions:  4" in out
    assert "50%" in out
    assert "Mar" in out and "##" in out


def test_analytics_summary_empty() -> None:
    out = format_analytics_summary(AnalyticsSummary(), "local")
    assert "(none)" in out
