"""
Shared pytest fixtures for the decision-brief test suite.

Provides:
  - ``in_memory_db``: A fresh in-memory SQLite connection with the schema
    applied. Created anew for each test that requests it.
  - ``sample_report``: A complete five-section generated report.
  - Sample domain object factories for use in multiple test modules.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Generator

import pytest

from decision_brief.db.schema import apply_schema
from decision_brief.models.recommendation import Recommendation
from decision_brief.models.session import AnalysisSession
from decision_brief.taxonomy.report_taxonomy import Priority

SAMPLE_REPORT = """\
SECTION 1 — VERIFIED FACTS
- Fact ID: F-001
- Statement: (Global) Freelance platform revenue grew 18% in 2024.
- Source(s): Source: Global Freelancer Report 2025 | 2025-01

- Fact ID: F-002
- Statement: (Bangladesh) Bangladesh is the second-largest supplier of online labour.
- Source(s): Source: Oxford Internet Institute | 2024-11

SECTION 2 — DATA GAPS
- Missing Field: Platform fee structures for local payment rails
- Why Required: Needed to model net freelancer income
- Impact if Absent: Margin estimates carry a wide range

SECTION 3 — DECISION RECOMMENDATIONS
- Recommendation ID: R-001
- Priority: HIGH
- Decision Statement: Expand into the Bangladesh freelance market.
- Supporting Facts (Fact IDs): F-001, F-002
- Source(s): Global Freelancer Report 2025
- Status: APPROVED

- Recommendation ID: R-002
- Priority: low
- Decision Statement: Pilot a local-currency payout option
  before committing to a full payments integration.
- Supporting Facts (Fact IDs): F-002
- Source(s): Oxford Internet Institute
- Status: BLOCKED – INSUFFICIENT DATA

- Recommendation ID: R-003
- Decision Statement: Track competitor fee changes quarterly.
- Status: APPROVED

SECTION 4 — ASSUMPTIONS
- Assumption Statement: Exchange rates stay within 5% of current levels.
- Justification Source: Central bank guidance
- Risk Level: MEDIUM

SECTION 5 — AUDIT DECLARATION
"I confirm that no content above was generated without direct source support."
"""


# ── Database fixture ──────────────────────────────────────────────────────────

@pytest.fixture
def in_memory_db() -> Generator[sqlite3.Connection, None, None]:
    """Yield a fresh in-memory SQLite connection with the schema applied."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    apply_schema(conn)
    yield conn
    conn.close()


# ── Sample report / domain object factories ──────────────────────────────────

@pytest.fixture
def sample_report() -> str:
    """A full five-section report with three recommendation entries."""
    return SAMPLE_REPORT


@pytest.fixture
def sample_recommendation() -> Recommendation:
    """A valid HIGH-priority ``Recommendation``."""
    return Recommendation(
        id="R-001",
        priority=Priority.HIGH,
        statement="Expand into the Bangladesh freelance market.",
        status="APPROVED",
        facts="F-001, F-002",
        sources="Global Freelancer Report 2025",
    )


@pytest.fixture
def sample_recommendations(sample_recommendation: Recommendation) -> list[Recommendation]:
    """One record per priority level."""
    return [
        sample_recommendation,
        Recommendation(
            id="R-002",
            priority=Priority.MEDIUM,
            statement='He said "go global", with caveats.',
            status="BLOCKED – INSUFFICIENT DATA",
            facts="F-003",
        ),
        Recommendation(id="R-003", priority=Priority.LOW, statement="Hold pricing flat."),
    ]


@pytest.fixture
def sample_session(sample_recommendations: list[Recommendation]) -> AnalysisSession:
    """A saved-session model with a fixed creation time."""
    return AnalysisSession(
        owner="analyst",
        title="Freelance market entry",
        context="Freelance market entry\nFocus on Bangladesh.",
        result=SAMPLE_REPORT,
        recommendations=sample_recommendations,
        created_at=datetime(2025, 3, 14, 9, 30, 0, tzinfo=timezone.utc),
    )
