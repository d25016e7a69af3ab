"""
Saved analysis sessions and the analytics summary built from them.

``AnalysisSession`` stores one generated report together with the context that
produced it and the recommendations parsed from it. ``SessionSummary`` is the
lightweight listing shape. ``AnalyticsSummary`` is the per-owner roll-up.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from decision_brief.models.recommendation import Recommendation

UNTITLED_SESSION = "Untitled Session"


def derive_session_title(context: str, max_chars: int = 50) -> str:
    """Return the first line of ``context`` cut to ``max_chars`` characters.

    Falls back to ``"Untitled Session"`` when the first line is empty or blank.
    """
    first_line = context.split("\n", 1)[0].strip()[:max_chars]
    return first_line or UNTITLED_SESSION


class AnalysisSession(BaseModel):
    """A persisted report analysis.

    Attributes:
        session_id: Auto-assigned DB PK; ``None`` before insertion.
        owner: Free-text owner key used to scope listings and analytics.
        title: Short display title.
        context: The request text that was sent to the report generator.
        result: Raw report text as returned by the generator.
        recommendations: Records parsed from ``result``.
        created_at: UTC creation time; ``None`` lets the DB assign it.
    """

    model_config = ConfigDict(frozen=True)

    session_id: Optional[int] = None
    owner: str
    title: str
    context: str = ""
    result: str = ""
    recommendations: list[Recommendation] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("owner", "title")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("owner and title must not be blank.")
        return v.strip()


class SessionSummary(BaseModel):
    """Listing row for a saved session."""

    model_config = ConfigDict(frozen=True)

    session_id: int
    title: str
    created_at: datetime


class MonthlyActivity(BaseModel):
    """Number of sessions created in one calendar month."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int


class AnalyticsSummary(BaseModel):
    """Totals across an owner's saved sessions."""

    model_config = ConfigDict(frozen=True)

    total_sessions: int = 0
    total_recommendations: int = 0
    priority_counts: dict[str, int] = Field(
        default_factory=lambda: {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
    )
    monthly_activity: list[MonthlyActivity] = Field(default_factory=list)
