"""
Session analytics: totals across an owner's saved sessions.

Pure function over already-loaded ``AnalysisSession`` objects; the caller
fetches them (``SessionRepository.list_all_for_owner``) so this module has no
DB or I/O dependency.

Monthly activity
----------------
Sessions are bucketed by the short month name of ``created_at`` (``"Jan"``,
``"Feb"`` ...). Buckets appear in the order their month is first seen in the
input, so pass sessions oldest first for a chronological series. Months from
different years share a bucket.
"""

from __future__ import annotations

from collections.abc import Iterable

from decision_brief.models.session import (
    AnalysisSession,
    AnalyticsSummary,
    MonthlyActivity,
)
from decision_brief.taxonomy.report_taxonomy import Priority


def compute_analytics(sessions: Iterable[AnalysisSession]) -> AnalyticsSummary:
    """Aggregate session and recommendation counts.

    Args:
        sessions: Saved sessions, ideally oldest first.

    Returns:
        ``AnalyticsSummary``. Sessions without ``created_at`` count towards
        the totals but not towards monthly activity.
    """
    total_sessions = 0
    total_recommendations = 0
    priority_counts: dict[str, int] = {p.value: 0 for p in Priority}
    monthly: dict[str, int] = {}

    for session in sessions:
        total_sessions += 1
        total_recommendations += len(session.recommendations)
        for rec in session.recommendations:
            priority_counts[rec.priority.value] += 1
        if session.created_at is not None:
            month = session.created_at.strftime("%b")
            monthly[month] = monthly.get(month, 0) + 1

    return AnalyticsSummary(
        total_sessions=total_sessions,
        total_recommendations=total_recommendations,
        priority_counts=priority_counts,
        monthly_activity=[
            MonthlyActivity(name=name, count=count) for name, count in monthly.items()
        ],
    )
