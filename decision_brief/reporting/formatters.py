"""
ASCII terminal formatters for CLI commands.

All formatters accept parsed models and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Recommendation cards
--------------------
Each recommendation renders as a bordered card. The left border character
encodes priority so a scrolling terminal still shows urgency at a glance::

  !! R-001  [HIGH PRIORITY]                         [APPROVED] APPROVED
  !! Expand into the Bangladesh freelance market.
  !!   Supporting Facts: F-001, F-002
  !!   Source:           Global Freelancer Report 2025

Status tags come from ``Recommendation.status_tag``; the raw status text is
printed beside the tag unchanged.
"""

from __future__ import annotations

import textwrap

from decision_brief.models.recommendation import Recommendation
from decision_brief.models.session import AnalysisSession, AnalyticsSummary, SessionSummary
from decision_brief.parsing.extractor import BlockOutcome
from decision_brief.taxonomy.report_taxonomy import Priority, ReportSection, StatusTag

CARD_WIDTH = 72

PRIORITY_BORDER: dict[Priority, str] = {
    Priority.HIGH:   "!!",
    Priority.MEDIUM: " !",
    Priority.LOW:    " .",
}

STATUS_MARK: dict[StatusTag, str] = {
    StatusTag.APPROVED:     "[APPROVED]",
    StatusTag.BLOCKED:      "[BLOCKED]",
    StatusTag.INSUFFICIENT: "[INSUFFICIENT]",
    StatusTag.PENDING:      "[PENDING]",
}

NOT_AVAILABLE = "N/A"


def priority_label(priority: Priority) -> str:
    """Return e.g. ``"HIGH PRIORITY"``."""
    return f"{priority.value} PRIORITY"


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendation_card(rec: Recommendation, width: int = CARD_WIDTH) -> str:
    """Render one recommendation as a multi-line card.

    Args:
        rec:   The record to render.
        width: Total line width including the border.

    Returns:
        Multi-line string, no trailing newline.
    """
    border = PRIORITY_BORDER[rec.priority]
    inner = width - len(border) - 1

    left = f"{rec.id}  [{priority_label(rec.priority)}]"
    right = f"{STATUS_MARK[rec.status_tag]} {rec.status}".rstrip()
    gap = max(2, inner - len(left) - len(right))

    lines = [f"{border} {left}{' ' * gap}{right}"]
    for chunk in textwrap.wrap(rec.statement, inner) or [""]:
        lines.append(f"{border} {chunk}")
    lines.append(f"{border}   Supporting Facts: {rec.facts or NOT_AVAILABLE}")
    lines.append(f"{border}   Source:           {rec.sources or NOT_AVAILABLE}")
    return "\n".join(lines)


def format_recommendations(recs: list[Recommendation]) -> str:
    """Render all recommendations as cards separated by blank lines."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Decision Recommendations ===")
    counts = {p: sum(1 for r in recs if r.priority is p) for p in Priority}
    lines.append(
        f"  {len(recs)} recommendation(s): "
        + ", ".join(f"{p.value} {n}" for p, n in counts.items())
    )

    if not recs:
        lines.append("")
        lines.append("  (no recommendations found in the report)")
        return "\n".join(lines)

    for rec in recs:
        lines.append("")
        lines.append(format_recommendation_card(rec))
    return "\n".join(lines)


def format_skipped_blocks(skipped: list[BlockOutcome]) -> str:
    """List blocks the parser dropped, one per line."""
    if not skipped:
        return "  No blocks skipped."
    lines = [f"  Skipped {len(skipped)} block(s):"]
    for outcome in skipped:
        lines.append(f"    #{outcome.index:<3} {outcome.block_id:<20} {outcome.skip_reason}")
    return "\n".join(lines)


def format_section_overview(sections: dict[ReportSection, str]) -> str:
    """Show which of the five report sections are present."""
    lines = ["", "=== Report Sections ==="]
    for section in ReportSection:
        body = sections.get(section)
        if body is None:
            lines.append(f"  [MISSING] {section.heading}")
        else:
            n_lines = sum(1 for ln in body.splitlines() if ln.strip())
            lines.append(f"  [OK]      {section.heading}  ({n_lines} line(s))")
    return "\n".join(lines)


# ── Sessions ──────────────────────────────────────────────────────────────────


def format_session_list(summaries: list[SessionSummary], owner: str) -> str:
    """Table of saved sessions, newest first."""
    lines: list[str] = ["", f"=== Saved Sessions ({owner}) ==="]
    if not summaries:
        lines.append("  (no saved sessions - run 'save-session' first)")
        return "\n".join(lines)

    header = f"  {'ID':>5}  {'Created (UTC)':<20}  Title"
    lines.append(header)
    lines.append("  " + "-" * (len(header) + 30))
    for s in summaries:
        created = s.created_at.strftime("%Y-%m-%d %H:%M")
        lines.append(f"  {s.session_id:>5}  {created:<20}  {s.title}")
    return "\n".join(lines)


def format_session_detail(session: AnalysisSession) -> str:
    """Session header followed by its recommendation cards."""
    created = session.created_at.strftime("%Y-%m-%d %H:%M") if session.created_at else "?"
    lines = [
        "",
        f"=== Session {session.session_id}: {session.title} ===",
        f"  Owner:   {session.owner}",
        f"  Created: {created} UTC",
    ]
    if session.context:
        lines.append(f"  Context: {session.context.splitlines()[0][:60]}")
    lines.append(format_recommendations(session.recommendations))
    return "\n".join(lines)


# ── Analytics ─────────────────────────────────────────────────────────────────


def format_analytics_summary(summary: AnalyticsSummary, owner: str) -> str:
    """Totals, priority mix and monthly activity as a text report."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Analytics ({owner}) ===")
    lines.append(f"  Total sessions:   {summary.total_sessions}")
    lines.append(f"  Total decisions:  {summary.total_recommendations}")

    lines.append("")
    lines.append("  Priority mix:")
    total = summary.total_recommendations
    for name in (p.value for p in Priority):
        count = summary.priority_counts.get(name, 0)
        share = f"{count / total:.0%}" if total else "-"
        lines.append(f"    {name:<7} {count:>5}  {share:>5}")

    lines.append("")
    lines.append("  Monthly activity:")
    if not summary.monthly_activity:
        lines.append("    (none)")
    for month in summary.monthly_activity:
        lines.append(f"    {month.name:<4} {month.count:>5}  {'#' * min(month.count, 40)}")
    return "\n".join(lines)
