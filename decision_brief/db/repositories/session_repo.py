"""
Repository for saved analysis sessions.

Every read and delete is scoped by ``owner`` so one owner can never see or
remove another owner's sessions, even with a guessed ``session_id``.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Optional

from decision_brief.db.repositories.base import BaseRepository
from decision_brief.models.recommendation import Recommendation
from decision_brief.models.session import AnalysisSession, SessionSummary

logger = logging.getLogger(__name__)


class SessionRepository(BaseRepository):
    """Read/write access to ``analysis_sessions``."""

    def insert(self, session: AnalysisSession) -> int:
        """Insert a session and return its ``session_id``.

        ``created_at`` is taken from the model when set, otherwise the
        database default (current UTC time) applies.

        Args:
            session: The ``AnalysisSession`` to persist.

        Returns:
            The newly assigned ``session_id``.
        """
        payload = json.dumps(
            [rec.model_dump(mode="json") for rec in session.recommendations]
        )
        if session.created_at is not None:
            cursor = self.execute(
                """
                INSERT INTO analysis_sessions (
                    owner, title, context, result, recommendations, created_at
                ) VALUES (?, ?, ?, ?, ?, ?);
                """,
                (
                    session.owner,
                    session.title,
                    session.context,
                    session.result,
                    payload,
                    _format_ts(session.created_at),
                ),
            )
        else:
            cursor = self.execute(
                """
                INSERT INTO analysis_sessions (
                    owner, title, context, result, recommendations
                ) VALUES (?, ?, ?, ?, ?);
                """,
                (session.owner, session.title, session.context, session.result, payload),
            )
        session_id = int(cursor.lastrowid)
        logger.info(
            "Saved session %d for owner '%s' (%d recommendation(s)).",
            session_id, session.owner, len(session.recommendations),
        )
        return session_id

    def get_by_id(self, session_id: int, owner: str) -> Optional[AnalysisSession]:
        """Fetch one session with its parsed recommendations.

        Returns:
            ``AnalysisSession`` or ``None`` if missing or owned by someone else.
        """
        row = self.fetchone(
            "SELECT * FROM analysis_sessions WHERE session_id = ? AND owner = ?;",
            (session_id, owner),
        )
        return _row_to_session(row) if row else None

    def list_for_owner(self, owner: str, limit: int = 50) -> list[SessionSummary]:
        """Return session summaries for ``owner``, newest first."""
        rows = self.fetchall(
            """
            SELECT session_id, title, created_at FROM analysis_sessions
            WHERE owner = ?
            ORDER BY created_at DESC, session_id DESC
            LIMIT ?;
            """,
            (owner, limit),
        )
        return [
            SessionSummary(
                session_id=r["session_id"],
                title=r["title"],
                created_at=_parse_ts(r["created_at"]),
            )
            for r in rows
        ]

    def list_all_for_owner(self, owner: str) -> list[AnalysisSession]:
        """Return every session for ``owner`` in creation order (oldest first)."""
        rows = self.fetchall(
            """
            SELECT * FROM analysis_sessions
            WHERE owner = ?
            ORDER BY created_at ASC, session_id ASC;
            """,
            (owner,),
        )
        return [_row_to_session(r) for r in rows]

    def delete(self, session_id: int, owner: str) -> bool:
        """Delete a session. Returns ``True`` if a row was removed."""
        cursor = self.execute(
            "DELETE FROM analysis_sessions WHERE session_id = ? AND owner = ?;",
            (session_id, owner),
        )
        removed = cursor.rowcount > 0
        if removed:
            logger.info("Deleted session %d for owner '%s'.", session_id, owner)
        return removed


# ── Private helpers ────────────────────────────────────────────────────────────

_TS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_ts(ts: datetime) -> str:
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.strftime(_TS_FORMAT)


def _parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _row_to_session(row: sqlite3.Row) -> AnalysisSession:
    return AnalysisSession(
        session_id=row["session_id"],
        owner=row["owner"],
        title=row["title"],
        context=row["context"],
        result=row["result"],
        recommendations=[
            Recommendation(**rec) for rec in json.loads(row["recommendations"] or "[]")
        ],
        created_at=_parse_ts(row["created_at"]),
    )
