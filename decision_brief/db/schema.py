"""
SQLite schema DDL for saved analysis sessions.

All statements use ``IF NOT EXISTS`` so ``apply_schema()`` is **idempotent**:
safe to call on an already-initialized database (e.g. after restart or in tests).

Tables:
  1. analysis_sessions  (no FKs; ``owner`` is a free-text key)

Parsed recommendations are stored as a JSON array in
``analysis_sessions.recommendations`` - they are always read back together
with their session and never queried individually.
"""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

# ── DDL statements ─────────────────────────────────────────────────────────────

_DDL_ANALYSIS_SESSIONS = """
CREATE TABLE IF NOT EXISTS analysis_sessions (
    session_id      INTEGER PRIMARY KEY AUTOINCREMENT,
    owner           TEXT    NOT NULL,
    title           TEXT    NOT NULL,
    context         TEXT    NOT NULL DEFAULT '',
    result          TEXT    NOT NULL DEFAULT '',
    recommendations TEXT    NOT NULL DEFAULT '[]',
    created_at      TEXT    NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
);

CREATE INDEX IF NOT EXISTS idx_sessions_owner_created
    ON analysis_sessions (owner, created_at);
"""

_ALL_DDL: list[str] = [
    _DDL_ANALYSIS_SESSIONS,
]

# Table names for introspection / tests
ALL_TABLE_NAMES = [
    "analysis_sessions",
]


def apply_schema(conn: sqlite3.Connection) -> None:
    """Apply all DDL statements to ``conn``.

    Args:
        conn: An open ``sqlite3.Connection``.
    """
    logger.debug("Applying schema to database...")

    for ddl in _ALL_DDL:
        for statement in _split_ddl(ddl):
            conn.execute(statement)

    conn.commit()
    logger.info("Schema applied: %d table(s) created/verified.", len(ALL_TABLE_NAMES))


def _split_ddl(ddl: str) -> list[str]:
    """Split a multi-statement DDL block on semicolons."""
    return [s.strip() for s in ddl.split(";") if s.strip()]


def get_existing_tables(conn: sqlite3.Connection) -> list[str]:
    """Return table names present in the database, sorted alphabetically."""
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name;"
    ).fetchall()
    return [row[0] for row in rows]


def get_existing_indexes(conn: sqlite3.Connection) -> list[str]:
    """Return index names present in the database, sorted alphabetically."""
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='index' ORDER BY name;"
    ).fetchall()
    return [row[0] for row in rows]
