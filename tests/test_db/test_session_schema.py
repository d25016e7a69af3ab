"""Tests for SQLite schema - idempotency and table/index creation."""

from __future__ import annotations

from decision_brief.db.connection import get_connection
from decision_brief.db.schema import (
    ALL_TABLE_NAMES,
    apply_schema,
    get_existing_indexes,
    get_existing_tables,
)


class TestApplySchema:
    def test_all_tables_created(self, in_memory_db):
        tables = get_existing_tables(in_memory_db)
        for expected_table in ALL_TABLE_NAMES:
            assert expected_table in tables

    def test_idempotent_double_apply(self, in_memory_db):
        apply_schema(in_memory_db)
        assert "analysis_sessions" in get_existing_tables(in_memory_db)

    def test_owner_index_created(self, in_memory_db):
        assert "idx_sessions_owner_created" in get_existing_indexes(in_memory_db)


class TestGetConnection:
    def test_creates_file_and_parent_dirs(self, tmp_path):
        db_file = tmp_path / "nested" / "brief.db"
        with get_connection(str(db_file)) as conn:
            apply_schema(conn)
        assert db_file.exists()

    def test_commits_on_clean_exit(self, tmp_path):
        db_file = str(tmp_path / "brief.db")
        with get_connection(db_file) as conn:
            apply_schema(conn)
            conn.execute(
                "INSERT INTO analysis_sessions (owner, title) VALUES ('a', 't');"
            )
        with get_connection(db_file) as conn:
            count = conn.execute("SELECT COUNT(*) FROM analysis_sessions;").fetchone()[0]
        assert count == 1

    def test_rolls_back_on_exception(self, tmp_path):
        db_file = str(tmp_path / "brief.db")
        with get_connection(db_file) as conn:
            apply_schema(conn)
        try:
            with get_connection(db_file) as conn:
                conn.execute(
                    "INSERT INTO analysis_sessions (owner, title) VALUES ('a', 't');"
                )
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        with get_connection(db_file) as conn:
            count = conn.execute("SELECT COUNT(*) FROM analysis_sessions;").fetchone()[0]
        assert count == 0
