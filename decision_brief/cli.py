"""
decision-brief - CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (parse, export, session storage, analytics).
  5. Report result to stdout.

Report text is read from a file path, or from stdin when the path is ``-``.

Install and run::

    pip install -e .
    decision-brief --help
    decision-brief init-db
    decision-brief validate-config
    decision-brief parse report.txt
    decision-brief parse report.txt --format csv
    decision-brief inspect report.txt
    decision-brief export-csv report.txt
    decision-brief save-session report.txt --context "Freelance market entry"
    decision-brief list-sessions
    decision-brief show-session 3
    decision-brief delete-session 3
    decision-brief analytics
    decision-brief analytics --output data/exports/analytics.json
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="decision-brief",
    help="Parse generated market-intelligence reports into decision recommendations.",
    add_completion=False,
)

_FORMATS = ("cards", "json", "csv")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from decision_brief.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; ``debug = true`` forces DEBUG level."""
    from decision_brief.utils.logging import configure_logging

    logging_config = config.logging
    if config.debug:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config)


def _read_report_or_exit(location: str) -> str:
    """Read report text from a path or stdin, exiting on failure."""
    from decision_brief.sources.report_source import source_for

    try:
        return source_for(location).read()
    except (FileNotFoundError, OSError, UnicodeDecodeError) as exc:
        typer.echo(f"[ERROR] Could not read report: {exc}", err=True)
        raise typer.Exit(code=1)


def _open_db(config, db_path: Optional[str]):
    """Open the configured database with the schema applied."""
    from decision_brief.db.connection import get_connection

    return get_connection(
        db_path or config.database.db_path,
        wal_mode=config.database.wal_mode,
        busy_timeout_ms=config.database.busy_timeout_ms,
    )


_REPORT_ARG = typer.Argument(..., help="Report text file, or '-' for stdin.")
_CONFIG_OPT = typer.Option(None, "--config", help="Path to TOML config file.")
_DB_OPT = typer.Option(None, "--db-path", help="Override DB path from config.")
_OWNER_OPT = typer.Option(
    None, "--owner", help="Session owner (default: config sessions.default_owner)."
)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("init-db")
def init_db(
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Initialize the SQLite database and apply the schema.

    Safe to run multiple times - all DDL uses IF NOT EXISTS.
    """
    from decision_brief.db.schema import ALL_TABLE_NAMES, apply_schema

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    target_path = db_path or config.database.db_path
    typer.echo(f"Initializing database at: {target_path}")

    with _open_db(config, db_path) as conn:
        apply_schema(conn)

    typer.echo(f"  Tables: {len(ALL_TABLE_NAMES)} created/verified.")
    typer.echo("[OK] Database ready.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Database path:   {config.database.db_path}")
    typer.echo(f"  Export dir:      {config.export.output_dir}")
    typer.echo(f"  Default owner:   {config.sessions.default_owner}")
    typer.echo(f"  Log level:       {config.logging.level}")
    typer.echo(f"  Debug mode:      {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("parse")
def parse(
    report: str = _REPORT_ARG,
    output_format: str = typer.Option(
        "cards",
        "--format",
        "-f",
        help="Output format: cards, json or csv.",
    ),
    show_skipped: bool = typer.Option(
        False,
        "--show-skipped",
        help="List recommendation blocks that were dropped, and why.",
    ),
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Parse a report and print its decision recommendations."""
    from decision_brief.parsing.extractor import RecommendationExtractor
    from decision_brief.reporting.export import (
        recommendations_to_csv,
        recommendations_to_json,
    )
    from decision_brief.reporting.formatters import (
        format_recommendations,
        format_skipped_blocks,
    )

    if output_format not in _FORMATS:
        typer.echo(
            f"[ERROR] Unknown format '{output_format}'. Use one of: {', '.join(_FORMATS)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    result = RecommendationExtractor().extract(_read_report_or_exit(report))

    if output_format == "json":
        typer.echo(recommendations_to_json(result.records))
    elif output_format == "csv":
        typer.echo(recommendations_to_csv(result.records), nl=False)
    else:
        typer.echo(format_recommendations(result.records))

    if show_skipped:
        typer.echo(format_skipped_blocks(result.skipped), err=output_format != "cards")


@app.command("inspect")
def inspect(
    report: str = _REPORT_ARG,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Show which of the five report sections are present."""
    from decision_brief.parsing.sections import split_sections
    from decision_brief.reporting.formatters import format_section_overview

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    sections = split_sections(_read_report_or_exit(report))
    typer.echo(format_section_overview(sections))


@app.command("export-csv")
def export_csv(
    report: str = _REPORT_ARG,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination CSV (default: <export dir>/<prefix>_<today>.csv).",
    ),
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Parse a report and write its recommendations to a CSV file."""
    from decision_brief.parsing.extractor import parse_recommendations
    from decision_brief.reporting.export import (
        default_export_filename,
        export_recommendations_csv,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    recs = parse_recommendations(_read_report_or_exit(report))
    if not recs:
        typer.echo("[WARN] No recommendations found; nothing exported.", err=True)
        raise typer.Exit(code=1)

    out_path = (
        Path(output)
        if output
        else Path(config.export.output_dir)
        / default_export_filename(config.export.csv_filename_prefix, date.today())
    )
    written = export_recommendations_csv(recs, out_path)
    typer.echo(f"  Wrote {len(recs)} recommendation(s) to {written}")
    typer.echo("[OK] Export complete.")


@app.command("save-session")
def save_session(
    report: str = _REPORT_ARG,
    context: str = typer.Option(
        "",
        "--context",
        help="Request text that produced the report; its first line becomes the title.",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="Explicit session title."),
    owner: Optional[str] = _OWNER_OPT,
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Parse a report and save it, with its recommendations, as a session."""
    from decision_brief.db.repositories.session_repo import SessionRepository
    from decision_brief.db.schema import apply_schema
    from decision_brief.models.session import AnalysisSession, derive_session_title
    from decision_brief.parsing.extractor import parse_recommendations

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    text = _read_report_or_exit(report)
    session = AnalysisSession(
        owner=owner or config.sessions.default_owner,
        title=(title or "").strip()
        or derive_session_title(context, config.sessions.title_max_chars),
        context=context,
        result=text,
        recommendations=parse_recommendations(text),
    )

    with _open_db(config, db_path) as conn:
        apply_schema(conn)
        session_id = SessionRepository(conn).insert(session)

    typer.echo(
        f"  Session {session_id}: '{session.title}' "
        f"({len(session.recommendations)} recommendation(s))"
    )
    typer.echo("[OK] Session saved.")


@app.command("list-sessions")
def list_sessions(
    owner: Optional[str] = _OWNER_OPT,
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum rows to show."),
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """List saved sessions, newest first."""
    from decision_brief.db.repositories.session_repo import SessionRepository
    from decision_brief.db.schema import apply_schema
    from decision_brief.reporting.formatters import format_session_list

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    who = owner or config.sessions.default_owner
    with _open_db(config, db_path) as conn:
        apply_schema(conn)
        summaries = SessionRepository(conn).list_for_owner(
            who, limit=limit or config.sessions.list_limit
        )

    typer.echo(format_session_list(summaries, who))


@app.command("show-session")
def show_session(
    session_id: int = typer.Argument(..., help="Session ID from list-sessions."),
    output_format: str = typer.Option("cards", "--format", "-f", help="cards, json or csv."),
    owner: Optional[str] = _OWNER_OPT,
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Show a saved session and its recommendations."""
    from decision_brief.db.repositories.session_repo import SessionRepository
    from decision_brief.db.schema import apply_schema
    from decision_brief.reporting.export import (
        recommendations_to_csv,
        recommendations_to_json,
    )
    from decision_brief.reporting.formatters import format_session_detail

    if output_format not in _FORMATS:
        typer.echo(f"[ERROR] Unknown format '{output_format}'.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    who = owner or config.sessions.default_owner
    with _open_db(config, db_path) as conn:
        apply_schema(conn)
        session = SessionRepository(conn).get_by_id(session_id, who)

    if session is None:
        typer.echo(f"[ERROR] Session {session_id} not found for owner '{who}'.", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(recommendations_to_json(session.recommendations))
    elif output_format == "csv":
        typer.echo(recommendations_to_csv(session.recommendations), nl=False)
    else:
        typer.echo(format_session_detail(session))


@app.command("delete-session")
def delete_session(
    session_id: int = typer.Argument(..., help="Session ID from list-sessions."),
    owner: Optional[str] = _OWNER_OPT,
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Delete a saved session."""
    from decision_brief.db.repositories.session_repo import SessionRepository
    from decision_brief.db.schema import apply_schema

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    who = owner or config.sessions.default_owner
    with _open_db(config, db_path) as conn:
        apply_schema(conn)
        removed = SessionRepository(conn).delete(session_id, who)

    if not removed:
        typer.echo(f"[ERROR] Session {session_id} not found for owner '{who}'.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"[OK] Session {session_id} deleted.")


@app.command("analytics")
def analytics(
    owner: Optional[str] = _OWNER_OPT,
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Also write the summary to this JSON file."
    ),
    db_path: Optional[str] = _DB_OPT,
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Summarise saved sessions: totals, priority mix, monthly activity."""
    from decision_brief.analytics.aggregator import compute_analytics
    from decision_brief.db.repositories.session_repo import SessionRepository
    from decision_brief.db.schema import apply_schema
    from decision_brief.reporting.export import export_to_json
    from decision_brief.reporting.formatters import format_analytics_summary

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    who = owner or config.sessions.default_owner
    with _open_db(config, db_path) as conn:
        apply_schema(conn)
        summary = compute_analytics(SessionRepository(conn).list_all_for_owner(who))

    if as_json:
        typer.echo(json.dumps(summary.model_dump(mode="json"), indent=2))
    else:
        typer.echo(format_analytics_summary(summary, who))

    if output:
        written = export_to_json(summary.model_dump(mode="json"), Path(output))
        typer.echo(f"  Wrote analytics summary to {written}", err=as_json)


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
