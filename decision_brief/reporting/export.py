'''
Flat-file export of parsed recommendations.

File writers (``export_to_csv``, ``export_to_json``) write to disk and return
the written ``Path``. They accept generic ``list[dict]`` / JSON-able data so
they stay decoupled from any one record shape.

``recommendations_to_rows()`` is the adapter between ``Recommendation``
models and the export column layout::

    ID, Priority, Statement, Status, Supporting Facts, Sources

CSV quoting follows RFC 4180: a field is wrapped in double quotes when it
contains a comma, quote or line break, and embedded quotes are doubled
(``He said "go"`` → ``"He said ""go"""``). Any CSV reader recovers the
original text.
'''

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from decision_brief.models.recommendation import Recommendation

CSV_COLUMNS: list[str] = [
    "ID",
    "Priority",
    "Statement",
    "Status",
    "Supporting Facts",
    "Sources",
]


def recommendations_to_rows(recs: Iterable[Recommendation]) -> list[dict]:
    """Convert records into export rows keyed by ``CSV_COLUMNS``."""
    return [
        {
            "ID":               rec.id,
            "Priority":         rec.priority.value,
            "Statement":        rec.statement,
            "Status":           rec.status,
            "Supporting Facts": rec.facts,
            "Sources":          rec.sources,
        }
        for rec in recs
    ]


def _write_csv(f, records: list[dict], cols: list[str]) -> None:
    writer = csv.DictWriter(
        f,
        fieldnames=cols,
        extrasaction="ignore",
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(records)


def recommendations_to_csv(recs: Iterable[Recommendation]) -> str:
    """Serialise records to CSV text (header row first, ``\\n`` line ends).

    Returns just the header line when ``recs`` is empty.
    """
    buf = io.StringIO()
    _write_csv(buf, recommendations_to_rows(recs), CSV_COLUMNS)
    return buf.getvalue()


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order. If None, uses the keys of the first record.

    Returns:
        ``path`` as written. With no records and no ``fieldnames`` the file
        is empty; with ``fieldnames`` it holds the header row only.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records and not fieldnames:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        _write_csv(f, records, cols)
    return path


def export_recommendations_csv(recs: Iterable[Recommendation], path: Path) -> Path:
    """Write records to ``path`` using the standard column layout."""
    return export_to_csv(recommendations_to_rows(recs), path, fieldnames=CSV_COLUMNS)


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def recommendations_to_json(recs: Iterable[Recommendation]) -> str:
    """Serialise records to a JSON array string."""
    return json.dumps([rec.model_dump(mode="json") for rec in recs], indent=2)


def default_export_filename(prefix: str, on_date: date, suffix: str = ".csv") -> str:
    """Return ``{prefix}_{YYYY-MM-DD}{suffix}``, e.g. ``strategic_decisions_2026-03-02.csv``."""
    return f"{prefix}_{on_date.isoformat()}{suffix}"
