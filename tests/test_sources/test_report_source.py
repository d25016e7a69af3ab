"""Tests for report sources."""

from __future__ import annotations

import io

import pytest

from decision_brief.sources.report_source import (
    FileReportSource,
    StdinReportSource,
    source_for,
)


def test_file_source_reads_utf8(tmp_path, sample_report) -> None:
    path = tmp_path / "report.txt"
    path.write_text(sample_report, encoding="utf-8")
    assert FileReportSource(path).read() == sample_report


def test_file_source_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError, match="Report file not found"):
        FileReportSource(tmp_path / "nope.txt").read()


def test_stdin_source_reads_stream() -> None:
    assert StdinReportSource(io.StringIO("text")).read() == "text"


def test_source_for() -> None:
    assert isinstance(source_for("-"), StdinReportSource)
    assert isinstance(source_for("report.txt"), FileReportSource)
