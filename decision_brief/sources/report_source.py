"""
Report sources: where generated report text comes from.

The parser only needs the finished text. How a report was produced (a hosted
generative model, a saved file, a pipe) is hidden behind ``ReportSource``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class ReportSource(Protocol):
    """Anything that can hand over one complete report document."""

    def read(self) -> str:
        ...


class FileReportSource:
    """Report text stored in a UTF-8 file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> str:
        """Return the file contents.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Report file not found: {self.path}")
        text = self.path.read_text(encoding="utf-8")
        logger.debug("Read %d chars from %s", len(text), self.path)
        return text


class StdinReportSource:
    """Report text piped on standard input."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def read(self) -> str:
        return (self.stream or sys.stdin).read()


def source_for(location: str) -> ReportSource:
    """Return a stdin source for ``"-"``, otherwise a file source."""
    if location == "-":
        return StdinReportSource()
    return FileReportSource(Path(location))
