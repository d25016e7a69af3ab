"""
Report taxonomy: the fixed vocabulary of a generated decision report.

Four groups of constants describe the report layout:
  - ``Priority``       - the three recommendation priority levels.
  - ``StatusTag``      - display classification of the free-text status field.
  - ``ReportSection``  - the five numbered section headings.
  - ``FieldLabel``     - the per-field labels inside a recommendation entry.

The parser, the exporters and the formatters all read label text from here,
so a change to the report schema is made in this one module.

Usage example::

    from decision_brief.taxonomy.report_taxonomy import FieldLabel, Priority

    FieldLabel.PRIORITY        # "- Priority:"
    Priority("HIGH")           # Priority.HIGH

This module has NO imports from any other ``decision_brief`` package.
"""

from enum import IntEnum, StrEnum


class Priority(StrEnum):
    """Urgency of a decision recommendation."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


DEFAULT_PRIORITY = Priority.MEDIUM


class StatusTag(StrEnum):
    """Display bucket for a recommendation's free-text status.

    The status field itself is stored verbatim; the tag is derived on demand.
    """

    APPROVED = "APPROVED"
    """Recommendation cleared for action."""

    BLOCKED = "BLOCKED"
    """Recommendation held back, usually pending data."""

    INSUFFICIENT = "INSUFFICIENT"
    """Status mentions insufficient data without an explicit block."""

    PENDING = "PENDING"
    """No recognised status keyword."""


# Checked in this order; first substring hit wins.
STATUS_TAG_ORDER: tuple[StatusTag, ...] = (
    StatusTag.APPROVED,
    StatusTag.BLOCKED,
    StatusTag.INSUFFICIENT,
)


class ReportSection(IntEnum):
    """Numbered sections of a generated report, in document order."""

    VERIFIED_FACTS = 1
    DATA_GAPS = 2
    DECISION_RECOMMENDATIONS = 3
    ASSUMPTIONS = 4
    AUDIT_DECLARATION = 5

    @property
    def title(self) -> str:
        return self.name.replace("_", " ")

    @property
    def marker(self) -> str:
        """Prefix that identifies this section's heading line."""
        return f"SECTION {self.value}"

    @property
    def heading(self) -> str:
        """Full heading line, e.g. ``SECTION 3 — DECISION RECOMMENDATIONS``."""
        return f"{self.marker} — {self.title}"


class FieldLabel(StrEnum):
    """Labels introducing each field of a recommendation entry."""

    RECOMMENDATION_ID = "- Recommendation ID:"
    PRIORITY = "- Priority:"
    DECISION_STATEMENT = "- Decision Statement:"
    SUPPORTING_FACTS = "- Supporting Facts (Fact IDs):"
    SOURCES = "- Source(s):"
    STATUS = "- Status:"


# Terminators bounding a minimal capture. These are prefixes that start a new
# line, so ``"\n- Source"`` also stops at ``"- Source(s):"``. The id label is
# deliberately absent: block segmentation already splits on it.
STATEMENT_TERMINATORS: tuple[str, ...] = (
    "\n- Supporting Facts",
    "\n- Source",
    "\n- Status",
)
FACTS_TERMINATORS: tuple[str, ...] = ("\n- Source", "\n- Status")
SOURCES_TERMINATORS: tuple[str, ...] = ("\n- Status",)
LINE_TERMINATORS: tuple[str, ...] = ("\n",)

UNKNOWN_ID = "Unknown"
