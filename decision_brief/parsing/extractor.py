"""
Recommendation extractor: report text → ordered ``Recommendation`` list.

Stages
------
1. Section isolation   - body of ``SECTION 3 — DECISION RECOMMENDATIONS``.
                         No heading → no recommendations (not an error).
2. Block segmentation  - split on ``- Recommendation ID:``; text before the
                         first label is section boilerplate and is dropped.
3. Field extraction    - each field read independently with the label
                         scanner; a missing label yields the field default.
4. Block outcome       - every block becomes a ``BlockOutcome``: either a
                         parsed record or a skip with a reason. Blocks without
                         a decision statement are skipped, as are blocks
                         whose extraction raised.

Field rules
-----------
    id         first line of the block, trimmed; "Unknown" if empty
    priority   first "- Priority:" followed by HIGH/MEDIUM/LOW (any case);
               MEDIUM otherwise
    statement  "- Decision Statement:" up to the nearest of
               "\\n- Supporting Facts", "\\n- Source", "\\n- Status"
    status     "- Status:" up to end of line
    facts      "- Supporting Facts (Fact IDs):" up to "\\n- Source"/"\\n- Status"
    sources    "- Source(s):" up to "\\n- Status"

Labels are matched case-sensitively. Only priority values ignore case.

Label text quoted inside a free-text value (e.g. a statement mentioning
"- Status") ends that value early. This is accepted; the report layout
puts each label at the start of its own line.

The extractor holds no state between calls and never raises on malformed
input: the worst case is an empty result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from decision_brief.models.recommendation import Recommendation
from decision_brief.parsing.scanner import (
    capture_field,
    first_line,
    label_ends,
    skip_whitespace,
)
from decision_brief.parsing.sections import isolate_section
from decision_brief.taxonomy.report_taxonomy import (
    DEFAULT_PRIORITY,
    FACTS_TERMINATORS,
    LINE_TERMINATORS,
    SOURCES_TERMINATORS,
    STATEMENT_TERMINATORS,
    UNKNOWN_ID,
    FieldLabel,
    Priority,
    ReportSection,
)

logger = logging.getLogger(__name__)

SKIP_NO_STATEMENT = "missing decision statement"


# ── Result types ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BlockOutcome:
    """What became of one candidate block.

    Exactly one of ``record`` / ``skip_reason`` is set.

    Attributes:
        index:       0-based position of the block within the section.
        block_id:    Identifier read from the block (``"Unknown"`` if none).
        record:      The parsed recommendation, when the block was usable.
        skip_reason: Why the block was dropped, otherwise.
    """

    index: int
    block_id: str
    record: Optional[Recommendation] = None
    skip_reason: Optional[str] = None

    @property
    def parsed(self) -> bool:
        return self.record is not None


@dataclass
class ExtractionResult:
    """Records in document order plus the blocks that were skipped."""

    records: list[Recommendation] = field(default_factory=list)
    skipped: list[BlockOutcome] = field(default_factory=list)

    @property
    def block_count(self) -> int:
        return len(self.records) + len(self.skipped)


# ── Field extraction ──────────────────────────────────────────────────────────


def split_blocks(section: str) -> list[str]:
    """Split a recommendations section body into candidate blocks."""
    return section.split(FieldLabel.RECOMMENDATION_ID)[1:]


def extract_id(block: str) -> str:
    """Return the block's identifier line, or ``"Unknown"``."""
    return first_line(block).strip() or UNKNOWN_ID


def extract_priority(block: str) -> Priority:
    """Return the first valid priority following a priority label."""
    for end in label_ends(block, FieldLabel.PRIORITY):
        pos = skip_whitespace(block, end)
        candidate = block[pos:pos + len(Priority.MEDIUM)].upper()
        for level in Priority:
            if candidate.startswith(level.value):
                return level
    return DEFAULT_PRIORITY


def extract_statement(block: str) -> str:
    return capture_field(block, FieldLabel.DECISION_STATEMENT, STATEMENT_TERMINATORS) or ""


def extract_status(block: str) -> str:
    return capture_field(block, FieldLabel.STATUS, LINE_TERMINATORS) or ""


def extract_facts(block: str) -> str:
    return capture_field(block, FieldLabel.SUPPORTING_FACTS, FACTS_TERMINATORS) or ""


def extract_sources(block: str) -> str:
    return capture_field(block, FieldLabel.SOURCES, SOURCES_TERMINATORS) or ""


def extract_block(index: int, block: str) -> BlockOutcome:
    """Turn one candidate block into a ``BlockOutcome``.

    Any error raised while reading the block becomes a skip outcome, so
    one malformed block never costs the rest of the section.

    Args:
        index: Position of the block within the section.
        block: Raw block text (everything after one id label).

    Returns:
        A parsed outcome, or a skip outcome carrying the reason.
    """
    block_id = UNKNOWN_ID
    try:
        block_id = extract_id(block)
        statement = extract_statement(block)
        if not statement:
            return BlockOutcome(index=index, block_id=block_id, skip_reason=SKIP_NO_STATEMENT)

        record = Recommendation(
            id=block_id,
            priority=extract_priority(block),
            statement=statement,
            status=extract_status(block),
            facts=extract_facts(block),
            sources=extract_sources(block),
        )
    except Exception as exc:
        return BlockOutcome(
            index=index,
            block_id=block_id,
            skip_reason=f"extraction fault: {exc!r}",
        )

    return BlockOutcome(index=index, block_id=block_id, record=record)


# ── Extractor ─────────────────────────────────────────────────────────────────


class RecommendationExtractor:
    """Parses the decision-recommendations section of a generated report.

    Stateless; one instance may be shared freely between callers.
    """

    section = ReportSection.DECISION_RECOMMENDATIONS

    def extract(self, document: str) -> ExtractionResult:
        """Parse ``document`` and keep the per-block diagnostics.

        Args:
            document: Full report text.

        Returns:
            ``ExtractionResult`` with records in document order and any
            skipped blocks.
        """
        result = ExtractionResult()
        body = isolate_section(document, self.section)
        if body is None:
            logger.debug("No '%s' heading found; 0 recommendations.", self.section.heading)
            return result

        for index, block in enumerate(split_blocks(body)):
            outcome = extract_block(index, block)
            if outcome.parsed:
                result.records.append(outcome.record)
            else:
                if outcome.skip_reason != SKIP_NO_STATEMENT:
                    logger.warning(
                        "Skipping recommendation block %d (%s): %s",
                        index, outcome.block_id, outcome.skip_reason,
                    )
                result.skipped.append(outcome)

        logger.debug(
            "Parsed %d recommendation(s) from %d block(s); %d skipped.",
            len(result.records), result.block_count, len(result.skipped),
        )
        return result

    def parse(self, document: str) -> list[Recommendation]:
        """Return the recommendations in ``document``, in document order."""
        return self.extract(document).records


def parse_recommendations(document: str) -> list[Recommendation]:
    """Module-level shortcut for ``RecommendationExtractor().parse(document)``."""
    return RecommendationExtractor().parse(document)
