"""
Section isolation for generated decision reports.

A report is five numbered sections, each introduced by a heading line such as
``SECTION 3 — DECISION RECOMMENDATIONS``. A section's body starts right after
its full heading and stops before the marker (``SECTION n``) of any later
section, or at the end of the document.

Sections may be missing or out of order in model output; missing sections are
simply absent from the results.
"""

from __future__ import annotations

import logging
from typing import Optional

from decision_brief.parsing.scanner import earliest
from decision_brief.taxonomy.report_taxonomy import ReportSection

logger = logging.getLogger(__name__)


def isolate_section(document: str, section: ReportSection) -> Optional[str]:
    """Return the body of ``section``, or ``None`` if its heading is absent.

    Args:
        document: Full report text.
        section:  Which section to isolate.

    Returns:
        Text between the heading and the next later-section marker (the
        heading itself excluded), or ``None``.
    """
    heading_at = document.find(section.heading)
    if heading_at == -1:
        return None
    start = heading_at + len(section.heading)
    later_markers = tuple(s.marker for s in ReportSection if s > section)
    end = earliest(document, later_markers, start)
    return document[start:] if end == -1 else document[start:end]


def split_sections(document: str) -> dict[ReportSection, str]:
    """Return every section present in ``document`` mapped to its body.

    Keys are in section-number order.
    """
    found: dict[ReportSection, str] = {}
    for section in ReportSection:
        body = isolate_section(document, section)
        if body is not None:
            found[section] = body
    logger.debug(
        "Found %d/%d report sections: %s",
        len(found), len(ReportSection), [s.name for s in found],
    )
    return found
