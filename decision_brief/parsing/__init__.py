"""
decision_brief.parsing - Generated report text → structured recommendations.

Pure text processing: no I/O, no DB, no shared state.

Modules:
  scanner   - Label find / minimal-capture primitives.
  sections  - Numbered section isolation.
  extractor - RecommendationExtractor, block outcomes, parse_recommendations().
"""

from decision_brief.parsing.extractor import (
    BlockOutcome,
    ExtractionResult,
    RecommendationExtractor,
    parse_recommendations,
)

__all__ = [
    "BlockOutcome",
    "ExtractionResult",
    "RecommendationExtractor",
    "parse_recommendations",
]
