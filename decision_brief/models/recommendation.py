"""
Decision recommendation record.

``Recommendation`` is the single output type of the report parser. One
instance is built per recommendation entry that carries a decision statement.

The model is frozen - a parsed record is a snapshot of the report text and is
never edited afterwards. Sessions persist the ``model_dump(mode="json")`` form.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from decision_brief.taxonomy.report_taxonomy import (
    DEFAULT_PRIORITY,
    STATUS_TAG_ORDER,
    UNKNOWN_ID,
    Priority,
    StatusTag,
)


class Recommendation(BaseModel):
    """A decision recommendation extracted from a generated report.

    Attributes:
        id: Free-form label such as ``"R-001"``; ``"Unknown"`` when the
            report did not supply one. Not guaranteed unique.
        priority: ``HIGH``, ``MEDIUM`` or ``LOW``.
        statement: The decision statement. Never empty.
        status: Status text exactly as written in the report.
        facts: Supporting fact identifiers, or ``""``.
        sources: Source citation text, or ``""``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = UNKNOWN_ID
    priority: Priority = DEFAULT_PRIORITY
    statement: str
    status: str = ""
    facts: str = ""
    sources: str = ""

    @field_validator("statement")
    @classmethod
    def validate_statement_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("statement must not be empty.")
        return v.strip()

    @field_validator("id")
    @classmethod
    def default_blank_id(cls, v: str) -> str:
        return v.strip() or UNKNOWN_ID

    @property
    def status_tag(self) -> StatusTag:
        """Classify ``status`` by case-sensitive keyword, first match wins."""
        for tag in STATUS_TAG_ORDER:
            if tag.value in self.status:
                return tag
        return StatusTag.PENDING
