"""Validation models — diagnostic record, severity levels, and report structure.

All validation is deterministic: same input → same output, no I/O, no caching.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Diagnostic severity levels. Display-only, none of them gate save or run."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Diagnostic(BaseModel):
    """A single scanner finding, attributed to exactly one line."""

    line: int = Field(ge=1, description="1-based line number")
    column: int = Field(ge=1, description="1-based column, scanner-specific")
    message: str
    severity: Severity
    category: str = Field(
        alias="type",
        description="Free-text rule tag: syntax, attribute, value, logic, ...",
    )

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True, frozen=True)


class ValidationReport(BaseModel):
    """Diagnostics for one (code, language) snapshot plus per-severity counts."""

    language: str
    supported: bool = Field(description="False when no scanner exists for the language")
    summary: dict = Field(
        description="Count of diagnostics by severity",
        default_factory=lambda: {"error": 0, "warning": 0, "info": 0},
    )
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    duration_ms: float = 0.0

    @classmethod
    def build(
        cls,
        language: str,
        diagnostics: list[Diagnostic],
        supported: bool = True,
        duration_ms: float = 0.0,
    ) -> "ValidationReport":
        """Build a report. Diagnostics keep scan order, they are never re-sorted."""
        summary = {"error": 0, "warning": 0, "info": 0}
        for diag in diagnostics:
            summary[diag.severity] += 1

        return cls(
            language=language,
            supported=supported,
            summary=summary,
            diagnostics=diagnostics,
            duration_ms=round(duration_ms, 3),
        )
