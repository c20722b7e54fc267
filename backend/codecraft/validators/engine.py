"""Validation Engine — dispatches code to its language scanner and builds a report.

``validate`` is the pure entry point: same input → same output, no I/O.
``ValidationEngine`` wraps it for the API with timing and structured logging.

Usage:
    diagnostics = validate(code, "css")

    report = validation_engine.validate(code, "css")
    report.summary  # {"error": 0, "warning": 2, "info": 0}
"""

import time
from typing import Optional

import structlog

from codecraft.validators.base import Scanner
from codecraft.validators.models import Diagnostic, ValidationReport

from codecraft.validators.html_scanner import validate_html
from codecraft.validators.css_scanner import validate_css
from codecraft.validators.javascript_scanner import validate_javascript
from codecraft.validators.python_scanner import validate_python
from codecraft.validators.sql_scanner import validate_sql

logger = structlog.get_logger()

# Closed set, keyed by language tag. Not extensible at runtime.
SCANNERS: dict[str, Scanner] = {
    "html": validate_html,
    "css": validate_css,
    "javascript": validate_javascript,
    "python": validate_python,
    "sql": validate_sql,
}


def supported_languages() -> list[str]:
    return list(SCANNERS)


def validate(code: str, language: Optional[str]) -> list[Diagnostic]:
    """Scan ``code`` with the scanner for ``language``.

    Any language without a scanner (including ``None``) yields an empty list;
    that is the defined result, not an error.
    """
    scanner = SCANNERS.get(language) if isinstance(language, str) else None
    if scanner is None:
        return []
    return scanner(code or "")


class ValidationEngine:
    """Runs the pure dispatcher and produces a ValidationReport.

    Nothing is cached between calls: every report comes from the current
    text snapshot.
    """

    def validate(self, code: str, language: Optional[str]) -> ValidationReport:
        start_time = time.perf_counter()

        tag = language if isinstance(language, str) else ""
        supported = tag in SCANNERS
        diagnostics = validate(code, tag)

        duration_ms = (time.perf_counter() - start_time) * 1000
        report = ValidationReport.build(
            language=tag,
            diagnostics=diagnostics,
            supported=supported,
            duration_ms=duration_ms,
        )

        logger.info(
            "validation_complete",
            language=tag,
            supported=supported,
            summary=report.summary,
            total_diagnostics=len(diagnostics),
            code_length=len(code or ""),
            duration_ms=report.duration_ms,
        )

        return report


# Module-level singleton
validation_engine = ValidationEngine()
