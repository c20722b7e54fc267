"""Code Validator — line-oriented heuristic linters for the editor.

Usage:
    from codecraft.validators import validate, validation_engine

    diagnostics = validate(code, "html")
    report = validation_engine.validate(code, "html")
"""

from codecraft.validators.engine import (
    SCANNERS,
    ValidationEngine,
    supported_languages,
    validate,
    validation_engine,
)
from codecraft.validators.models import Diagnostic, Severity, ValidationReport

__all__ = [
    "SCANNERS",
    "ValidationEngine",
    "supported_languages",
    "validate",
    "validation_engine",
    "Diagnostic",
    "Severity",
    "ValidationReport",
]
