"""JavaScript Scanner — single-line heuristics, no state across lines."""

import re

from codecraft.validators.base import diagnostic, numbered_lines, parentheses_unbalanced
from codecraft.validators.models import Diagnostic, Severity

# Identifier character or closing bracket as the last character
STATEMENT_END = re.compile(r"[a-zA-Z0-9_)\]}]$")
NO_SEMICOLON_ENDINGS = ("{", ",", ":", ";")
CONTROL_PREFIXES = ("if", "for", "while")

EMPTY_CONSOLE_LOG = re.compile(r"console\.log\(\s*\)")
UNINITIALIZED_DECLARATION = re.compile(r"\b(var|let|const)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*$")


def _missing_semicolon(trimmed: str) -> bool:
    return (
        STATEMENT_END.search(trimmed) is not None
        and not trimmed.endswith(NO_SEMICOLON_ENDINGS)
        and not trimmed.startswith(CONTROL_PREFIXES)
    )


def validate_javascript(code: str) -> list[Diagnostic]:
    diagnostics = []

    for line_number, line in numbered_lines(code):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("//"):
            continue

        if _missing_semicolon(trimmed):
            diagnostics.append(diagnostic(
                line_number, len(line), "Missing semicolon", Severity.WARNING, "syntax",
            ))

        if parentheses_unbalanced(line):
            diagnostics.append(diagnostic(
                line_number, len(line), "Unmatched parentheses", Severity.ERROR, "syntax",
            ))

        if EMPTY_CONSOLE_LOG.search(line):
            diagnostics.append(diagnostic(
                line_number,
                line.find("console.log") + 1,
                "console.log has no arguments",
                Severity.WARNING,
                "logic",
            ))

        if UNINITIALIZED_DECLARATION.search(trimmed):
            diagnostics.append(diagnostic(
                line_number,
                len(line),
                "Variable declaration without initialization",
                Severity.WARNING,
                "logic",
            ))

    return diagnostics
