"""SQL Scanner — statement terminators, concatenated strings, quote balance.

The injection check is a concatenation heuristic only, there is no taint
analysis.
"""

import re

from codecraft.validators.base import diagnostic, numbered_lines
from codecraft.validators.models import Diagnostic, Severity

STATEMENT_START = re.compile(
    r"^(SELECT|INSERT|UPDATE|DELETE|CREATE|DROP|ALTER)\s+",
    re.IGNORECASE,
)

# A string literal closed and then concatenated: ' + ... or ' || ...
STRING_CONCATENATION = re.compile(r"'\s*(\+|\|\|)")


def validate_sql(code: str) -> list[Diagnostic]:
    diagnostics = []

    for line_number, line in numbered_lines(code):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("--"):
            continue

        if STATEMENT_START.match(trimmed) and not trimmed.endswith(";") and "/*" not in line:
            diagnostics.append(diagnostic(
                line_number,
                len(line),
                "SQL statement may be missing semicolon",
                Severity.WARNING,
                "syntax",
            ))

        concatenation = STRING_CONCATENATION.search(line)
        if concatenation:
            diagnostics.append(diagnostic(
                line_number,
                concatenation.start(1) + 1,
                "Potential SQL injection risk: Use parameterized queries",
                Severity.WARNING,
                "security",
            ))

        if line.count("'") % 2 != 0:
            diagnostics.append(diagnostic(
                line_number,
                line.rfind("'") + 1,
                "Unmatched single quotes",
                Severity.ERROR,
                "syntax",
            ))

    return diagnostics
