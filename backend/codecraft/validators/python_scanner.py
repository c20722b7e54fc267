"""Python Scanner — indentation width, block colons, parens, print statements.

Each line is checked on its own. Indentation assumes a 2-space convention, so
only odd widths are reported; block structure is not tracked.
"""

import re

from codecraft.validators.base import (
    diagnostic,
    leading_whitespace,
    numbered_lines,
    parentheses_unbalanced,
)
from codecraft.validators.models import Diagnostic, Severity

BLOCK_KEYWORD = re.compile(r"^(if|elif|else|for|while|def|class|try|except|finally|with)\b")

# print followed by an expression rather than a call or assignment
LEGACY_PRINT = re.compile(r"^print\s+[^\s(=]")


def validate_python(code: str) -> list[Diagnostic]:
    diagnostics = []

    for line_number, line in numbered_lines(code):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        indent = leading_whitespace(line)
        if indent % 2 != 0:
            diagnostics.append(diagnostic(
                line_number, 1, "Inconsistent indentation", Severity.WARNING, "indentation",
            ))

        if BLOCK_KEYWORD.match(trimmed) and not trimmed.endswith(":"):
            diagnostics.append(diagnostic(
                line_number,
                len(line),
                "Missing colon at end of statement",
                Severity.ERROR,
                "syntax",
            ))

        if parentheses_unbalanced(line):
            diagnostics.append(diagnostic(
                line_number, len(line), "Unmatched parentheses", Severity.ERROR, "syntax",
            ))

        if LEGACY_PRINT.match(trimmed):
            diagnostics.append(diagnostic(
                line_number,
                line.find("print") + 1,
                "Python 2 print statement detected. Use print() function instead.",
                Severity.WARNING,
                "compatibility",
            ))

    return diagnostics
