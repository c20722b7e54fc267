"""Shared pieces of the per-language scanners.

Every scanner is a plain function ``text -> list[Diagnostic]``. Scanners share
the diagnostic shape and the line-by-line strategy below, never rule logic or
state.
"""

from typing import Callable, Iterator

from codecraft.validators.models import Diagnostic, Severity

Scanner = Callable[[str], list[Diagnostic]]


def diagnostic(
    line: int,
    column: int,
    message: str,
    severity: Severity,
    category: str,
) -> Diagnostic:
    """Convenience constructor. Columns are 1-based, so a missing token maps to 1."""
    return Diagnostic(
        line=line,
        column=max(1, column),
        message=message,
        severity=severity,
        category=category,
    )


def numbered_lines(code: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, 1-based, splitting on newlines only."""
    return enumerate(code.split("\n"), start=1)


def parentheses_unbalanced(line: str) -> bool:
    """Per-line paren count check; nothing is carried across lines."""
    return line.count("(") != line.count(")")


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())
