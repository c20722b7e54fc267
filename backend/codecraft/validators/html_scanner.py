"""HTML Scanner — open-tag tracking, angle bracket balance, img src attribute.

This is the only scanner with memory beyond the current line. The open-tag
stack is an immutable tuple threaded through the line fold, so a prefix of a
document can be scanned and its stack inspected at any point.
"""

import re

from codecraft.validators.base import diagnostic, numbered_lines
from codecraft.validators.models import Diagnostic, Severity

# Elements that never take a closing tag, even when written as <br>
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

# Opening, self-closing or closing tag. Comments and <!DOCTYPE> never match.
TAG_PATTERN = re.compile(r"</?[a-zA-Z][a-zA-Z0-9]*[^>]*>")
TAG_NAME_PATTERN = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)")
IMG_WITH_SRC_PATTERN = re.compile(r"<img\b[^>]*?\ssrc\s*=")

OpenTag = tuple[str, int]
TagStack = tuple[OpenTag, ...]


def apply_tag(stack: TagStack, token: str, line_number: int) -> TagStack:
    """Return the stack after seeing one tag token.

    A closing tag pops whatever is on top; names are not compared.
    """
    if token.startswith("</"):
        return stack[:-1] if stack else stack

    tag_name = TAG_NAME_PATTERN.match(token).group(1)
    if token.endswith("/>") or tag_name.lower() in VOID_ELEMENTS:
        return stack

    return stack + ((tag_name, line_number),)


def scan_html_line(
    line: str,
    line_number: int,
    stack: TagStack = (),
) -> tuple[list[Diagnostic], TagStack]:
    """Scan one line. Returns the line's diagnostics and the updated stack."""
    diagnostics = []

    for match in TAG_PATTERN.finditer(line):
        stack = apply_tag(stack, match.group(0), line_number)

    if line.count("<") != line.count(">"):
        diagnostics.append(diagnostic(
            line_number,
            line.find("<") + 1,
            "Mismatched angle brackets",
            Severity.WARNING,
            "syntax",
        ))

    if "<img" in line and not IMG_WITH_SRC_PATTERN.search(line):
        diagnostics.append(diagnostic(
            line_number,
            line.find("<img") + 1,
            "img tag missing src attribute",
            Severity.WARNING,
            "attribute",
        ))

    return diagnostics, stack


def unclosed_tag_diagnostic(stack: TagStack) -> list[Diagnostic]:
    """At most one finding, for the oldest still-open tag."""
    if not stack:
        return []

    tag_name, line_number = stack[0]
    return [diagnostic(
        line_number,
        1,
        f"Unclosed tag: <{tag_name}>",
        Severity.ERROR,
        "syntax",
    )]


def validate_html(code: str) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    stack: TagStack = ()

    for line_number, line in numbered_lines(code):
        found, stack = scan_html_line(line, line_number, stack)
        diagnostics.extend(found)

    # Always last, whatever line the tag was opened on
    diagnostics.extend(unclosed_tag_diagnostic(stack))
    return diagnostics
