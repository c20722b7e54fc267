"""CSS Scanner — missing semicolons, brace balance, hex color length."""

import re

from codecraft.validators.base import diagnostic, numbered_lines
from codecraft.validators.models import Diagnostic, Severity

# "prop: value" running to end of line with no terminator
PROPERTY_WITHOUT_SEMICOLON = re.compile(r":\s*[^;{}]+$")

COLOR_DECLARATION = re.compile(r"(color|background|border):\s*[^;]+")

# Any run of hex digits after '#'; the run must not continue into a name
HEX_COLOR = re.compile(r"#([0-9A-Fa-f]+)(?![0-9A-Za-z_-])")
VALID_HEX_LENGTHS = (3, 6)


def _check_hex_colors(line: str, line_number: int) -> list[Diagnostic]:
    declaration = COLOR_DECLARATION.search(line)
    if declaration is None:
        return []

    errors = []
    for match in HEX_COLOR.finditer(line, declaration.start()):
        if len(match.group(1)) not in VALID_HEX_LENGTHS:
            errors.append(diagnostic(
                line_number,
                match.start() + 1,
                "Invalid hex color format",
                Severity.ERROR,
                "value",
            ))
    return errors


def validate_css(code: str) -> list[Diagnostic]:
    diagnostics = []

    for line_number, line in numbered_lines(code):
        trimmed = line.strip()
        if not trimmed:
            continue

        # 1. Missing semicolon (comment lines exempt)
        is_comment = trimmed.startswith("//") or trimmed.startswith("/*")
        if not is_comment and PROPERTY_WITHOUT_SEMICOLON.search(trimmed):
            diagnostics.append(diagnostic(
                line_number,
                len(line),
                "Missing semicolon at end of property",
                Severity.WARNING,
                "syntax",
            ))

        # 2. More braces opened than closed on this line
        if line.count("{") > line.count("}"):
            diagnostics.append(diagnostic(
                line_number,
                line.rfind("{") + 1,
                "Mismatched braces",
                Severity.WARNING,
                "syntax",
            ))

        # 3. Hex colors must be #rgb or #rrggbb
        diagnostics.extend(_check_hex_colors(line, line_number))

    return diagnostics
