"""String formatting helpers."""

from __future__ import annotations

import re

_INDENT_PATTERN = re.compile(r"^([\t\n\f\r ]*)[^\t\n\f\r ]")


def trim_leading_indent(s: str) -> str:
    """Remove the first non-blank line's indent from every line."""
    s = s.strip("\n")
    lines = s.split("\n")
    first = next((pos for pos, line in enumerate(lines) if line.strip()), -1)
    if first < 0:
        return ""
    lines = lines[first:]
    match = _INDENT_PATTERN.match(lines[0])
    if match is None:
        return s
    indent = match.group(1)
    return "\n".join(line.removeprefix(indent) for line in lines).strip()


def capitalize(s: str) -> str:
    """Upper-case the first character and leave the rest alone."""
    if not s:
        return s
    first = s[0].upper()
    if len(first) != 1:
        first = s[0]
    return first + s[1:]