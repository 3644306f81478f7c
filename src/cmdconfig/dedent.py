from __future__ import annotations

import os


def _indent_of(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def dedent(text: str) -> str:
    """Remove the leading whitespace shared by every non-blank line.

    Unlike `textwrap.dedent`, whitespace-only lines are kept verbatim and a
    single-line body is never touched. Blank lines do not take part in the
    prefix computation. Spaces and tabs only match themselves, so bodies
    whose indentation diverges at the first character are returned as-is.
    """
    lines = text.split("\n")
    if len(lines) <= 1:
        return text

    indents = [_indent_of(line) for line in lines if line.strip()]
    if not indents:
        return text

    prefix = os.path.commonprefix(indents)
    if not prefix:
        return text

    n = len(prefix)
    return "\n".join(line[n:] if line.strip() else line for line in lines)
