from __future__ import annotations

from .api import iter_commands, parse_body, parse_file, parse_source
from .dedent import dedent
from .errors import ScanError, ScanErrorKind
from .format import format_command, format_commands, format_indent
from .scanner import Scanner
from .spans import Position, Span
from .tokens import Command

__all__ = [
    "Command",
    "Position",
    "ScanError",
    "ScanErrorKind",
    "Scanner",
    "Span",
    "dedent",
    "format_command",
    "format_commands",
    "format_indent",
    "iter_commands",
    "parse_body",
    "parse_file",
    "parse_source",
]
