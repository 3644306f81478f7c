from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .spans import Span


class CharClass(str, Enum):
    WHITESPACE = "whitespace"
    QUOTE1 = "'"
    QUOTE2 = '"'
    BACKTICK = "`"
    LBRACE = "{"
    NEWLINE = "newline"
    BAREWORD = "bareword"


_SPECIAL: dict[str, CharClass] = {
    " ": CharClass.WHITESPACE,
    "\t": CharClass.WHITESPACE,
    "'": CharClass.QUOTE1,
    '"': CharClass.QUOTE2,
    "`": CharClass.BACKTICK,
    "{": CharClass.LBRACE,
    "\n": CharClass.NEWLINE,
}


def classify(ch: str) -> CharClass:
    # Backslash and other control characters fall into BAREWORD: both start
    # (or continue) a bareword argument.
    return _SPECIAL.get(ch, CharClass.BAREWORD)


def is_bareword_char(ch: str) -> bool:
    """True if `ch` may appear unquoted and unescaped in formatted output."""
    return ch >= " " and ch != "\\" and classify(ch) is CharClass.BAREWORD


@dataclass(frozen=True, slots=True)
class Command:
    """One parsed unit: arguments in source order plus an optional raw body.

    `body is None` means no brace block followed the arguments; an explicit
    `{}` yields an empty string.
    """

    args: tuple[str, ...]
    body: str | None = None
    span: Span | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        loc = f", {self.span.format()}" if self.span is not None else ""
        return f"Command({list(self.args)!r}, {self.body!r}{loc})"
