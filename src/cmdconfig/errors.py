from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Position


class ScanErrorKind(str, Enum):
    UNTERMINATED_SINGLE_QUOTE = "unterminated single quote"
    UNTERMINATED_DOUBLE_QUOTE = "unterminated double quote"
    UNTERMINATED_BACKTICK = "unterminated backtick"
    UNTERMINATED_BRACE = "unterminated brace block"
    EOF_AFTER_BACKSLASH = "unexpected end of input after backslash"


@dataclass(slots=True)
class ScanError(Exception):
    kind: ScanErrorKind
    position: Position
    message: str

    @classmethod
    def at(cls, kind: ScanErrorKind, position: Position) -> ScanError:
        return cls(kind=kind, position=position, message=kind.value)

    def __str__(self) -> str:
        return f"{self.message} at {self.position}"
