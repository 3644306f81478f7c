from __future__ import annotations

from dataclasses import dataclass

from .dedent import dedent
from .errors import ScanError, ScanErrorKind
from .spans import Position
from .tokens import CharClass, classify


# Full dialect, used in barewords and double quotes. Anything not listed
# (including `\`, `"` and `'`) stands for itself.
_FULL_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\n": "",
}

# Minimal dialect, used in brace bodies.
_BRACE_ESCAPES = frozenset("{}\\")


def _utf8_width(ch: str) -> int:
    if ch < "\x80":
        return 1
    # Undecodable input bytes come back as \udc80-\udcff; each was one byte.
    if "\udc80" <= ch <= "\udcff":
        return 1
    return len(ch.encode("utf-8", "surrogatepass"))


@dataclass(slots=True)
class Cursor:
    src: str
    i: int = 0
    line: int = 1
    col: int = 1
    base: int = 0
    # UTF-8 bytes consumed so far; offsets and columns count bytes.
    off: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self) -> str:
        if self.i >= len(self.src):
            return ""
        return self.src[self.i]

    def advance(self) -> None:
        if self.eof():
            return
        ch = self.src[self.i]
        self.i += 1
        n = _utf8_width(ch)
        self.off += n
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += n

    def pos(self) -> Position:
        return Position(offset=self.base + self.off, line=self.line, column=self.col)

    def error(self, kind: ScanErrorKind) -> ScanError:
        return ScanError.at(kind, self.pos())


def read_full_escape(cur: Cursor) -> str:
    """Decode one backslash sequence in the shell-style dialect."""
    cur.advance()
    if cur.eof():
        raise cur.error(ScanErrorKind.EOF_AFTER_BACKSLASH)
    ch = cur.peek()
    cur.advance()
    return _FULL_ESCAPES.get(ch, ch)


def read_brace_escape(cur: Cursor) -> str:
    """Decode one backslash sequence inside a brace body.

    Only braces and the backslash itself are resolved; any other sequence is
    passed through untouched for whoever consumes the body.
    """
    cur.advance()
    if cur.eof():
        raise cur.error(ScanErrorKind.EOF_AFTER_BACKSLASH)
    ch = cur.peek()
    cur.advance()
    if ch in _BRACE_ESCAPES:
        return ch
    return "\\" + ch


def _read_literal(cur: Cursor, close: str, kind: ScanErrorKind) -> str:
    cur.advance()
    start = cur.i
    while not cur.eof():
        if cur.peek() == close:
            out = cur.src[start : cur.i]
            cur.advance()
            return out
        cur.advance()
    raise cur.error(kind)


def read_single_quote(cur: Cursor) -> str:
    return _read_literal(cur, "'", ScanErrorKind.UNTERMINATED_SINGLE_QUOTE)


def read_backtick(cur: Cursor) -> str:
    return _read_literal(cur, "`", ScanErrorKind.UNTERMINATED_BACKTICK)


def read_double_quote(cur: Cursor) -> str:
    cur.advance()
    buf: list[str] = []
    start = cur.i
    while not cur.eof():
        ch = cur.peek()
        if ch == '"':
            buf.append(cur.src[start : cur.i])
            cur.advance()
            return "".join(buf)
        if ch == "\\":
            buf.append(cur.src[start : cur.i])
            buf.append(read_full_escape(cur))
            start = cur.i
            continue
        cur.advance()
    raise cur.error(ScanErrorKind.UNTERMINATED_DOUBLE_QUOTE)


def read_bareword(cur: Cursor) -> str:
    """Read one unquoted argument.

    Quoted segments and backslash escapes are spliced in, so `a'b c'd` is the
    single argument `ab cd`. Stops before whitespace, newline, backtick and `{`.
    """
    buf: list[str] = []
    start = cur.i
    while not cur.eof():
        ch = cur.peek()
        if ch == "\\":
            buf.append(cur.src[start : cur.i])
            buf.append(read_full_escape(cur))
            start = cur.i
            continue
        cls = classify(ch)
        if cls is CharClass.QUOTE1:
            buf.append(cur.src[start : cur.i])
            buf.append(read_single_quote(cur))
            start = cur.i
        elif cls is CharClass.QUOTE2:
            buf.append(cur.src[start : cur.i])
            buf.append(read_double_quote(cur))
            start = cur.i
        elif cls is CharClass.BAREWORD:
            cur.advance()
        else:
            break
    buf.append(cur.src[start : cur.i])
    return "".join(buf)


def read_brace(cur: Cursor) -> str:
    """Read a balanced `{ ... }` block and return its dedented content."""
    cur.advance()
    buf: list[str] = []
    start = cur.i
    depth = 1
    while not cur.eof():
        ch = cur.peek()
        if ch == "\\":
            buf.append(cur.src[start : cur.i])
            buf.append(read_brace_escape(cur))
            start = cur.i
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                buf.append(cur.src[start : cur.i])
                cur.advance()
                return dedent("".join(buf))
        cur.advance()
    raise cur.error(ScanErrorKind.UNTERMINATED_BRACE)
