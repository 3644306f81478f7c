from __future__ import annotations

import pytest

from cmdconfig import Position, ScanError, ScanErrorKind
from cmdconfig.lexer import Cursor, read_bareword, read_brace, read_brace_escape, read_full_escape


@pytest.mark.parametrize(
    ("src", "out"),
    [
        ("\\n", "\n"),
        ("\\r", "\r"),
        ("\\t", "\t"),
        ("\\\\", "\\"),
        ('\\"', '"'),
        ("\\'", "'"),
        ("\\\n", ""),
        ("\\{", "{"),
        ("\\x", "x"),
    ],
)
def test_full_escape(src: str, out: str) -> None:
    cur = Cursor(src=src)
    assert read_full_escape(cur) == out
    assert cur.eof()


@pytest.mark.parametrize(
    ("src", "out"),
    [
        ("\\{", "{"),
        ("\\}", "}"),
        ("\\\\", "\\"),
        ("\\n", "\\n"),
        ('\\"', '\\"'),
    ],
)
def test_brace_escape(src: str, out: str) -> None:
    cur = Cursor(src=src)
    assert read_brace_escape(cur) == out
    assert cur.eof()


@pytest.mark.parametrize("reader", [read_full_escape, read_brace_escape])
def test_escape_at_end_of_input(reader) -> None:
    cur = Cursor(src="\\")
    with pytest.raises(ScanError) as e:
        reader(cur)
    assert e.value.kind is ScanErrorKind.EOF_AFTER_BACKSLASH
    assert e.value.position == Position(offset=1, line=1, column=2)


def test_cursor_tracks_lines_and_bias() -> None:
    cur = Cursor(src="ab\ncd", line=4, base=100)
    for _ in range(4):
        cur.advance()
    assert cur.pos() == Position(offset=104, line=5, column=2)
    cur.advance()
    cur.advance()
    assert cur.pos() == Position(offset=105, line=5, column=3)


def test_bareword_stops_before_delimiters() -> None:
    cur = Cursor(src="ab'c d'e{rest")
    assert read_bareword(cur) == "abc de"
    assert cur.peek() == "{"


def test_brace_returns_dedented_body() -> None:
    cur = Cursor(src="{\n  a {\n    b\n  }\n} tail")
    assert read_brace(cur) == "\na {\n  b\n}\n"
    assert cur.src[cur.i :] == " tail"


def test_cursor_counts_utf8_bytes() -> None:
    cur = Cursor(src="é日x")
    cur.advance()
    assert cur.pos() == Position(offset=2, line=1, column=3)
    cur.advance()
    assert cur.pos() == Position(offset=5, line=1, column=6)
    cur.advance()
    assert cur.pos() == Position(offset=6, line=1, column=7)
