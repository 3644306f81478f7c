from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .log import get_logger
from .scanner import Scanner
from .tokens import Command


log = get_logger()


def iter_commands(src: str | bytes, *, file: str = "<memory>") -> Iterator[Command]:
    return iter(Scanner(src, file=file))


def parse_source(src: str | bytes, *, file: str = "<memory>") -> list[Command]:
    return list(Scanner(src, file=file))


def parse_file(path: str | Path) -> list[Command]:
    p = Path(path).expanduser().resolve()
    # CRLF line endings are folded to LF; a lone CR stays an ordinary byte.
    src = p.read_bytes().replace(b"\r\n", b"\n")
    commands = parse_source(src, file=str(p))
    log.debug("parsed file", file=str(p), commands=len(commands))
    return commands


def parse_body(parent: Scanner, body: str) -> list[Command]:
    """Parse a body just returned by `parent` as nested commands.

    Errors raised while scanning the body report lines relative to the
    parent's source.
    """
    return list(Scanner.from_parent(parent, body))
