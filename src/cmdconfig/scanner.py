from __future__ import annotations

from collections.abc import Iterator

from .errors import ScanError
from .lexer import Cursor, read_backtick, read_bareword, read_brace
from .spans import Position, Span
from .tokens import CharClass, Command, classify


class Scanner:
    """Splits command-configuration text into `Command`s, one per `next()`.

    A scanner is a mutable cursor over its input and is not safe to share
    between threads. Once `next()` has raised a `ScanError` every further
    call raises the same error.
    """

    def __init__(
        self,
        src: str | bytes,
        *,
        file: str = "<memory>",
        line: int = 1,
        base_offset: int = 0,
    ) -> None:
        if isinstance(src, bytes):
            src = src.decode("utf-8", "surrogateescape")
        self.file = file
        self._cur = Cursor(src=src, line=line, base=base_offset)
        self._error: ScanError | None = None

    @classmethod
    def from_parent(cls, parent: Scanner, src: str | bytes) -> Scanner:
        """Scanner over text extracted from `parent` (typically a body).

        The child starts at column 1 on the parent's current line, and its
        offsets are biased by the parent's current offset, so errors point
        into the original source.
        """
        pos = parent.current_position()
        return cls(src, file=parent.file, line=pos.line, base_offset=pos.offset)

    def current_position(self) -> Position:
        return self._cur.pos()

    def next(self) -> Command | None:
        """Return the next command, or None once the input is exhausted."""
        if self._error is not None:
            raise self._error
        try:
            return self._scan()
        except ScanError as e:
            self._error = e
            raise

    def __iter__(self) -> Iterator[Command]:
        while True:
            cmd = self.next()
            if cmd is None:
                return
            yield cmd

    def _scan(self) -> Command | None:
        cur = self._cur
        args: list[str] = []
        start = cur.pos()

        while not cur.eof():
            cls = classify(cur.peek())

            if cls is CharClass.WHITESPACE:
                cur.advance()
                continue

            if cls is CharClass.NEWLINE:
                end = cur.pos()
                cur.advance()
                if args:
                    return self._finish(args, None, start, end)
                continue

            if not args:
                start = cur.pos()

            # A brace always ends the command, whatever came before it.
            if cls is CharClass.LBRACE:
                body = read_brace(cur)
                return self._finish(args, body, start, cur.pos())

            if cls is CharClass.BACKTICK:
                args.append(read_backtick(cur))
            else:
                args.append(read_bareword(cur))

        if not args:
            return None
        return self._finish(args, None, start, cur.pos())

    def _finish(self, args: list[str], body: str | None, start: Position, end: Position) -> Command:
        return Command(args=tuple(args), body=body, span=Span(file=self.file, start=start, end=end))
