from __future__ import annotations

from collections.abc import Iterable, Sequence

from .tokens import Command, is_bareword_char


_QUOTE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    # Braces are escaped even inside quotes so that formatted arguments can
    # never be mistaken for the start of a body.
    "{": "\\{",
    "}": "\\}",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def is_bareword(arg: str) -> bool:
    return bool(arg) and all(is_bareword_char(ch) for ch in arg)


def quote_arg(arg: str) -> str:
    out = ['"']
    for ch in arg:
        esc = _QUOTE_ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif ch < " ":
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def format_indent(args: Sequence[str], body: str | None, indent: str) -> str:
    """Render one command, prefixing every body line with `indent`.

    The body is written raw between `{` and `}` on lines of its own; it is
    the caller's job to keep its braces balanced.
    """
    head = " ".join(arg if is_bareword(arg) else quote_arg(arg) for arg in args)
    if body is None:
        return head
    lines = "".join(indent + line + "\n" for line in body.split("\n"))
    return f"{head} {{\n{lines}}}"


def format_command(args: Sequence[str], body: str | None = None) -> str:
    """Render one command on a single line, followed by its brace block if any.

    Only `None` means "no body"; an empty string still emits an empty `{}` block.
    """
    return format_indent(args, body, "")


def format_commands(commands: Iterable[Command], *, indent: str = "") -> str:
    out = [format_indent(cmd.args, cmd.body, indent) for cmd in commands]
    if not out:
        return ""
    return "\n".join(out) + "\n"
