from __future__ import annotations

import hashlib
import random
import string
from collections.abc import Iterable

from ..api import parse_source
from ..format import format_commands
from ..tokens import Command


_BARE_CHARS = string.ascii_letters + string.digits + "_-./:=+,@%}"
_QUOTED_CHARS = _BARE_CHARS + " \t\n\r'\"`{}\\$"
_NAMES = ["server", "listen", "route", "env", "user", "include", "log", "upstream", "set"]
_KEYS = ["port", "host", "path", "level", "timeout", "name", "mode", "root"]


def _bareword(r: random.Random) -> str:
    return "".join(r.choice(_BARE_CHARS) for _ in range(r.randint(1, 12)))


def _quoted(r: random.Random) -> str:
    return "".join(r.choice(_QUOTED_CHARS) for _ in range(r.randint(0, 12)))


def _arg(r: random.Random) -> str:
    k = r.random()
    if k < 0.6:
        return _bareword(r)
    if k < 0.7:
        return f"{r.choice(_KEYS)}={_bareword(r)}"
    return _quoted(r)


def _body(r: random.Random, *, depth: int = 0) -> str:
    pad = r.choice(["", "  ", "    ", "\t"])
    lines: list[str] = []
    for _ in range(r.randint(0, 5)):
        k = r.random()
        if k < 0.15:
            lines.append("")
        elif k < 0.3 and depth < 2:
            lines.append(f"{pad}{r.choice(_NAMES)} {{")
            inner = _body(r, depth=depth + 1)
            lines.extend(pad + "  " + line if line else line for line in inner.split("\n"))
            lines.append(f"{pad}}}")
        else:
            lines.append(f"{pad}{r.choice(_KEYS)}: {_bareword(r).replace('}', '')}")
    return "\n".join(lines)


def _gen_one(r: random.Random) -> tuple[tuple[str, ...], str | None]:
    args = tuple(_arg(r) for _ in range(r.randint(1, 5)))
    k = r.random()
    if k < 0.55:
        return args, None
    if k < 0.6:
        return args, ""
    return args, _body(r)


def generate_commands(*, seed: int, count: int) -> list[tuple[tuple[str, ...], str | None]]:
    """Generate a deterministic list of (args, body) pairs.

    Arguments mix barewords with strings that need quoting; bodies hold
    balanced braces and no backslashes, so they survive a format/parse trip.
    """
    r = random.Random(seed)
    return [_gen_one(r) for _ in range(count)]


def generate_sources(*, seed: int, count: int, per_source: int = 5) -> list[str]:
    r = random.Random(seed)
    out: list[str] = []
    for _ in range(count):
        cmds = [Command(args=args, body=body) for args, body in (_gen_one(r) for _ in range(r.randint(1, per_source)))]
        out.append(format_commands(cmds, indent=r.choice(["", "  ", "\t"])))
    return out


def snapshot_digest(sources: Iterable[str | bytes]) -> str:
    """sha256 over the canonical re-formatting of each source, in order."""
    h = hashlib.sha256()
    for src in sources:
        h.update(format_commands(parse_source(src)).encode("utf-8", "surrogateescape"))
        h.update(b"\n---\n")
    return h.hexdigest()
