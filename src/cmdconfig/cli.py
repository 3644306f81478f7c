from __future__ import annotations

import argparse
import json
import sys

from .api import parse_file
from .errors import ScanError
from .format import format_commands
from .log import setup_logging
from .tokens import Command


def _to_jsonable(cmd: Command) -> dict[str, object]:
    out: dict[str, object] = {"args": list(cmd.args), "body": cmd.body}
    if cmd.span is not None:
        out["line"] = cmd.span.start.line
        out["column"] = cmd.span.start.column
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="cmdconfig", description="Parse command-configuration files")
    ap.add_argument("files", nargs="+", help="Input files")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--json", action="store_true", help="Print parsed commands as JSON")
    mode.add_argument("--format", action="store_true", help="Print canonically formatted commands")
    ap.add_argument("--indent", type=int, default=0, help="Indent body lines by N spaces (with --format)")
    ap.add_argument("--tabs", action="store_true", help="Indent body lines with a tab (with --format)")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr",
    )
    args = ap.parse_args(argv)
    log = setup_logging(args.log_level)

    results: dict[str, list[Command]] = {}
    for path in args.files:
        try:
            results[path] = parse_file(path)
        except ScanError as e:
            log.error("scan failed", file=path, line=e.position.line, column=e.position.column, error=e.message)
            print(f"{path}: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            log.error("cannot read file", file=path, error=str(e))
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            return 1

    if args.json:
        payload = {path: [_to_jsonable(c) for c in cmds] for path, cmds in results.items()}
        print(json.dumps(payload, indent=2, sort_keys=True))
    elif args.format:
        indent = "\t" if args.tabs else " " * args.indent
        for cmds in results.values():
            sys.stdout.write(format_commands(cmds, indent=indent))
    else:
        for cmds in results.values():
            for c in cmds:
                loc = c.span.format() if c.span is not None else "?"
                print(loc + "\t" + " ".join(c.args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
