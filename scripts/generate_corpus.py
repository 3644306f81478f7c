from __future__ import annotations

import argparse
from pathlib import Path

from cmdconfig import ScanError, parse_file
from cmdconfig.testing import generate_sources


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--per-source", type=int, default=5, help="max commands per generated file")
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    ap.add_argument("--check", action="store_true", help="re-parse each written file and report command totals")
    args = ap.parse_args(argv)
    if args.per_source < 1:
        ap.error("--per-source must be at least 1")

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}_per_{args.per_source}"
    out_dir.mkdir(parents=True, exist_ok=True)

    total = 0
    with_body = 0
    for i, src in enumerate(generate_sources(seed=args.seed, count=args.count, per_source=args.per_source)):
        p = out_dir / f"case_{i:06d}.conf"
        p.write_text(src, encoding="utf-8")
        if args.check:
            try:
                cmds = parse_file(p)
            except ScanError as e:
                raise SystemExit(f"{p}: {e}")
            total += len(cmds)
            with_body += sum(1 for c in cmds if c.body is not None)

    print(str(out_dir))
    if args.check:
        print(f"{args.count} files, {total} commands, {with_body} with bodies")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
