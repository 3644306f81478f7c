from __future__ import annotations

import argparse
from pathlib import Path

from cmdconfig.testing import generate_sources, snapshot_digest


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="compute_snapshot_hash")
    ap.add_argument("--fixtures", default="tests/fixtures/snapshot", help="directory of *.conf files to hash")
    ap.add_argument("--generated", action="store_true", help="hash a generated corpus instead of the fixtures")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    args = ap.parse_args(argv)

    if args.generated:
        sources: list[str | bytes] = list(generate_sources(seed=args.seed, count=args.count))
    else:
        files = sorted(Path(args.fixtures).glob("*.conf"))
        if not files:
            raise SystemExit(f"no .conf files in {args.fixtures}")
        sources = [p.read_bytes() for p in files]

    print(snapshot_digest(sources))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
