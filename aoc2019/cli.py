"""Command line entry point: counts passwords under the strict rules."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from aoc2019.password import RANGE_START, RANGE_STOP, solve_day4b


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aoc2019", description="Count passwords meeting the strict rules."
    )
    parser.add_argument("--start", type=int, default=RANGE_START)
    parser.add_argument("--stop", type=int, default=RANGE_STOP)
    args = parser.parse_args(argv)
    try:
        count = solve_day4b(args.start, args.stop)
    except (ValueError, OSError) as exc:
        print(f"Err: {exc}", file=sys.stderr)
    else:
        print(f"Result: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())