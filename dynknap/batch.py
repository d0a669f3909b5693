# -*- coding: utf-8 -*-
"""
Batch entry point: read a problem in the line-oriented format, print max value.

Usage:
  dynknap-batch < problem.txt
  dynknap-batch problem.txt --workers 4 --log-level DEBUG

Exit codes: 0 ok, 2 malformed/invalid input, 1 computation failure.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from dynknap.business_objects.errors import ComputationOverflowError, SchemaError
from dynknap.planning.aggregator import solve
from dynknap.utils.read_stream import read_batch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynknap-batch",
        description="Grouped knapsack with position-dependent weights (batch mode).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="Problem file, '-' for standard input")
    parser.add_argument("--workers", type=int, default=None,
                        help="Solve groups on a thread pool of this size")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (messages go to stderr)")
    return parser


def run(stream: TextIO, out: TextIO, workers: Optional[int] = None) -> int:
    """Solve the problem in `stream` and write max_value to `out`."""
    state = read_batch(stream, max_workers=workers)
    result = solve(state)
    out.write(f"{result.max_value}\n")
    return result.max_value


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.input == "-":
            run(sys.stdin, sys.stdout, workers=args.workers)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                run(f, sys.stdout, workers=args.workers)
    except (OSError, UnicodeDecodeError, SchemaError) as e:
        logger.error("invalid input: %s", e)
        return 2
    except ComputationOverflowError as e:
        logger.error("solve aborted: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
