from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, load_source, run_string
from .errors import BFTapeError


def init_logging(*, verbose: bool = False) -> None:
    # no-op when the host process already configured the root logger
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)5s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bftape",
        description="Run a Brainfuck program on a fixed 30000-cell tape (no wraparound).",
    )
    parser.add_argument("file", help="Path to the program source")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unmatched brackets before running instead of when they are reached",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine activity to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(verbose=args.verbose)

    try:
        source = load_source(args.file)
        run_string(source, options=RunOptions(strict=args.strict))
    except BFTapeError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
