"""Headless entry point: ``rsafe-check PATH [-t N ...]``.

Without ``-t`` prints the strict count and the count with one removal
allowed.
"""
import argparse
import logging
import sys

from ..usecases.evaluate import evaluate
from ..infra.text_io import read_lines
from ..shared.constants import CLI_DEFAULT_TOLERANCES
from .logging_setup import setup_logging


logger = logging.getLogger(__name__)


def _tolerance(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"tolerance must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rsafe-check", description="Count safe reports in a text file")
    parser.add_argument("input", help="file with one report per line")
    parser.add_argument("-t", "--tolerance", type=_tolerance, action="append",
                        help="number of levels that may be removed (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        lines = read_lines(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", args.input, e)
        return 1

    if args.tolerance is None:
        strict, tolerant = (evaluate(lines, t) for t in CLI_DEFAULT_TOLERANCES)
        print(f"Total safe reports: {strict}")
        print(f"Total safe reports with tolerance: {tolerant}")
        return 0

    for t in args.tolerance:
        print(f"Total safe reports with tolerance {t}: {evaluate(lines, t)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
