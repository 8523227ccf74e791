"""Entry point of the command."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Sequence

from rhit.cli.args import Args, parse_args
from rhit.export import print_lines
from rhit.md.analysis import print_analysis
from rhit.md.printer import Printer
from rhit.md.summary import print_summary
from rhit.nginx_log.log_base import LogBase
from rhit.trend_computer import TrendComputer

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path("/var/log/nginx")


def _version() -> str:
    try:
        return version("rhit")
    except PackageNotFoundError:
        return "unknown"


def _print_analysis(path: Path, args: Args) -> None:
    base = LogBase.load(path, args)
    if base.is_empty():
        print("no hit in logs", file=sys.stderr)
        return
    printer = Printer.from_args(args, base)
    trend_computer = TrendComputer.create(base, args)
    print_summary(base, printer)
    print_analysis(base, printer, trend_computer)


def run(argv: Sequence[str] | None = None) -> None:
    """Parse the arguments and print the report, or the filtered lines."""
    args = parse_args(argv)
    logger.debug("args: %r", args)
    if args.version:
        print(f"rhit {_version()}")
        return
    path = Path(args.file) if args.file is not None else DEFAULT_LOG_DIR
    if args.lines:
        print_lines(path, args)
    else:
        _print_analysis(path, args)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        run(argv)
    except (RuntimeError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())