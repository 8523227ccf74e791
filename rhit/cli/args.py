"""Command line arguments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence, TypeVar

from rhit.fields import Fields
from rhit.key import Key

T = TypeVar("T")


@dataclass
class Args:
    """Options of a report of the hits found in nginx logs."""

    version: bool = False
    color: bool | None = None
    key: Key = Key.HITS
    length: int = 1
    fields: Fields = field(default_factory=Fields.default)
    changes: bool = False
    date: str | None = None
    ip: str | None = None
    method: str | None = None
    path: str | None = None
    referer: str | None = None
    status: str | None = None
    all: bool = False
    no_name_check: bool = False
    lines: bool = False
    silent_load: bool = False
    file: Path | None = None


def parse_bool_arg(value: str) -> bool | None:
    """Parse 'yes', 'no' or 'auto' (which gives None)."""
    lowered = value.lower()
    if lowered == "auto":
        return None
    if lowered == "yes":
        return True
    if lowered == "no":
        return False
    raise ValueError(f'Illegal value: "{value}"')


def _parse_length(value: str) -> int:
    if not value.isdigit():
        raise ValueError(f'Illegal value: "{value}"')
    return int(value)


def _arg_type(parse: Callable[[str], T], name: str) -> Callable[[str], T]:
    def convert(value: str) -> T:
        try:
            return parse(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    convert.__name__ = name
    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rhit",
        description="Rhit gives you a report of the hits found in your nginx logs.",
    )
    parser.add_argument("--version", action="store_true", help="print the version")
    parser.add_argument(
        "--color",
        type=_arg_type(parse_bool_arg, "color"),
        default=None,
        help="color and style: 'yes', 'no' or 'auto' (auto should be good in most cases)",
    )
    parser.add_argument(
        "-k", "--key",
        type=_arg_type(Key.parse, "key"),
        default=Key.HITS,
        help="key used in sorting and histogram, either 'hits' (default) or 'bytes'",
    )
    parser.add_argument(
        "-l", "--length",
        type=_arg_type(_parse_length, "length"),
        default=1,
        help="detail level, from 0 to 6 (default 1), impacts the lengths of tables",
    )
    parser.add_argument(
        "-f", "--fields",
        type=_arg_type(Fields.parse, "fields"),
        default=Fields.default(),
        help=(
            "comma separated list of hit fields to display. "
            "Use `-f a` to get all fields. Use `-f +i` to add ip. "
            "Available fields: date,method,status,ip,ref,path. "
            "Default fields: date,status,ref,path."
        ),
    )
    parser.add_argument(
        "-c", "--changes",
        action="store_true",
        help="add tables with more popular and less popular entries (ip, referers or paths)",
    )
    parser.add_argument(
        "-d", "--date",
        help="filter the dates, on a precise day or in an inclusive range "
        "(eg: `-d 12/24` or `-d '2021/12/24-2022/01/21'`)",
    )
    parser.add_argument(
        "-i", "--ip", help="ip address to filter by. May be negated with a `!`"
    )
    parser.add_argument(
        "-m", "--method",
        help="http method to filter by. Make it negative with a `!`. "
        "(eg: `-m PUT` or `-m !DELETE` or `-m none` or `-m other`)",
    )
    parser.add_argument(
        "-p", "--path",
        help="filter the paths with a pattern "
        "(eg: `-p broot` or `-p '^/\\d+'` or `-p 'miaou | blog'`)",
    )
    parser.add_argument("-r", "--referer", help="filter the referers with a pattern")
    parser.add_argument(
        "-s", "--status",
        help="comma separated list of statuses or status ranges. "
        "(eg: `-s 514` or `-s 4xx,5xx`, or `-s 310-340,400-450` or `-s 5xx,!502`)",
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="show all paths, including resources"
    )
    parser.add_argument(
        "--no-name-check",
        action="store_true",
        help="tries to open all files, whatever their names",
    )
    parser.add_argument(
        "--lines",
        action="store_true",
        help="print the original log lines, filtered and sorted",
    )
    parser.add_argument(
        "--silent-load",
        action="store_true",
        help="don't print anything during load, no progress bar or file list",
    )
    parser.add_argument(
        "file", nargs="?", type=Path, default=None,
        help="the log file or folder to analyze",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse command line arguments; exits with a usage message on error."""
    namespace = _build_parser().parse_args(argv)
    return Args(**vars(namespace))