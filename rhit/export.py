"""Printing of the raw log lines which pass the filters."""

from __future__ import annotations

import sys
from pathlib import Path

from rhit.cli.args import Args
from rhit.date import Date
from rhit.nginx_log.file_reader import FileReader, LineConsumer
from rhit.nginx_log.log_line import LogLine


class _LinePrinter(LineConsumer):
    def start_eating(self, first_date: Date) -> None:
        pass

    def eat_line(self, log_line: LogLine, raw_line: str, filtered_out: bool) -> None:
        if not filtered_out:
            sys.stdout.write(raw_line)


def print_lines(path: Path, args: Args) -> None:
    """Print the original lines of the logs found under ``path`` which pass the filters."""
    FileReader(path, args, _LinePrinter()).read_all_files()