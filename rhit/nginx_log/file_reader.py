"""Reading of the log files, line by line, through the filters."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from rhit.cli.args import Args
from rhit.date import Date
from rhit.filters.filterer import Filterer
from rhit.nginx_log.file_finder import FileFinder, _open_log
from rhit.nginx_log.log_line import LogLine, LogParseError

logger = logging.getLogger(__name__)

_PROGRESS_WIDTH = 40
_H_CHARS = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉")
_CLEAR_LINE = "\x1b[2K"


class NoLogFileError(RuntimeError):
    """Raised when no log file, or no log line, could be found."""


class LineConsumer(ABC):
    """Receives the parsed lines of the log files."""

    @abstractmethod
    def start_eating(self, first_date: Date) -> None:
        """Called once, before any line, with the date of the first file."""

    @abstractmethod
    def eat_line(self, log_line: LogLine, raw_line: str, filtered_out: bool) -> None:
        """Called for every valid log line."""


def _progress_bar(part: float, width: int) -> str:
    units = round(max(0.0, min(1.0, part)) * width * 8)
    full, rest = divmod(units, 8)
    return ("█" * full + _H_CHARS[rest]).ljust(width)


def _print_progress(done: int, total: int) -> None:
    bar = _progress_bar(done / total, _PROGRESS_WIDTH)
    sys.stderr.write(
        f"\x1b7{_CLEAR_LINE}{done:>4} / {total} \x1b[33;45m{bar}\x1b[0m\x1b8"
    )
    sys.stderr.flush()


class FileReader:
    """Feeds a consumer with the lines of all the log files found under a path."""

    def __init__(self, path: Path, args: Args, consumer: LineConsumer) -> None:
        self.root = Path(path)
        check_names = not args.no_name_check
        dated_files = FileFinder(self.root, check_names).dated_files()
        if not dated_files:
            raise NoLogFileError("no log file found")
        first_date = dated_files[0][0]
        last_date = dated_files[-1][0]
        self.filterer = Filterer.from_args(args, first_date, last_date)
        self.consumer = consumer
        self.paths = [p for _, p in dated_files]
        self.stop_on_error = check_names
        self.silent = args.silent_load
        consumer.start_eating(first_date)

    def read_all_files(self) -> None:
        total = len(self.paths)
        if not self.silent:
            _print_progress(0, total)
        paths, self.paths = self.paths, []
        for done, path in enumerate(paths, start=1):
            try:
                self._read_file_lines(path)
            except (OSError, ValueError, EOFError) as e:
                if self.stop_on_error:
                    raise
                logger.warning("Error while reading file: %s", e)
            if not self.silent:
                _print_progress(done, total)
        sys.stderr.write(_CLEAR_LINE)
        sys.stderr.flush()
        if not self.silent:
            print(f'I\'ve read {total} files in "{self.root}"', file=sys.stderr)

    def _read_file_lines(self, path: Path) -> None:
        logger.debug("reading file %s", path)
        errors = 0
        with _open_log(path) as f:
            for raw in f:
                line = raw.decode("utf-8")
                try:
                    log_line = LogLine.parse(line)
                except LogParseError as e:
                    if errors == 0:
                        logger.warning("%s in %s", e, line)
                    else:
                        if errors == 1:
                            logger.warning("logging other errors in this file as debug only")
                        logger.debug("%s in %s", e, line)
                    errors += 1
                    continue
                filtered_out = not self.filterer.accepts(log_line)
                self.consumer.eat_line(log_line, line, filtered_out)
        if errors:
            logger.warning("%d errors in %s", errors, path)