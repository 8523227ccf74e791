"""Discovery of access log files and of their first dates."""

from __future__ import annotations

import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from rhit.date import Date
from rhit.nginx_log.log_line import LogLine, LogParseError

logger = logging.getLogger(__name__)

# a log file may contain non log lines, for example logrotate traces
_FIRST_DATE_TRIES = 3
_MIN_LOG_LINE_LEN = 20


def _open_log(path: Path) -> BinaryIO:
    if path.suffix == ".gz":
        return gzip.open(path, "rb")  # type: ignore[return-value]
    return path.open("rb")


def is_access_log_path(path: Path) -> bool:
    return "access.log" in Path(path).name


def find_files(path: Path, check_name: bool, check_deeper_names: bool) -> list[Path]:
    """List the files under a root which may be a file or a directory."""
    path = Path(path)
    if path.is_dir():
        return [
            found
            for entry in sorted(path.iterdir())
            for found in find_files(entry, check_deeper_names, check_deeper_names)
        ]
    if not check_name or is_access_log_path(path):
        return [path]
    return []


def get_file_first_date(path: Path) -> Date | None:
    """Return the date of the first log line, looking at the first lines only."""
    path = Path(path)
    logger.debug("reading date in file %s", path)
    with _open_log(path) as f:
        text = ""
        for _ in range(_FIRST_DATE_TRIES):
            chunk = f.readline()
            if not chunk:
                return None
            text += chunk.decode("utf-8")
            if len(chunk) < _MIN_LOG_LINE_LEN:
                logger.debug("line too short")
                continue
            try:
                return LogLine.parse(text).date
            except LogParseError:
                logger.debug("skipping line %r", text)
            text = ""
    return None


@dataclass
class FileFinder:
    root: Path
    check_names: bool

    def dated_files(self) -> list[tuple[Date, Path]]:
        """Return (date, path) pairs sorted by the date of the file's first line."""
        dated: list[tuple[Date, Path]] = []
        for path in find_files(Path(self.root), False, self.check_names):
            date = get_file_first_date(path)
            if date is None:
                logger.debug("no date found in %s", path)
            else:
                dated.append((date, path))
        dated.sort(key=lambda t: t[0])
        return dated