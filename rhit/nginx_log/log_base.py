"""All the hits read from the log files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rhit.cli.args import Args
from rhit.date import Date
from rhit.filters.filterer import Filterer
from rhit.histogram import Bar, Histogram
from rhit.nginx_log.file_reader import FileReader, LineConsumer, NoLogFileError
from rhit.nginx_log.log_line import LogLine


@dataclass
class _BaseContent(LineConsumer):
    lines: list[LogLine] = field(default_factory=list)
    bar_idx: int = 0
    unfiltered_histogram: Histogram = field(default_factory=Histogram)
    filtered_histogram: Histogram = field(default_factory=Histogram)

    def start_eating(self, first_date: Date) -> None:
        self.unfiltered_histogram.bars.append(Bar(first_date))
        self.filtered_histogram.bars.append(Bar(first_date))

    def eat_line(self, log_line: LogLine, raw_line: str, filtered_out: bool) -> None:
        ubars = self.unfiltered_histogram.bars
        fbars = self.filtered_histogram.bars
        # both histograms stay synchronized, with bars even for days without filtered hits
        if log_line.date != ubars[self.bar_idx].date:
            ubars.append(Bar(log_line.date))
            fbars.append(Bar(log_line.date))
            self.bar_idx += 1
        ubars[self.bar_idx].hits += 1
        ubars[self.bar_idx].bytes_sent += log_line.bytes_sent
        if not filtered_out:
            fbars[self.bar_idx].hits += 1
            fbars[self.bar_idx].bytes_sent += log_line.bytes_sent
            log_line.date_idx = self.bar_idx
            self.lines.append(log_line)


@dataclass
class LogBase:
    dates: list[Date]
    filterer: Filterer
    lines: list[LogLine]
    filtered_histogram: Histogram
    filtered_count: int
    unfiltered_histogram: Histogram
    unfiltered_count: int

    @classmethod
    def load(cls, path: Path, args: Args) -> LogBase:
        """Read and filter all the log files found under a path."""
        content = _BaseContent()
        reader = FileReader(path, args, content)
        reader.read_all_files()
        if not content.lines:
            raise NoLogFileError(f'no log file found in "{path}"')
        bars = content.unfiltered_histogram.bars
        return cls(
            dates=[bar.date for bar in bars],
            filterer=reader.filterer,
            lines=content.lines,
            filtered_histogram=content.filtered_histogram,
            filtered_count=content.filtered_histogram.total_hits(),
            unfiltered_histogram=content.unfiltered_histogram,
            unfiltered_count=sum(bar.hits for bar in bars),
        )

    def start_time(self) -> Date:
        return self.dates[0]

    def end_time(self) -> Date:
        return self.dates[-1]

    def day_count(self) -> int:
        return len(self.dates)

    def is_empty(self) -> bool:
        return not self.lines