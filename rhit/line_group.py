"""Groups of hits sharing a common value."""

from __future__ import annotations

from typing import Any, Hashable, Sequence

from rhit.histo_line import histo_line
from rhit.key import Key
from rhit.trend_computer import TrendComputer


class LineGroup:
    """A non-empty group of log lines with a common value, and its statistics."""

    def __init__(
        self,
        value: Hashable,
        lines: Sequence[Any],
        trend_computer: TrendComputer,
    ) -> None:
        if not lines:
            raise ValueError("a line group can't be empty")
        self.value = value
        self.lines = list(lines)
        self.trend = trend_computer.compute_trend(self.lines)
        self.bytes = sum(line.bytes_sent for line in self.lines)
        self.key_sum = (
            len(self.lines) if trend_computer.key is Key.HITS else self.bytes
        )

    def any(self) -> Any:
        return self.lines[0]

    def hits(self) -> int:
        return len(self.lines)

    def histo_line(self) -> str:
        return histo_line(
            self.trend.sum_per_day,
            self.trend.max_day_count(),
            False,
        )