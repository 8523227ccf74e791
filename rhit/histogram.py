"""Hits and bytes per day."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rhit.date import Date

_PREFIXES = "KMGTPE"


def fit_4(size: int) -> str:
    """Format a byte count in at most 4 characters, eg ``999``, ``12K`` or ``1.2M``."""
    if size < 10_000:
        return str(size)
    value = float(size)
    for prefix in _PREFIXES:
        value /= 1000
        if value < 9.95:
            return f"{value:.1f}{prefix}"
        if value < 999.5:
            return f"{value:.0f}{prefix}"
    return f"{value:.0f}{_PREFIXES[-1]}"


@dataclass
class Bar:
    date: Date
    hits: int = 0
    bytes_sent: int = 0


@dataclass
class Histogram:
    bars: list[Bar] = field(default_factory=list)

    @classmethod
    def from_base(cls, base: Any) -> Histogram:
        """Count the lines of a log base per date."""
        bars = [Bar(date) for date in base.dates]
        for line in base.lines:
            bar = bars[line.date_idx]
            bar.hits += 1
            bar.bytes_sent += line.bytes_sent
        return cls(bars)

    def total_hits(self) -> int:
        return sum(b.hits for b in self.bars)

    def total_bytes_sent(self) -> int:
        return sum(b.bytes_sent for b in self.bars)