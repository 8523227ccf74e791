"""Computation of per-day histograms and popularity trends of groups of hits."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from rhit.key import Key
from rhit.trend import Trend

MAX_HISTO_LEN = 20
TAIL_LEN = 2
MIN_DAY_COUNT = 4

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class DateIndexed(Protocol):
    """Something holding the index of its date and a count of bytes."""

    date_idx: int
    bytes_sent: int


def _to_i32(value: float) -> int:
    """Truncate toward zero, saturating, with NaN giving 0."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


@dataclass
class TrendComputer:
    """Compares the recent days (the tail) with the older ones (the reference)."""

    histo_offset: int  # number of old days skipped
    histo_len: int  # ref_len + tail_len
    ref_len: int
    tail_len: int
    normalization_factor: float
    key: Key = Key.HITS

    @classmethod
    def create(cls, base: Any, args: Any) -> TrendComputer | None:
        """Build a computer for the base, or None when there are too few days."""
        date_filter = base.filterer.date_filter()
        if date_filter is not None:
            # with a date filter, the histograms must not end on an excluded tail
            day_count = 0
            for idx, date in enumerate(base.dates):
                if date_filter.contains(date):
                    day_count = idx + 1
        else:
            day_count = base.day_count()
        if day_count < MIN_DAY_COUNT:
            return None
        histo_len = min(day_count, MAX_HISTO_LEN)
        computer = cls(
            histo_offset=day_count - histo_len,
            histo_len=histo_len,
            ref_len=histo_len - TAIL_LEN,
            tail_len=TAIL_LEN,
            normalization_factor=1.0,
            key=args.key,
        )
        counts_per_day = [bar.hits for bar in base.unfiltered_histogram.bars]
        ref_count, tail_count = computer._ref_tail_counts(counts_per_day)
        if tail_count:
            computer.normalization_factor = ref_count / tail_count
        elif ref_count:
            computer.normalization_factor = math.inf
        else:
            computer.normalization_factor = math.nan
        return computer

    def compute_histo_line(self, lines: Iterable[DateIndexed]) -> list[int]:
        """Sum the key per day over the histogram window; lines are sorted by date."""
        counts = [0] * self.histo_len
        for line in lines:
            if line.date_idx < self.histo_offset:
                continue
            idx = line.date_idx - self.histo_offset
            if idx >= self.histo_len:
                break
            counts[idx] += 1 if self.key is Key.HITS else line.bytes_sent
        return counts

    def _ref_tail_counts(self, counts_per_day: Sequence[int]) -> tuple[int, int]:
        ref_count = sum(counts_per_day[: self.ref_len])
        tail_count = sum(counts_per_day[self.ref_len : self.histo_len])
        return ref_count, tail_count

    def compute_trend(self, lines: Iterable[DateIndexed]) -> Trend:
        sum_per_day = self.compute_histo_line(lines)
        ref_count, tail_count = self._ref_tail_counts(sum_per_day)
        if ref_count + tail_count == 0:
            value = 0
        else:
            tc = tail_count * self.normalization_factor
            rc = float(ref_count)
            denominator = rc + tc
            raw = 1000.0 * (tc - rc) / denominator if denominator else math.nan
            value = _to_i32(raw)
        return Trend(sum_per_day, value, ref_count, tail_count)