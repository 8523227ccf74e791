"""Popularity trends of groups of hits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(eq=False)
class Trend:
    """A trend value in [-1000, 1000] with the per-day sums it comes from."""

    sum_per_day: list[int]
    value: int
    ref_count: int
    tail_count: int

    def max_day_count(self) -> int:
        return max(self.sum_per_day)

    def sum(self) -> int:
        return self.ref_count + self.tail_count

    def markdown(self) -> str:
        if self.value > 200:
            if self.value > 900:
                return "`U` `U` `U`"
            if self.value > 500:
                return "`U` `U`"
            return "`U`"
        if self.value < -200:
            if self.value < -900:
                return "`D` `D` `D`"
            if self.value < -500:
                return "`D` `D`"
            return "`D`"
        return " "

    def _cmp(self, other: Trend) -> int:
        if self.value != other.value:
            return -1 if self.value < other.value else 1
        mine, theirs = self.sum(), other.sum()
        if self.value <= 0:
            mine, theirs = theirs, mine
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trend):
            return NotImplemented
        return self.value == other.value and self.sum() == other.sum()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Trend):
            return NotImplemented
        return self._cmp(other) < 0