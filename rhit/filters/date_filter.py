"""Filtering of hits on their date."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from rhit.date import Date

_YEAR = re.compile(r"([0-9]{4})")
_YEAR_MONTH = re.compile(r"([0-9]{4})/([0-9]{2})")


class DateFilterKind(Enum):
    AFTER = "after"
    BEFORE = "before"
    NOT = "not"
    PRECISE = "precise"
    RANGE = "range"


@dataclass(frozen=True)
class DateFilter:
    """A condition on a date; ``end`` is only set for ranges (inclusive)."""

    kind: DateFilterKind
    date: Date
    end: Date | None = None

    @classmethod
    def parse(
        cls,
        s: str,
        default_year: int | None,
        default_month: int | None,
    ) -> DateFilter:
        """Parse ``>date``, ``<date``, ``!date``, ``date-date``, a year, a month or a day.

        Raises DateParseError when the pattern can't be understood.
        """
        prefixed = {
            ">": DateFilterKind.AFTER,
            "<": DateFilterKind.BEFORE,
            "!": DateFilterKind.NOT,
        }
        kind = prefixed.get(s[:1])
        if kind is not None:
            return cls(kind, Date.with_implicit(s[1:], default_year, default_month))
        tokens = s.split("-")
        if len(tokens) >= 2:
            return cls(
                DateFilterKind.RANGE,
                Date.with_implicit(tokens[0], default_year, default_month),
                Date.with_implicit(tokens[1], default_year, default_month),
            )
        single = tokens[0]
        if _YEAR.fullmatch(single):
            year = int(single)
            return cls(DateFilterKind.RANGE, Date(year, 1, 1), Date(year, 12, 31))
        year_month = _YEAR_MONTH.fullmatch(single)
        if year_month:
            year, month = int(year_month[1]), int(year_month[2])
            # whether the 31st exists doesn't matter for a comparison
            return cls(DateFilterKind.RANGE, Date(year, month, 1), Date(year, month, 31))
        return cls(
            DateFilterKind.PRECISE,
            Date.with_implicit(single, default_year, default_month),
        )

    def contains(self, candidate: Date) -> bool:
        if self.kind is DateFilterKind.AFTER:
            return self.date < candidate
        if self.kind is DateFilterKind.BEFORE:
            return self.date > candidate
        if self.kind is DateFilterKind.NOT:
            return self.date != candidate
        if self.kind is DateFilterKind.PRECISE:
            return self.date == candidate
        return self.date <= candidate <= self.end