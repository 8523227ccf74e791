"""Imprecise calendar dates as found in nginx access logs."""

from __future__ import annotations

import re
from dataclasses import dataclass

MONTHS_3_LETTERS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_UINT = re.compile(r"\+?[0-9]+")
_U8_MAX = 0xFF
_U16_MAX = 0xFFFF


class DateParseError(ValueError):
    """Raised when a date can't be parsed or is invalid."""


def _parse_uint(text: str, max_value: int) -> int:
    if not _UINT.fullmatch(text):
        raise DateParseError("expected int")
    value = int(text)
    if value > max_value:
        raise DateParseError("expected int")
    return value


@dataclass(frozen=True, order=True)
class Date:
    """A day, only meaningful in the timezone of the log files."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 31:
            raise DateParseError(f"invalid day {self.day}")
        if not 1 <= self.month <= 12:
            raise DateParseError(f"invalid month {self.month}")

    @classmethod
    def from_nginx(cls, s: str) -> Date:
        """Parse the date part of an nginx datetime.

        Accepts the common log format (``10/Jan/2021:10:27:01 +0000``)
        and ISO 8601 (``1977-04-22T01:00:00-05:00``).
        """
        if len(s) < 11:
            raise DateParseError("unexpected end")
        try:
            year = _parse_uint(s[0:4], _U16_MAX)
        except DateParseError:
            day = _parse_uint(s[0:2], _U8_MAX)
            month_name = s[3:6]
            try:
                month = MONTHS_3_LETTERS.index(month_name) + 1
            except ValueError:
                raise DateParseError(f"unrecognized month {s!r}") from None
            year = _parse_uint(s[7:11], _U16_MAX)
            return cls(year, month, day)
        month = _parse_uint(s[5:7], _U8_MAX)
        day = _parse_uint(s[8:10], _U8_MAX)
        return cls(year, month, day)

    @classmethod
    def with_implicit(
        cls,
        s: str,
        default_year: int | None,
        default_month: int | None,
    ) -> Date:
        """Parse a ``/`` separated numeric date whose leading parts may be implicit."""
        parts = s.split("/")
        if len(parts) >= 3:
            year, month, day = parts[:3]
            return cls(
                _parse_uint(year, _U16_MAX),
                _parse_uint(month, _U8_MAX),
                _parse_uint(day, _U8_MAX),
            )
        if len(parts) == 2:
            if default_year is None:
                raise DateParseError(f"date is ambiguous in context {s!r}")
            month, day = parts
            return cls(default_year, _parse_uint(month, _U8_MAX), _parse_uint(day, _U8_MAX))
        if default_year is None or default_month is None:
            raise DateParseError(f"date is ambiguous in context {s!r}")
        return cls(default_year, default_month, _parse_uint(parts[0], _U8_MAX))

    def __str__(self) -> str:
        return f"{self.year}/{self.month:02}/{self.day:02}"


def unique_year_month(start_date: Date, end_date: Date) -> tuple[int | None, int | None]:
    """Return the year and month shared by both dates, where there is one."""
    if start_date.year != end_date.year:
        return None, None
    if start_date.month != end_date.month:
        return start_date.year, None
    return start_date.year, start_date.month