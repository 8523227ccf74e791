"""The set of filters applied to log lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from rhit.cli.args import Args
from rhit.date import Date, unique_year_month
from rhit.filters.date_filter import DateFilter
from rhit.filters.method_filter import MethodFilter
from rhit.filters.status_filter import StatusFilter
from rhit.filters.str_filter import StrFilter


class FilterField(Enum):
    """The field of a log line a filter applies to, valued by its display name."""

    DATE = "date"
    IP = "remote address"
    METHOD = "method"
    PATH = "path"
    REFERER = "referer"
    STATUS = "status"


Matcher = Union[DateFilter, MethodFilter, StatusFilter, StrFilter]


@dataclass(frozen=True)
class Filter:
    """A matcher applied to one field of log lines."""

    field: FilterField
    matcher: Matcher

    def accepts(self, line: Any) -> bool:
        m = self.matcher
        if self.field is FilterField.DATE:
            return m.contains(line.date)
        if self.field is FilterField.IP:
            return m.accepts(line.remote_addr)
        if self.field is FilterField.METHOD:
            return m.contains(line.method)
        if self.field is FilterField.PATH:
            return m.accepts(line.path)
        if self.field is FilterField.REFERER:
            return m.accepts(line.referer)
        return m.accepts(line.status)

    def field_name(self) -> str:
        return self.field.value


@dataclass
class Filtering:
    """A filter with the pattern it comes from and the count of lines it removed."""

    pattern: str
    filter: Filter
    removed_count: int = 0


@dataclass
class Filterer:
    first_date: Date
    filterings: list[Filtering] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: Args, first_date: Date, last_date: Date) -> Filterer:
        """Build the filters asked in the arguments.

        Raises a ValueError subclass when a pattern is invalid.
        """
        default_year, default_month = unique_year_month(first_date, last_date)
        builders = (
            (args.date, FilterField.DATE,
             lambda s: DateFilter.parse(s, default_year, default_month)),
            (args.ip, FilterField.IP, StrFilter.parse),
            (args.method, FilterField.METHOD, MethodFilter.parse),
            (args.path, FilterField.PATH, StrFilter.parse),
            (args.referer, FilterField.REFERER, StrFilter.parse),
            (args.status, FilterField.STATUS, StatusFilter.parse),
        )
        filterings = [
            Filtering(pattern, Filter(filter_field, build(pattern)))
            for pattern, filter_field, build in builders
            if pattern is not None
        ]
        return cls(first_date, filterings)

    def date_filter(self) -> DateFilter | None:
        return next(
            (f.filter.matcher for f in self.filterings if f.filter.field is FilterField.DATE),
            None,
        )

    def accepts(self, line: Any) -> bool:
        """Tell whether the line passes all filters, counting it on the first that rejects it."""
        for filtering in self.filterings:
            if not filtering.filter.accepts(line):
                filtering.removed_count += 1
                return False
        return True

    def has_filters(self) -> bool:
        return bool(self.filterings)