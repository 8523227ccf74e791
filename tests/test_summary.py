import io

from rich.console import Console

from rhit.date import Date
from rhit.filters.filterer import Filter, FilterField, Filterer, Filtering
from rhit.filters.status_filter import StatusFilter
from rhit.histogram import Bar, Histogram, fit_4
from rhit.md.printer import Printer
from rhit.md.skin import make_skin
from rhit.md.summary import print_summary
from rhit.nginx_log.log_base import LogBase


def make_printer():
    out = io.StringIO()
    console = Console(file=out, width=200, color_system=None, highlight=False)
    return Printer(console=console, skin=make_skin(False)), out


def make_base(filterings):
    dates = [Date(2021, 1, 1), Date(2021, 1, 3)]
    unfiltered = Histogram([Bar(dates[0], 3, 300), Bar(dates[1], 1, 50)])
    filtered = Histogram([Bar(dates[0], 2, 200), Bar(dates[1], 1, 50)])
    return LogBase(
        dates=dates,
        filterer=Filterer(dates[0], filterings),
        lines=[],
        filtered_histogram=filtered,
        filtered_count=filtered.total_hits(),
        unfiltered_histogram=unfiltered,
        unfiltered_count=unfiltered.total_hits(),
    )


def test_summary_without_filters():
    printer, out = make_printer()
    print_summary(make_base([]), printer)
    text = out.getvalue()
    assert "4 hits and " + fit_4(350) in text
    assert "from 2021/01/01 to 2021/01/03" in text
    assert "Filtering" not in text
    assert "==>" not in text


def test_summary_with_filters():
    filtering = Filtering(
        "4xx",
        Filter(FilterField.STATUS, StatusFilter.parse("4xx")),
        removed_count=1,
    )
    printer, out = make_printer()
    print_summary(make_base([filtering]), printer)
    text = out.getvalue()
    assert "Filtering by status on pattern 4xx removed 25.00% of total lines" in text
    assert "==> hits: 3, bytes sent: " + fit_4(250) in text