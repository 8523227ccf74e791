"""Printing of the tables of the report, in the order of the selected fields."""

from __future__ import annotations

from typing import Any

from rhit.fields import Field
from rhit.histogram import Histogram
from rhit.md.addr import print_remote_addresses
from rhit.md.dates import print_histogram
from rhit.md.methods import print_methods
from rhit.md.paths import print_paths
from rhit.md.printer import Printer
from rhit.md.referers import print_referers
from rhit.md.status import print_status_codes
from rhit.trend_computer import TrendComputer

_GROUP_PRINTERS = {
    Field.METHODS: print_methods,
    Field.STATUS: print_status_codes,
    Field.IP: print_remote_addresses,
    Field.REFERERS: print_referers,
    Field.PATHS: print_paths,
}


def print_analysis(
    base: Any,
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    """Print a table for each field selected in the printer."""
    if base.is_empty():
        return
    for field in printer.fields:
        if field is Field.DATES:
            print_histogram(Histogram.from_base(base), printer)
        else:
            _GROUP_PRINTERS[field](base.lines, printer, trend_computer)