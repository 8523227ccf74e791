"""Printing of the HTTP methods of the hits."""

from __future__ import annotations

from typing import Any, Sequence

from rhit.md.printer import Printer
from rhit.md.section import Section, View
from rhit.trend_computer import TrendComputer


def print_methods(
    log_lines: Sequence[Any],
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    section = Section(
        groups_name="methods",
        group_key="method",
        view=View(),
        changes=False,
    )
    printer.print_groups(
        section,
        log_lines,
        lambda _: True,
        lambda line: line.method,
        trend_computer,
    )