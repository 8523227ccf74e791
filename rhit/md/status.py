"""Printing of the HTTP status codes."""

from __future__ import annotations

from typing import Any, Sequence

from rhit.md.printer import Printer, to_percent
from rhit.md.section import Section, View
from rhit.trend_computer import TrendComputer


def print_status_codes(
    log_lines: Sequence[Any],
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    if printer.detail_level == 0:
        _print_status_summary(log_lines, printer)
        return
    section = Section(
        groups_name="HTTP status codes",
        group_key="status",
        view=View(),
        changes=False,
    )
    printer.print_groups(
        section,
        log_lines,
        lambda _: True,
        lambda line: line.status,
        trend_computer,
    )


def _print_status_summary(log_lines: Sequence[Any], printer: Printer) -> None:
    counts = {"2xx": 0, "3xx": 0, "4xx": 0, "5xx": 0}
    for line in log_lines:
        if 200 <= line.status <= 299:
            counts["2xx"] += 1
        elif 300 <= line.status <= 399:
            counts["3xx"] += 1
        elif 400 <= line.status <= 499:
            counts["4xx"] += 1
        else:
            counts["5xx"] += 1
    total = len(log_lines)
    printer.print_table(
        "HTTP status codes:",
        [(name, "center") for name in counts],
        [[to_percent(count, total) for count in counts.values()]],
    )