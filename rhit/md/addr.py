"""Printing of the remote addresses of the hits."""

from __future__ import annotations

from typing import Any, Sequence

from rhit.md.printer import Printer
from rhit.md.section import Section, View
from rhit.trend_computer import TrendComputer


def _limit(detail_level: int) -> int:
    if detail_level == 0:
        return 3
    if detail_level == 1:
        return 5
    return detail_level * 10


def print_remote_addresses(
    log_lines: Sequence[Any],
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    section = Section(
        groups_name="remote IP addresses",
        group_key="IP address",
        view=View(_limit(printer.detail_level)),
        changes=True,
    )
    printer.print_groups(
        section,
        log_lines,
        lambda _: True,
        lambda line: line.remote_addr,
        trend_computer,
    )