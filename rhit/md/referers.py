"""Printing of the referrers of the hits."""

from __future__ import annotations

from typing import Any, Sequence

from rhit.md.printer import Printer
from rhit.md.section import Section, View
from rhit.trend_computer import TrendComputer


def _limit(detail_level: int) -> int:
    if detail_level == 0:
        return 5
    if detail_level == 1:
        return 10
    return detail_level * 20


def print_referers(
    log_lines: Sequence[Any],
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    section = Section(
        groups_name="referrers",
        group_key="referrer",
        view=View(_limit(printer.detail_level)),
        changes=True,
    )
    printer.print_groups(
        section,
        log_lines,
        lambda line: len(line.referer) > 1,
        lambda line: line.referer,
        trend_computer,
    )