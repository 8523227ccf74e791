"""Printing of the requested paths."""

from __future__ import annotations

from typing import Any, Sequence

from rhit.md.printer import Printer
from rhit.md.section import Section, View
from rhit.trend_computer import TrendComputer


def print_paths(
    log_lines: Sequence[Any],
    printer: Printer,
    trend_computer: TrendComputer | None,
) -> None:
    """Print the table(s) of the most requested paths."""
    limit = 10 if printer.detail_level == 0 else printer.detail_level * 50
    all_paths = printer.all_paths
    if all_paths:
        groups_name = "paths"
    else:
        groups_name = "paths (excluding resources like images, css, etc.)"

    def accept(line: Any) -> bool:
        return all_paths or not line.is_resource()

    section = Section(
        groups_name=groups_name,
        group_key="path",
        view=View(limit),
        changes=True,
    )
    printer.print_groups(
        section,
        log_lines,
        accept,
        lambda line: line.path,
        trend_computer,
    )