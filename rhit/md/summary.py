"""Printing of the summary of the loaded hits and of the filterings."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from rhit.md.printer import Printer


def _removed_percent(removed: int, total: int) -> str:
    if total == 0:
        return "NaN%"
    return f"{100 * removed / total:.2f}%"


def print_summary(base: Any, printer: Printer) -> None:
    skin = printer.skin
    total_bytes = base.unfiltered_histogram.total_bytes_sent()
    head = Text()
    head.append_text(printer.render(printer.md_hits(base.unfiltered_count)))
    head.append(" hits and ")
    head.append_text(printer.render(printer.md_bytes(total_bytes)))
    head.append(" from ")
    head.append(str(base.start_time()), style=skin.bold)
    head.append(" to ")
    head.append(str(base.end_time()), style=skin.bold)
    printer.console.print(head)
    if not base.filterer.has_filters():
        return
    for filtering in base.filterer.filterings:
        line = Text(f"Filtering by {filtering.filter.field_name()} on pattern ")
        line.append(filtering.pattern, style=skin.code)
        line.append(" removed ")
        line.append(
            _removed_percent(filtering.removed_count, base.unfiltered_count),
            style=skin.bold,
        )
        line.append(" of total lines")
        printer.console.print(line)
    filtered_bytes = base.filtered_histogram.total_bytes_sent()
    stats = Text(" ")
    stats.append("==>", style=skin.bold)
    stats.append(" hits: ")
    stats.append_text(printer.render(printer.md_hits(base.filtered_count)))
    stats.append(", bytes sent: ")
    stats.append_text(printer.render(printer.md_bytes(filtered_bytes)))
    printer.console.print(stats)