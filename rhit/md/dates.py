"""Printing of the histogram of hits per day."""

from __future__ import annotations

from rich.text import Text

from rhit.histogram import Histogram, fit_4
from rhit.key import Key
from rhit.md.printer import Printer

_BAR_WIDTH = 20
_H_CHARS = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉")


def _progress_bar(part: float, width: int) -> str:
    units = round(max(0.0, min(1.0, part)) * width * 8)
    full, rest = divmod(units, 8)
    return ("█" * full + _H_CHARS[rest]).ljust(width)


def print_histogram(histogram: Histogram, printer: Printer) -> None:
    """Print hits and bytes per day, with a bar for the key."""

    def value(bar):
        return bar.hits if printer.key is Key.HITS else bar.bytes_sent

    max_bar = max(value(bar) for bar in histogram.bars)
    scale = f"0               {fit_4(max_bar):>4}"
    rows = []
    for bar in histogram.bars:
        if printer.date_filter is not None and not printer.date_filter.contains(bar.date):
            continue
        part = value(bar) / max_bar if max_bar else 0.0
        rows.append([
            str(bar.date),
            printer.render(printer.md_hits(bar.hits)),
            printer.render(printer.md_bytes(bar.bytes_sent)),
            Text(_progress_bar(part, _BAR_WIDTH), style=printer.skin.italic),
        ])
    columns = [
        ("date", "center"),
        ("hits", "center"),
        ("bytes", "right"),
        (scale, "left"),
    ]
    printer.print_table(None, columns, rows)