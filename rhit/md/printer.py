"""Printing of the report tables in the terminal."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rhit.fields import Fields
from rhit.filters.date_filter import DateFilter
from rhit.histogram import fit_4
from rhit.key import Key
from rhit.line_group import LineGroup
from rhit.md.section import Section
from rhit.md.skin import Skin, make_skin
from rhit.trend_computer import TrendComputer

Cell = "str | Text"


def to_percent(count: int, total: int) -> str:
    if total == 0:
        return "NaN%"
    return f"{100 * count / total:.1f}%"


def _group_lines(
    log_lines: Iterable[Any],
    accept: Callable[[Any], bool],
    grouper: Callable[[Any], Hashable],
) -> dict[Hashable, list[Any]]:
    groups: dict[Hashable, list[Any]] = {}
    for line in log_lines:
        if accept(line):
            groups.setdefault(grouper(line), []).append(line)
    return groups


@dataclass
class Printer:
    console: Console = field(default_factory=lambda: Console(highlight=False))
    skin: Skin = field(default_factory=lambda: make_skin(False))
    fields: Fields = field(default_factory=Fields.default)
    detail_level: int = 1
    key: Key = Key.HITS
    date_filter: DateFilter | None = None
    changes: bool = False
    all_paths: bool = False

    @classmethod
    def from_args(cls, args: Any, log_base: Any) -> Printer:
        color = args.color if args.color is not None else sys.stdout.isatty()
        console = Console(
            color_system="auto" if color else None,
            force_terminal=True if color else None,
            highlight=False,
        )
        return cls(
            console=console,
            skin=make_skin(color),
            fields=args.fields,
            detail_level=args.length,
            key=args.key,
            date_filter=log_base.filterer.date_filter(),
            changes=args.changes,
            all_paths=args.all,
        )

    def render(self, md: str) -> Text:
        return self.skin.render(md)

    def md_hits(self, hits: int) -> str:
        if self.key is Key.HITS:
            return f"*{hits:,}*"
        return f"{hits:,}"

    def md_bytes(self, bytes_sent: int) -> str:
        s = fit_4(bytes_sent)
        return s if self.key is Key.HITS else f"*{s}*"

    def print_table(
        self,
        title: str | None,
        columns: Sequence[tuple[str, str]],
        rows: Iterable[Sequence[str | Text]],
    ) -> None:
        """Print a table; columns are (header, justification), cells plain or Text."""
        table = Table(
            title=Text(title, style=self.skin.header) if title else None,
            title_justify="left",
            box=box.SQUARE,
            header_style=self.skin.bold,
        )
        for header, justify in columns:
            table.add_column(header, justify=justify)  # type: ignore[arg-type]
        for row in rows:
            table.add_row(*(c if isinstance(c, Text) else Text(str(c)) for c in row))
        self.console.print(table)

    def print_groups(
        self,
        section: Section,
        log_lines: Sequence[Any],
        accept: Callable[[Any], bool],
        grouper: Callable[[Any], Hashable],
        trend_computer: TrendComputer | None,
    ) -> None:
        if trend_computer is not None:
            self.print_groups_trends(section, log_lines, accept, grouper, trend_computer)
        else:
            self.print_groups_no_trends(section, log_lines, accept, grouper)

    def print_groups_no_trends(
        self,
        section: Section,
        log_lines: Sequence[Any],
        accept: Callable[[Any], bool],
        grouper: Callable[[Any], Hashable],
    ) -> None:
        groups = _group_lines(log_lines, accept, grouper)
        limit = section.view.limit()
        limited = ""
        if not section.view.is_full and len(groups) > limit:
            limited = f"{limit} most frequent:"
        title = f"{len(groups):,} {section.groups_name}. {limited}".rstrip()
        stats = []
        for value, lines in groups.items():
            bytes_sent = sum(line.bytes_sent for line in lines)
            key_sum = len(lines) if self.key is Key.HITS else bytes_sent
            stats.append((value, lines, bytes_sent, key_sum))
        stats.sort(key=lambda s: s[3], reverse=True)
        rows = [
            [
                str(idx),
                str(value),
                self.render(self.md_hits(len(lines))),
                to_percent(len(lines), len(log_lines)),
                self.render(self.md_bytes(bytes_sent)),
            ]
            for idx, (value, lines, bytes_sent, _) in enumerate(stats[:limit], start=1)
        ]
        columns = [
            ("#", "right"),
            (section.group_key, "left"),
            ("hits", "right"),
            ("%", "right"),
            ("bytes", "right"),
        ]
        self.print_table(title, columns, rows)

    def print_groups_trends(
        self,
        section: Section,
        log_lines: Sequence[Any],
        accept: Callable[[Any], bool],
        grouper: Callable[[Any], Hashable],
        trend_computer: TrendComputer,
    ) -> None:
        groups = [
            LineGroup(value, lines, trend_computer)
            for value, lines in _group_lines(log_lines, accept, grouper).items()
        ]
        limit = section.view.limit()
        if section.view.is_full:
            title = section.groups_name
        else:
            title = f"{len(groups):,} {section.groups_name}"
            if len(groups) > limit:
                title += f". {limit} most frequent:"
        popular = sorted(groups, key=lambda g: g.key_sum, reverse=True)[:limit]
        self.print_table_with_trends(title, section, popular, len(log_lines))
        if self.changes and section.changes and limit < len(log_lines):
            changes_limit = 5 if self.detail_level == 0 else self.detail_level * 10
            significant = [g for g in groups if g.hits() > 9]
            more_popular = sorted(significant, key=lambda g: g.trend, reverse=True)
            self.print_table_with_trends(
                f"More popular {section.groups_name}",
                section,
                more_popular[:changes_limit],
                len(log_lines),
            )
            less_popular = sorted(significant, key=lambda g: g.trend)
            self.print_table_with_trends(
                f"Less popular {section.groups_name}",
                section,
                less_popular[:changes_limit],
                len(log_lines),
            )

    def print_table_with_trends(
        self,
        title: str,
        section: Section,
        groups: Iterable[LineGroup],
        total_count: int,
    ) -> None:
        full = section.view.is_full
        rows = []
        for idx, g in enumerate(groups, start=1):
            trend = self.render(g.trend.markdown()) if g.hits() > 9 else Text("")
            row: list[str | Text] = [] if full else [str(idx)]
            row += [str(g.value), self.render(self.md_hits(g.hits()))]
            if full:
                row.append(to_percent(g.hits(), total_count))
            row += [
                self.render(self.md_bytes(g.bytes)),
                self.render(f"*{g.histo_line()}*"),
                trend,
            ]
            rows.append(row)
        if not rows:
            self.console.print(f"{title} : none", markup=False, highlight=False)
            return
        columns: list[tuple[str, str]] = [] if full else [("#", "right")]
        columns += [(section.group_key, "left"), ("hits", "right")]
        if full:
            columns.append(("%", "right"))
        columns += [("bytes", "right"), ("days", "right"), ("trend", "center")]
        self.print_table(title, columns, rows)