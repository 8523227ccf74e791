"""Styles used to render the small markdown snippets of the report."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

from rich.style import Style
from rich.text import Text

UP_CHAR = "➚"
DOWN_CHAR = "➘"

_INLINE = re.compile(r"\*\*(.+?)\*\*|\*(.+?)\*|`([^`]*)`")


@dataclass(frozen=True)
class Skin:
    header: Style = field(default_factory=Style)
    bold: Style = field(default_factory=Style)
    italic: Style = field(default_factory=Style)
    code: Style = field(default_factory=Style)
    special_chars: Mapping[str, tuple[str, Style]] = field(default_factory=dict)

    def render(self, md: str) -> Text:
        """Render inline markdown: ``**bold**``, ``*italic*`` and ```code```."""
        text = Text()
        pos = 0
        for m in _INLINE.finditer(md):
            text.append(md[pos : m.start()])
            bold, italic, code = m.groups()
            if bold is not None:
                text.append(bold, style=self.bold)
            elif italic is not None:
                text.append(italic, style=self.italic)
            elif code in self.special_chars:
                char, style = self.special_chars[code]
                text.append(char, style=style)
            else:
                text.append(code, style=self.code)
            pos = m.end()
        text.append(md[pos:])
        return text


def make_skin(color: bool) -> Skin:
    if color:
        return Skin(
            header=Style(color="color(178)", bold=True),
            bold=Style(color="yellow", bold=True),
            italic=Style(color="color(204)"),
            code=Style(color="yellow"),
            special_chars={
                "U": (UP_CHAR, Style(color="green")),
                "D": (DOWN_CHAR, Style(color="red")),
            },
        )
    return Skin(
        special_chars={
            "U": (UP_CHAR, Style()),
            "D": (DOWN_CHAR, Style()),
        },
    )