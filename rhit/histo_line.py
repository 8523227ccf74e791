"""Single-line bar charts made of block characters."""

from __future__ import annotations

import math
from typing import Iterable

V_CHARS = (" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")


def histo_line(counts: Iterable[int], max_count: int, full_height: bool) -> str:
    """Render counts as vertical bars relative to ``max_count``.

    Without full height the tallest bar keeps a margin with the line above.
    """
    if max_count == 0:
        return "".join(V_CHARS[0] for _ in counts)
    height = 8.0 if full_height else 7.0
    return "".join(
        V_CHARS[math.floor(height * count / max_count + 0.5)] for count in counts
    )