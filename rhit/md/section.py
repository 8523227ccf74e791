"""How the tables related to a hit field are printed."""

from __future__ import annotations

from dataclasses import dataclass

FULL_VIEW_LIMIT = 100


@dataclass(frozen=True)
class View:
    """A full view (``max_rows`` is None) or one limited to some rows."""

    max_rows: int | None = None

    @property
    def is_full(self) -> bool:
        return self.max_rows is None

    def limit(self) -> int:
        return FULL_VIEW_LIMIT if self.max_rows is None else self.max_rows


@dataclass(frozen=True)
class Section:
    groups_name: str
    group_key: str
    view: View
    changes: bool  # whether tables of changes make sense