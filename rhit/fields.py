"""The tables that can be displayed, and parsing of their selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Field(Enum):
    DATES = "dates"
    METHODS = "methods"
    STATUS = "status"
    IP = "ip"
    REFERERS = "referers"
    PATHS = "paths"


DEFAULT_FIELDS = (Field.DATES, Field.STATUS, Field.REFERERS, Field.PATHS)

ALL_FIELDS = (
    Field.DATES,
    Field.METHODS,
    Field.STATUS,
    Field.IP,
    Field.REFERERS,
    Field.PATHS,
)

_FIELD_STARTS = {
    "d": Field.DATES,
    "s": Field.STATUS,
    "i": Field.IP,
    "r": Field.REFERERS,
    "p": Field.PATHS,
    "m": Field.METHODS,
}


@dataclass
class Fields:
    """An ordered selection of fields, without duplicates."""

    items: list[Field] = field(default_factory=list)

    @classmethod
    def default(cls) -> Fields:
        return cls(list(DEFAULT_FIELDS))

    @classmethod
    def all(cls) -> Fields:
        return cls(list(ALL_FIELDS))

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __iter__(self) -> Iterator[Field]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def remove(self, field: Field) -> None:
        self.items = [f for f in self.items if f != field]

    def add(self, field: Field) -> None:
        """Append a field, moving it to the end if already present."""
        self.remove(field)
        self.items.append(field)

    @classmethod
    def parse(cls, value: str) -> Fields:
        """Parse a selection such as ``ip,date``, ``+r-p`` or ``all-i``."""
        # a leading addition or removal implies the default set
        fields = cls.default() if value.startswith(("+", "-")) else cls()
        skip_alpha = False
        negative = False
        for ch in value:
            c = ch.lower() if ch.isascii() else ch
            if c in ("+", " ", ","):
                skip_alpha = False
                negative = False
            elif c == "-":
                skip_alpha = False
                negative = True
            elif skip_alpha:
                continue
            elif c == "a":
                fields = cls() if negative else cls.all()
                skip_alpha = True
            else:
                selected = _FIELD_STARTS.get(c)
                if selected is None:
                    raise ValueError(f"Unrecognized field start: {c}")
                if negative:
                    fields.remove(selected)
                else:
                    fields.add(selected)
                skip_alpha = True
        return fields