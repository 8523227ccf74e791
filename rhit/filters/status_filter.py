"""Filtering of hits on their HTTP status."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF

_CLASSES = {
    "2xx": (200, 299),
    "3xx": (300, 399),
    "4xx": (400, 499),
    "5xx": (500, 599),
}


class StatusFilterParseError(ValueError):
    """Raised when a status filter pattern is invalid."""


def _parse_status(text: str) -> int:
    if not _UINT.fullmatch(text) or int(text) > _U16_MAX:
        raise StatusFilterParseError(f"invalid int {text!r}")
    return int(text)


def _parse_range(s: str) -> tuple[int, int]:
    if s in _CLASSES:
        return _CLASSES[s]
    if "-" in s:
        low, high = s.split("-")[:2]
        return _parse_status(low), _parse_status(high)
    value = _parse_status(s)
    return value, value


def _ranges_contain(ranges: tuple[tuple[int, int], ...], status: int) -> bool:
    return any(low <= status <= high for low, high in ranges)


@dataclass(frozen=True)
class StatusFilter:
    """Status classes, ranges and exclusions, eg ``4xx,!404`` or ``402-417,503``."""

    include: tuple[tuple[int, int], ...] = ()
    exclude: tuple[tuple[int, int], ...] = ()

    @classmethod
    def parse(cls, value: str) -> StatusFilter:
        include: list[tuple[int, int]] = []
        exclude: list[tuple[int, int]] = []
        for token in value.split(","):
            if token.startswith("!"):
                exclude.append(_parse_range(token[1:]))
            else:
                include.append(_parse_range(token))
        return cls(tuple(include), tuple(exclude))

    def accepts(self, status: int) -> bool:
        if _ranges_contain(self.exclude, status):
            return False
        if not self.include:
            return True
        return _ranges_contain(self.include, status)