"""Parsing of the lines of nginx access logs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rhit.date import Date, DateParseError
from rhit.method import Method

_UINT = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

RESOURCE_SUFFIXES = (
    ".png",
    ".css",
    ".svg",
    ".jpg",
    ".jpeg",
    ".gif",
    ".ico",
    ".js",
    ".woff2",
    ".webp",
)


class LogParseError(ValueError):
    """Raised when a line isn't a valid access log line."""


def _parse_uint(text: str, max_value: int) -> int:
    if not _UINT.fullmatch(text) or int(text) > max_value:
        raise LogParseError(f"expected int, got {text!r}")
    return int(text)


class Ranger:
    """Extracts successive delimited parts of a string."""

    def __init__(self, s: str) -> None:
        self._s = s
        self._next = 0  # index of the next character to scan
        self._pos = 0  # start of the next part
        self._last: str | None = None  # last delimiter found

    def _find(self, c: str, start: int) -> int:
        idx = self._s.find(c, start)
        if idx < 0:
            self._next = len(self._s)
            raise LogParseError(f"character not found {c!r}")
        return idx

    def until(self, end: str) -> str:
        """Return the text from the current position up to ``end``."""
        idx = self._find(end, self._next)
        start = self._pos
        self._pos = idx
        self._next = idx + 1
        self._last = end
        return self._s[start:idx]

    def between(self, start: str, end: str) -> str:
        """Return the text between the next ``start`` and the following ``end``.

        The last delimiter found may serve as ``start``.
        """
        if self._last == start:
            self._pos += 1
            return self.until(end)
        begin = self._find(start, self._next) + 1
        self._next = begin
        stop = self._find(end, begin)
        self._pos = stop
        self._next = stop + 1
        self._last = end
        return self._s[begin:stop]


@dataclass
class LogLine:
    """A hit, as described by a line of the access log."""

    remote_addr: str
    date: Date
    method: Method
    path: str
    status: int
    bytes_sent: int
    referer: str
    date_idx: int = 0

    @classmethod
    def parse(cls, s: str) -> LogLine:
        ranger = Ranger(s)
        remote_addr = ranger.until(" ")
        try:
            date = Date.from_nginx(ranger.between("[", "]"))
        except DateParseError as e:
            raise LogParseError(f"date parse error: {e}") from e
        request = ranger.between('"', '"').split(" ")
        if len(request) >= 2:
            method, path = Method.parse(request[0]), request[1]
        else:
            method, path = Method.NONE, request[0]
        status = _parse_uint(ranger.between(" ", " "), _U16_MAX)
        bytes_sent = _parse_uint(ranger.between(" ", " "), _U64_MAX)
        referer = ranger.between('"', '"')
        return cls(
            remote_addr=remote_addr,
            date=date,
            method=method,
            path=path.split("?")[0],
            status=status,
            bytes_sent=bytes_sent,
            referer=referer,
        )

    def is_resource(self) -> bool:
        """Tell whether the path looks like an image, a stylesheet, a script or a font."""
        return self.path.endswith(RESOURCE_SUFFIXES)