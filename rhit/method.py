"""HTTP methods."""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    HEAD = "HEAD"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"
    NONE = "none"  # bad request
    OTHER = "other"  # bad request or exotic method

    @classmethod
    def parse(cls, s: str) -> Method:
        if s == "":
            return cls.NONE
        try:
            return cls(s)
        except ValueError:
            return cls.OTHER

    def __str__(self) -> str:
        return self.value