"""The key used for sorting and histograms."""

from __future__ import annotations

from enum import Enum


class Key(Enum):
    HITS = "hits"
    BYTES = "bytes"

    @classmethod
    def parse(cls, value: str) -> Key:
        lowered = value.lower()
        if lowered in ("h", "hit", "hits"):
            return cls.HITS
        if lowered in ("b", "byte", "bytes"):
            return cls.BYTES
        raise ValueError(f'Illegal value: "{value}"')