"""Filtering of hits on their HTTP method."""

from __future__ import annotations

from dataclasses import dataclass

from rhit.method import Method


@dataclass(frozen=True)
class MethodFilter:
    """Accepts one method, or every method but one when negative."""

    negative: bool
    method: Method

    @classmethod
    def parse(cls, pattern: str) -> MethodFilter:
        """Parse a method name, optionally preceded by ``!``."""
        negative = pattern.startswith("!")
        if negative:
            pattern = pattern[1:]
        return cls(negative, Method.parse(pattern))

    def contains(self, candidate: Method) -> bool:
        return (self.method != candidate) if self.negative else (self.method == candidate)