"""Filtering of strings with regular expressions combined by boolean operators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


class StrFilterParseError(ValueError):
    """Raised when a string filter pattern is invalid."""


class _Op(Enum):
    AND = "&"
    OR = "|"
    NOT = "!"


class _Tok(Enum):
    ATOM = "atom"
    OPERATOR = "operator"
    OPEN = "("
    CLOSE = ")"


@dataclass(frozen=True)
class _Atom:
    regex: re.Pattern[str]

    def matches(self, candidate: str) -> bool:
        return self.regex.search(candidate) is not None


@dataclass(frozen=True)
class _Not:
    operand: _Node

    def matches(self, candidate: str) -> bool:
        return not self.operand.matches(candidate)


@dataclass(frozen=True)
class _Binary:
    op: _Op
    left: _Node
    right: _Node

    def matches(self, candidate: str) -> bool:
        if self.op is _Op.AND:
            return self.left.matches(candidate) and self.right.matches(candidate)
        return self.left.matches(candidate) or self.right.matches(candidate)


_Node = Union[_Atom, _Not, _Binary]


def _invalid(pattern: str, reason: str) -> StrFilterParseError:
    return StrFilterParseError(f"invalid pattern {pattern!r} : {reason}")


def _compile(source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as e:
        raise StrFilterParseError(f"invalid regex {source!r}: {e}") from e


def _tokenize(pattern: str) -> list[tuple[_Tok, object]]:
    tokens: list[tuple[_Tok, object]] = []
    depth = 0
    for i, c in enumerate(pattern):
        nxt = pattern[i + 1] if i + 1 < len(pattern) else None
        prev = pattern[i - 1] if i > 0 else None
        last = tokens[-1][0] if tokens else None
        expects_operand = last in (None, _Tok.OPERATOR, _Tok.OPEN)
        follows_operand = last in (_Tok.ATOM, _Tok.CLOSE)
        if c == "(" and nxt == " ":
            if not expects_operand:
                raise _invalid(pattern, "unexpected opening parenthesis")
            tokens.append((_Tok.OPEN, None))
            depth += 1
        elif c == ")" and prev == " ":
            if depth == 0 or not follows_operand:
                raise _invalid(pattern, "unexpected closing parenthesis")
            tokens.append((_Tok.CLOSE, None))
            depth -= 1
        elif c in "&|" and nxt == " ":
            if not follows_operand:
                raise _invalid(pattern, f"unexpected {c!r}")
            tokens.append((_Tok.OPERATOR, _Op(c)))
        elif c == "!" and expects_operand:
            tokens.append((_Tok.OPERATOR, _Op.NOT))
        elif c == " ":
            continue
        elif last is _Tok.ATOM:
            tokens[-1] = (_Tok.ATOM, f"{tokens[-1][1]}{c}")
        elif last is _Tok.CLOSE:
            raise _invalid(pattern, "unexpected atom after closing parenthesis")
        else:
            tokens.append((_Tok.ATOM, c))
    return tokens


def _build(tokens: list[tuple[_Tok, object]]) -> _Node | None:
    """Build the expression tree, operators being evaluated left to right.

    Returns None when the expression is empty or incomplete.
    """
    pos = 0

    def operand() -> _Node | None:
        nonlocal pos
        if pos >= len(tokens):
            return None
        kind, payload = tokens[pos]
        pos += 1
        if kind is _Tok.ATOM:
            return _Atom(payload)  # type: ignore[arg-type]
        if kind is _Tok.OPERATOR:
            inner = operand()
            return None if inner is None else _Not(inner)
        if kind is _Tok.OPEN:
            inner = expression()
            if pos < len(tokens) and tokens[pos][0] is _Tok.CLOSE:
                pos += 1
            return inner
        return None

    def expression() -> _Node | None:
        nonlocal pos
        left = operand()
        while left is not None and pos < len(tokens) and tokens[pos][0] is _Tok.OPERATOR:
            op = tokens[pos][1]
            pos += 1
            right = operand()
            if right is None:
                return None
            left = _Binary(op, left, right)  # type: ignore[arg-type]
        return left

    return expression()


@dataclass(frozen=True)
class StrFilter:
    """A boolean combination of regular expressions searched in a string."""

    expr: _Node | None

    @classmethod
    def parse(cls, pattern: str) -> StrFilter:
        if "," in pattern:
            return cls.with_comma_syntax(pattern)
        return cls.with_be_syntax(pattern)

    @classmethod
    def with_be_syntax(cls, pattern: str) -> StrFilter:
        """Parse an expression with parentheses, ``&``, ``|`` and ``!``.

        Example: ``dystroy & !( miaou | blog )``
        """
        tokens = [
            (kind, _compile(payload) if kind is _Tok.ATOM else payload)  # type: ignore[arg-type]
            for kind, payload in _tokenize(pattern)
        ]
        return cls(_build(tokens))

    @classmethod
    def with_comma_syntax(cls, pattern: str) -> StrFilter:
        """Parse a conjunction of patterns, each one optionally negated.

        Example: ``dystroy,!miaou``
        """
        expr: _Node | None = None
        for token in (t.strip() for t in pattern.split(",")):
            if not token:
                raise _invalid(pattern, "empty token")
            if token.startswith("!"):
                node: _Node = _Not(_Atom(_compile(token[1:])))
            else:
                node = _Atom(_compile(token))
            expr = node if expr is None else _Binary(_Op.AND, expr, node)
        return cls(expr)

    def accepts(self, candidate: str) -> bool:
        if self.expr is None:
            return False
        return self.expr.matches(candidate)