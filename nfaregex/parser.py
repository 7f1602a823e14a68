"""Recursive-descent parser turning a pattern string into a syntax tree."""

from __future__ import annotations

from typing import Iterator, Optional

from .ast import Alternate, Concat, Dot, KleeneStar, Literal, Plus, Qmark, RegexAst

_METACHARS = frozenset("*()|+?")
_ESCAPE = "/"


class ParseError(ValueError):
    """Raised when a pattern cannot be parsed."""


class UnexpectedEnd(ParseError):
    """The pattern ended where more input was required."""

    def __init__(self) -> None:
        super().__init__("unexpected end of pattern")


class UnexpectedChar(ParseError):
    """A metacharacter appeared where an atom was expected."""

    def __init__(self, char: str) -> None:
        super().__init__(f"unexpected character {char!r}")
        self.char = char


class UnmatchedParen(ParseError):
    """An opening parenthesis has no matching closing one."""

    def __init__(self) -> None:
        super().__init__("unmatched parenthesis")


def is_metachar(char: str) -> bool:
    """Return True if ``char`` has a special meaning in a pattern."""
    return char in _METACHARS


def parse(pattern: str) -> RegexAst:
    """Parse ``pattern`` into a syntax tree, raising ParseError on failure."""
    return _Parser(pattern).parse_expression()


class _Parser:
    def __init__(self, pattern: str) -> None:
        self._chars: Iterator[str] = iter(pattern)
        self._current: Optional[str] = None
        self._bump()

    def _bump(self) -> None:
        self._current = next(self._chars, None)

    def parse_expression(self) -> RegexAst:
        return self._parse_alternation()

    def _parse_alternation(self) -> RegexAst:
        left = self._parse_concat()
        while self._current == "|":
            self._bump()
            right = self._parse_concat()
            left = Alternate(left, right)
        return left

    def _parse_concat(self) -> RegexAst:
        parts: list[RegexAst] = []
        while self._current is not None and self._current not in ")|":
            parts.append(self._parse_repetition())
        if not parts:
            raise UnexpectedEnd()
        result = parts[0]
        for part in parts[1:]:
            result = Concat(result, part)
        return result

    def _parse_repetition(self) -> RegexAst:
        atom = self._parse_atom()
        while self._current == "*":
            self._bump()
            atom = KleeneStar(atom)
        while self._current == "?":
            self._bump()
            atom = Qmark(atom)
        while self._current == "+":
            self._bump()
            atom = Plus(atom)
        return atom

    def _parse_atom(self) -> RegexAst:
        current = self._current
        if current is None:
            raise UnexpectedEnd()
        if current == _ESCAPE:
            self._bump()
            escaped = self._current
            if escaped is None:
                raise UnexpectedEnd()
            self._bump()
            return Literal(escaped)
        if current == "(":
            self._bump()
            expression = self.parse_expression()
            if self._current != ")":
                raise UnmatchedParen()
            self._bump()
            return expression
        if current == ".":
            self._bump()
            return Dot()
        if is_metachar(current):
            raise UnexpectedChar(current)
        self._bump()
        return Literal(current)