"""Syntax tree nodes for regular expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Dot:
    """Matches any single character."""


@dataclass(frozen=True)
class Literal:
    """Matches exactly one given character."""

    char: str


@dataclass(frozen=True)
class Concat:
    """Matches ``left`` followed by ``right``."""

    left: "RegexAst"
    right: "RegexAst"


@dataclass(frozen=True)
class Alternate:
    """Matches either ``left`` or ``right``."""

    left: "RegexAst"
    right: "RegexAst"


@dataclass(frozen=True)
class KleeneStar:
    """Matches ``inner`` zero or more times."""

    inner: "RegexAst"


@dataclass(frozen=True)
class Plus:
    """Matches ``inner`` one or more times."""

    inner: "RegexAst"


@dataclass(frozen=True)
class Qmark:
    """Matches ``inner`` zero or one time."""

    inner: "RegexAst"


RegexAst = Union[Dot, Literal, Concat, Alternate, KleeneStar, Plus, Qmark]