"""Data types describing a nondeterministic finite automaton."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class CharTransition:
    """Move to ``target`` on reading exactly ``char``."""

    char: str
    target: int


@dataclass(frozen=True)
class AnyTransition:
    """Move to ``target`` on reading any character."""

    target: int


@dataclass(frozen=True)
class EpsilonTransition:
    """Move to ``target`` without reading input."""

    target: int


Transition = Union[CharTransition, AnyTransition, EpsilonTransition]


@dataclass
class State:
    """An automaton state with its outgoing transitions."""

    transitions: list[Transition] = field(default_factory=list)


@dataclass
class NFA:
    """An automaton with a single start and a single accepting state."""

    states: list[State]
    start: int
    accept: int


@dataclass(frozen=True)
class NfaFragment:
    """Start and accept state indices of a partially built automaton."""

    start: int
    accept: int