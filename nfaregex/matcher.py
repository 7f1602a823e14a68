"""Simulation of an NFA over text to find greedy matches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .nfa import NFA, AnyTransition, CharTransition, EpsilonTransition


@dataclass(frozen=True)
class Match:
    """A match spanning character positions ``start`` to ``end`` (exclusive)."""

    start: int
    end: int


def epsilon_closure(nfa: NFA, states: Iterable[int]) -> set[int]:
    """Return every state reachable from ``states`` by epsilon moves alone."""
    visited: set[int] = set()
    stack = list(states)
    while stack:
        state = stack.pop()
        if state in visited:
            continue
        visited.add(state)
        stack.extend(
            t.target
            for t in nfa.states[state].transitions
            if isinstance(t, EpsilonTransition)
        )
    return visited


def step(nfa: NFA, current: Iterable[int], char: str) -> set[int]:
    """Return the closed set of states reached from ``current`` on ``char``."""
    following: set[int] = set()
    for state in current:
        for t in nfa.states[state].transitions:
            if isinstance(t, AnyTransition) or (
                isinstance(t, CharTransition) and t.char == char
            ):
                following |= epsilon_closure(nfa, [t.target])
    return following


def _match_end(nfa: NFA, text: str, start: int) -> Optional[int]:
    current = epsilon_closure(nfa, [nfa.start])
    matched: Optional[int] = None
    for position, char in enumerate(text[start:], start + 1):
        current = step(nfa, current, char)
        if not current:
            break
        if nfa.accept in current:
            matched = position
    if matched is None and nfa.accept in current:
        matched = start
    return matched


def find(nfa: NFA, text: str) -> Optional[Match]:
    """Return the leftmost greedy match in ``text``, or None."""
    for start in range(len(text) + 1):
        end = _match_end(nfa, text, start)
        if end is not None:
            return Match(start, end)
    return None


def find_all(nfa: NFA, text: str) -> list[Match]:
    """Return all successive non-overlapping greedy matches in ``text``."""
    results: list[Match] = []
    index = 0
    while index <= len(text):
        end = _match_end(nfa, text, index)
        if end is None:
            index += 1
            continue
        results.append(Match(index, end))
        index = index + 1 if end == index else end
    return results