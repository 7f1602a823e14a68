"""Thompson construction of an NFA from a syntax tree."""

from __future__ import annotations

from .ast import Alternate, Concat, Dot, KleeneStar, Literal, Plus, Qmark, RegexAst
from .nfa import (
    NFA,
    AnyTransition,
    CharTransition,
    EpsilonTransition,
    NfaFragment,
    State,
    Transition,
)


def from_ast(ast: RegexAst) -> NFA:
    """Build an NFA recognising the language of ``ast``."""
    builder = _NfaBuilder()
    fragment = builder.build(ast)
    return NFA(states=builder.states, start=fragment.start, accept=fragment.accept)


class _NfaBuilder:
    def __init__(self) -> None:
        self.states: list[State] = []

    def _add_state(self) -> int:
        self.states.append(State())
        return len(self.states) - 1

    def _link(self, source: int, transition: Transition) -> None:
        self.states[source].transitions.append(transition)

    def _single(self, make: "type[AnyTransition] | None", char: str | None = None) -> NfaFragment:
        start = self._add_state()
        accept = self._add_state()
        if char is None:
            self._link(start, AnyTransition(accept))
        else:
            self._link(start, CharTransition(char, accept))
        return NfaFragment(start, accept)

    def build(self, ast: RegexAst) -> NfaFragment:
        match ast:
            case Literal(char=char):
                return self._single(CharTransition, char)
            case Dot():
                return self._single(AnyTransition)
            case Concat(left=a, right=b):
                left = self.build(a)
                right = self.build(b)
                self._link(left.accept, EpsilonTransition(right.start))
                return NfaFragment(left.start, right.accept)
            case Alternate(left=a, right=b):
                start = self._add_state()
                left = self.build(a)
                right = self.build(b)
                accept = self._add_state()
                self._link(start, EpsilonTransition(left.start))
                self._link(start, EpsilonTransition(right.start))
                self._link(left.accept, EpsilonTransition(accept))
                self._link(right.accept, EpsilonTransition(accept))
                return NfaFragment(start, accept)
            case KleeneStar(inner=a):
                start = self._add_state()
                inner = self.build(a)
                accept = self._add_state()
                self._link(start, EpsilonTransition(inner.start))
                self._link(start, EpsilonTransition(accept))
                self._link(inner.accept, EpsilonTransition(inner.start))
                self._link(inner.accept, EpsilonTransition(accept))
                return NfaFragment(start, accept)
            case Plus(inner=a):
                start = self._add_state()
                inner = self.build(a)
                accept = self._add_state()
                self._link(start, EpsilonTransition(inner.start))
                self._link(inner.accept, EpsilonTransition(inner.start))
                self._link(inner.accept, EpsilonTransition(accept))
                return NfaFragment(start, accept)
            case Qmark(inner=a):
                start = self._add_state()
                inner = self.build(a)
                accept = self._add_state()
                self._link(start, EpsilonTransition(inner.start))
                self._link(start, EpsilonTransition(accept))
                self._link(inner.accept, EpsilonTransition(accept))
                return NfaFragment(start, accept)
        raise TypeError(f"not a regex syntax tree node: {ast!r}")