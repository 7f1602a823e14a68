import pytest

from nfaregex.compiler import from_ast
from nfaregex.nfa import AnyTransition, CharTransition, EpsilonTransition
from nfaregex.parser import UnexpectedChar, UnexpectedEnd, UnmatchedParen, parse


def _epsilon_count(nfa):
    return sum(
        isinstance(t, EpsilonTransition) for state in nfa.states for t in state.transitions
    )


def test_builds_concat_nfa():
    nfa = from_ast(parse("ab"))
    assert len(nfa.states) == 4
    first = nfa.states[0].transitions[0]
    assert isinstance(first, CharTransition) and first.char == "a"
    assert isinstance(nfa.states[1].transitions[0], EpsilonTransition)
    third = nfa.states[2].transitions[0]
    assert isinstance(third, CharTransition) and third.char == "b"
    assert nfa.start == 0
    assert nfa.accept == 3


def test_builds_kleene_star_nfa():
    nfa = from_ast(parse("a*"))
    assert _epsilon_count(nfa) >= 3


def test_builds_qmark_nfa():
    nfa = from_ast(parse("a?"))
    assert _epsilon_count(nfa) >= 2


def test_builds_dot_nfa():
    nfa = from_ast(parse("."))
    assert len(nfa.states) == 2
    transition = nfa.states[0].transitions[0]
    assert isinstance(transition, AnyTransition)
    assert transition.target == nfa.accept == 1
    assert nfa.start == 0


def test_builds_alternate_nfa():
    nfa = from_ast(parse("a|b"))
    assert len(nfa.states) >= 6
    assert _epsilon_count(nfa) >= 4


def test_accept_state_has_no_transitions():
    nfa = from_ast(parse("(a|b)*c+"))
    assert nfa.states[nfa.accept].transitions == []


def test_all_targets_are_valid_states():
    nfa = from_ast(parse("(ab|.)?x*"))
    targets = [t.target for state in nfa.states for t in state.transitions]
    assert all(0 <= target < len(nfa.states) for target in targets)


def test_rejects_non_ast():
    with pytest.raises(TypeError):
        from_ast("ab")


def test_handles_unexpected_char_error():
    with pytest.raises(UnexpectedChar) as info:
        parse("*a")
    assert info.value.char == "*"


def test_handles_unmatched_paren_error():
    with pytest.raises(UnmatchedParen):
        parse("(ab")


def test_handles_empty_alternation_error():
    with pytest.raises(UnexpectedEnd):
        parse("a|")