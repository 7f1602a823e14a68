from nfaregex.compiler import from_ast
from nfaregex.matcher import Match, epsilon_closure, find, find_all, step
from nfaregex.parser import parse


def _compile(pattern):
    return from_ast(parse(pattern))


def test_greedy_find():
    assert find(_compile("a*"), "aaa") == Match(0, 3)


def test_qmark_find():
    assert find_all(_compile("(ab)?"), "ab") == [Match(0, 2), Match(2, 2)]


def test_plus_find():
    assert find_all(_compile("(ab)+"), "ab abab") == [Match(0, 2), Match(3, 7)]


def test_find_escaped():
    assert find_all(_compile("a/*"), "a*") == [Match(0, 2)]


def test_find_all():
    assert find_all(_compile("ab"), "ab ab ab") == [Match(0, 2), Match(3, 5), Match(6, 8)]


def test_find_returns_none_without_match():
    assert find(_compile("ab"), "xyz") is None


def test_find_all_empty_without_match():
    assert find_all(_compile("ab"), "xyz") == []


def test_find_skips_leading_text():
    assert find(_compile("b+"), "aabbb") == Match(2, 5)


def test_dot_matches_any_character():
    assert find_all(_compile("a.c"), "abc a-c") == [Match(0, 3), Match(4, 7)]


def test_alternation_match():
    assert find_all(_compile("cat|dog"), "dog cat") == [Match(0, 3), Match(4, 7)]


def test_epsilon_closure_of_star_start_includes_accept():
    nfa = _compile("a*")
    assert nfa.accept in epsilon_closure(nfa, [nfa.start])


def test_epsilon_closure_of_literal_start_is_itself():
    nfa = _compile("a")
    assert epsilon_closure(nfa, [nfa.start]) == {nfa.start}


def test_step_on_literal():
    nfa = _compile("a")
    start = epsilon_closure(nfa, [nfa.start])
    assert step(nfa, start, "a") == {nfa.accept}
    assert step(nfa, start, "b") == set()


def test_match_is_frozen_value():
    assert Match(1, 2) == Match(1, 2)
    assert {Match(1, 2), Match(1, 2)} == {Match(1, 2)}