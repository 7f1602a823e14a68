# nfaregex

A compact regular expression engine. Patterns are parsed into a syntax
tree, compiled into a Thompson NFA, and matched by simulating the NFA
over the input text.

## Supported syntax

| Syntax  | Meaning                                    |
|---------|--------------------------------------------|
| `a`     | the literal character `a`                  |
| `.`     | any single character                       |
| `ab`    | concatenation                              |
| `a\|b`  | alternation                                |
| `a*`    | zero or more                               |
| `a+`    | one or more                                |
| `a?`    | zero or one                                |
| `(...)` | grouping                                   |
| `/c`    | escape: the character `c` taken literally  |

The characters `* ( ) | + ?` are special. Write `/` before one of them
to match it literally, so the pattern `a/*` matches the text `a*`. Any
character can follow `/`, so `/.` matches a literal dot.

Repetition operators after an atom are read in the order `*`, then `?`,
then `+`. So `a*?` and `a?+` parse, but `a?*` raises `UnexpectedChar`.

## Usage

```python
from nfaregex.parser import parse
from nfaregex.compiler import from_ast
from nfaregex.matcher import find, find_all

nfa = from_ast(parse("(ab)+"))

find(nfa, "xxabab")        # Match(start=2, end=6)
find_all(nfa, "ab abab")   # [Match(start=0, end=2), Match(start=3, end=7)]
```

`find` returns the leftmost match, made as long as possible, or `None`
when nothing matches. `find_all` returns every match that does not
overlap another, from left to right. It includes empty matches where the
pattern allows them. For example, `(ab)?` on `"ab"` gives `(0, 2)` and
`(2, 2)`. `Match.start` and `Match.end` are character positions, with
`end` exclusive.

## Modules

- `nfaregex.ast`: the syntax tree node dataclasses `Dot`, `Literal`,
  `Concat`, `Alternate`, `KleeneStar`, `Plus` and `Qmark`.
- `nfaregex.parser`: `parse(pattern)`, `is_metachar(char)` and the
  parse errors.
- `nfaregex.nfa`: the automaton types `NFA` (with `states`, `start`,
  `accept`), `State` (with `transitions`), `NfaFragment`, and the
  transitions `CharTransition`, `AnyTransition` and `EpsilonTransition`.
- `nfaregex.compiler`: `from_ast(ast)` builds an `NFA` from a syntax
  tree. It raises `TypeError` when given anything that is not a tree
  node.
- `nfaregex.matcher`: `Match`, `find`, `find_all`, and the simulation
  steps `epsilon_closure(nfa, states)` and `step(nfa, current, char)`.

## Errors

`parse` raises a subclass of `nfaregex.parser.ParseError`, itself a
`ValueError`, when a pattern is malformed:

- `UnexpectedEnd`: the pattern stops where more was expected, as in
  `a|`, an empty pattern, or a trailing `/`.
- `UnexpectedChar`: a special character appears where an atom was
  expected, as in `*a`. The offending character is in its `char`
  attribute.
- `UnmatchedParen`: a group is not closed, as in `(ab`.

```python
from nfaregex.parser import parse, UnmatchedParen

try:
    parse("(ab")
except UnmatchedParen:
    ...
```

Parsing stops at a `)` with no opening `(` to match it. The rest of the
pattern is ignored, so `a)b` parses as the single literal `a`.

## What it does not do

This is a library only. It has no command-line tool for searching files.
There are no anchors, character classes, counted repetition or capture
groups.

## Running the tests

```
pip install -e .[test]
pytest
```