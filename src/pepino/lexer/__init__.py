"""Line-oriented lexer for scenario files.

This package turns physical lines into typed tokens for a downstream
grammar. The matchers are pure functions over (line, state); the
stateful pieces only thread that state along.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, TokenMatcher, MatcherState
├── core.py              # TokenMatcher (state owner) + Lexer (line scanner)
├── state.py             # MatcherState value, DocStringState enum
├── result.py            # MatchOutcome / MatchResult tagged result
└── matchers/            # One module per line shape
    ├── simple.py        # EOF, empty, comment, other
    ├── tags.py          # @tag lines
    ├── keywords.py      # Title lines and step lines
    ├── docstring.py     # \"\"\" and ``` fences
    ├── table.py         # | cell | rows
    └── language.py      # # language: directives

Usage:
    >>> from pepino.lexer import Lexer
    >>> for token in Lexer("Feature: Login\\n").tokenize():
    ...     print(token)
Token(FEATURE_LINE, 'Login', 1:1)
Token(EOF, '', 2:1)

"""

from pepino.lexer.core import Lexer, TokenMatcher, split_lines
from pepino.lexer.result import MatchOutcome, MatchResult
from pepino.lexer.state import DocStringState, MatcherState

__all__ = [
    "DocStringState",
    "Lexer",
    "MatchOutcome",
    "MatchResult",
    "MatcherState",
    "TokenMatcher",
    "split_lines",
]
