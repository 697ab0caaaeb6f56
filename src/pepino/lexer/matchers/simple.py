"""Stateless line classifiers: end of input, blank lines, comments, fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.constants import COMMENT_PREFIX
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def match_eof(line: Line, state: MatcherState) -> MatchResult:
    if not line.is_eof():
        return MatchResult.no_match(state)
    return MatchResult.match(new_token(line, state, TokenType.EOF, line.indent), state)


def match_empty(line: Line, state: MatcherState) -> MatchResult:
    if not line.is_empty():
        return MatchResult.no_match(state)
    return MatchResult.match(new_token(line, state, TokenType.EMPTY, line.indent), state)


def match_comment(line: Line, state: MatcherState) -> MatchResult:
    """Match a ``#`` line; the payload is the whole untrimmed line."""
    if not line.starts_with(COMMENT_PREFIX):
        return MatchResult.no_match(state)
    token = new_token(line, state, TokenType.COMMENT, 0, text=line.get_line_text(0))
    return MatchResult.match(token, state)


def match_other(line: Line, state: MatcherState) -> MatchResult:
    """Match any line. Must be tried last.

    Inside a docstring the text loses up to the opening fence's indent,
    so content lines are relative to the fence.
    """
    text = line.get_line_text(state.indent_to_remove)
    return MatchResult.match(new_token(line, state, TokenType.OTHER, 0, text=text), state)
