"""Keyword matchers: title lines and step lines.

Both take the first keyword of the active dialect's list that fits the
line, in list order. A later, longer keyword never wins over an earlier
one that also fits; dialect tables order their keywords accordingly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pepino.constants import TITLE_KEYWORD_SEPARATOR
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def match_title_line(
    line: Line,
    state: MatcherState,
    token_type: TokenType,
    keywords: Sequence[str],
) -> MatchResult:
    """Match ``Keyword: title`` for the first fitting keyword.

    Args:
        line: Line to classify
        state: Current matcher state
        token_type: Type of the token to emit on a match
        keywords: Candidate keywords, in dialect order

    Returns:
        MATCH with the keyword and the trimmed title, or NO_MATCH.
    """
    for keyword in keywords:
        if line.starts_with_title_keyword(keyword):
            title = line.get_rest_trimmed(len(keyword) + len(TITLE_KEYWORD_SEPARATOR))
            token = new_token(
                line, state, token_type, line.indent, keyword=keyword, text=title
            )
            return MatchResult.match(token, state)
    return MatchResult.no_match(state)


def match_feature_line(line: Line, state: MatcherState) -> MatchResult:
    return match_title_line(
        line, state, TokenType.FEATURE_LINE, state.dialect.feature_keywords
    )


def match_background_line(line: Line, state: MatcherState) -> MatchResult:
    return match_title_line(
        line, state, TokenType.BACKGROUND_LINE, state.dialect.background_keywords
    )


def match_scenario_line(line: Line, state: MatcherState) -> MatchResult:
    return match_title_line(
        line, state, TokenType.SCENARIO_LINE, state.dialect.scenario_keywords
    )


def match_scenario_outline_line(line: Line, state: MatcherState) -> MatchResult:
    return match_title_line(
        line,
        state,
        TokenType.SCENARIO_OUTLINE_LINE,
        state.dialect.scenario_outline_keywords,
    )


def match_examples_line(line: Line, state: MatcherState) -> MatchResult:
    return match_title_line(
        line, state, TokenType.EXAMPLES_LINE, state.dialect.examples_keywords
    )


def match_step_line(line: Line, state: MatcherState) -> MatchResult:
    """Match a line starting with any step keyword (no separator needed).

    Step keywords usually carry their own trailing space ("Given "), and
    some end in an apostrophe ("Lorsqu'"), so the text is whatever follows
    the keyword's exact length, trimmed.
    """
    for keyword in state.dialect.step_keywords:
        if line.starts_with(keyword):
            text = line.get_rest_trimmed(len(keyword))
            token = new_token(
                line, state, TokenType.STEP_LINE, line.indent, keyword=keyword, text=text
            )
            return MatchResult.match(token, state)
    return MatchResult.no_match(state)
