"""Shared pieces for the line matchers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from pepino.location import SourceLocation
from pepino.tokens import LineSpan, Token, TokenType

if TYPE_CHECKING:
    from pepino.lexer.result import MatchResult
    from pepino.lexer.state import MatcherState
    from pepino.line import Line

# A matcher: (line, state) -> result carrying the next state
Matcher: TypeAlias = "Callable[[Line, MatcherState], MatchResult]"


def new_token(
    line: Line,
    state: MatcherState,
    token_type: TokenType,
    index: int,
    *,
    keyword: str | None = None,
    text: str | None = None,
    items: tuple[LineSpan, ...] = (),
) -> Token:
    """Create a token located at 0-based ``index`` of ``line``.

    The token records the language of the dialect active in ``state``
    and the source file the state belongs to.
    """
    return Token(
        type=token_type,
        location=SourceLocation(line.line_number, index + 1, state.source_file),
        keyword=keyword,
        text=text,
        items=items,
        dialect=state.language,
        line=line,
    )
