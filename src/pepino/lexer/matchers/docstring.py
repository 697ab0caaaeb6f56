"""Docstring fence matcher.

A docstring opens on a line starting with ``\"\"\"`` (or, failing that,
a backtick fence) and closes only on a line starting with the same
literal. While open, the other literal is plain content.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.constants import DOCSTRING_SEPARATORS
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def match_docstring_separator(line: Line, state: MatcherState) -> MatchResult:
    """Open or close a docstring.

    Opening records the fence literal and the line's indent (stripped from
    content lines by ``match_other``) and emits the text after the fence as
    the content type. Closing resets both.

    Trailing whitespace is deliberately dropped from the content type, so
    ``\"\"\"json  `` reports ``json`` rather than the verbatim remainder.
    """
    active = state.active_docstring_separator
    if active:
        if not line.starts_with(active):
            return MatchResult.no_match(state)
        token = new_token(line, state, TokenType.DOCSTRING_SEPARATOR, line.indent)
        return MatchResult.match(token, state.close_docstring())

    for separator in DOCSTRING_SEPARATORS:
        if line.starts_with(separator):
            content_type = line.trimmed_text[len(separator) :].rstrip()
            token = new_token(
                line, state, TokenType.DOCSTRING_SEPARATOR, line.indent, text=content_type
            )
            return MatchResult.match(token, state.open_docstring(separator, line.indent))
    return MatchResult.no_match(state)
