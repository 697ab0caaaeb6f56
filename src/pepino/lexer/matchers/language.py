"""Language directive matcher: ``# language: <code>``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.constants import LANGUAGE_PATTERN
from pepino.errors import UnsupportedLanguageError
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def match_language(line: Line, state: MatcherState) -> MatchResult:
    """Match a language directive and switch dialect.

    An unknown code still produces the LANGUAGE token, together with an
    UnsupportedLanguageError diagnostic; the dialect stays as it was.
    """
    found = LANGUAGE_PATTERN.match(line.trimmed_text)
    if found is None:
        return MatchResult.no_match(state)

    language = found.group(1)
    token = new_token(line, state, TokenType.LANGUAGE, line.indent, text=language)

    dialect = state.provider.get_dialect(language)
    if dialect is None:
        error = UnsupportedLanguageError(language, token.location)
        return MatchResult.match_with_diagnostic(token, state, error)
    return MatchResult.match(token, state.with_dialect(language, dialect))
