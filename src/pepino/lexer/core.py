"""Token matcher and line scanner.

TokenMatcher owns the MatcherState of one document and threads it through
the matcher functions. Lexer splits source text into lines and asks the
matcher for one token per line, in priority order.

Thread Safety:
TokenMatcher and Lexer instances are single-use. Create one per document.
All state is instance-local; the dialect provider is shared read-only.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from pepino.config import LexConfig, get_lex_config
from pepino.constants import DEFAULT_DIALECT
from pepino.dialects import create_default_provider
from pepino.lexer.matchers import (
    DOCSTRING_PRIORITY,
    PRIORITY,
    Matcher,
    match_background_line,
    match_comment,
    match_docstring_separator,
    match_empty,
    match_eof,
    match_examples_line,
    match_feature_line,
    match_language,
    match_other,
    match_scenario_line,
    match_scenario_outline_line,
    match_step_line,
    match_table_row,
    match_tag_line,
)
from pepino.lexer.result import MatchResult
from pepino.lexer.state import DocStringState, MatcherState
from pepino.line import Line
from pepino.tokens import TokenType
from pepino.utils.logger import get_logger

if TYPE_CHECKING:
    from pepino.dialects import DialectProvider
    from pepino.errors import ParseError
    from pepino.tokens import Token

logger = get_logger(__name__)


class TokenMatcher:
    """Stateful front end over the matcher functions.

    Each ``match_*`` method runs one matcher against a line and, when it
    matches, keeps the returned state for the next call. ``match`` tries
    the matchers in priority order.

    Usage:
            >>> matcher = TokenMatcher()
            >>> result = matcher.match(Line("Scenario: Logging in", 0))
            >>> result.token.keyword, result.token.text
            ('Scenario', 'Logging in')

    """

    __slots__ = ("_provider", "_language", "_source_file", "_state")

    def __init__(
        self,
        provider: DialectProvider | None = None,
        language: str = DEFAULT_DIALECT,
        source_file: str | None = None,
    ) -> None:
        """Initialize matcher.

        Args:
            provider: Dialect provider (defaults to the built-in table)
            language: Dialect in effect until a language directive
            source_file: Path reported in token locations

        Raises:
            DialectError: If the provider lacks ``language``.
        """
        self._provider = provider if provider is not None else create_default_provider()
        self._language = language
        self._source_file = source_file
        self._state = MatcherState.initial(self._provider, language, source_file)

    @property
    def state(self) -> MatcherState:
        """State the next line will be matched against."""
        return self._state

    def reset(self) -> None:
        """Return to the start-of-document state."""
        self._state = MatcherState.initial(self._provider, self._language, self._source_file)

    def _apply(self, matcher: Matcher, line: Line) -> MatchResult:
        result = matcher(line, self._state)
        self._state = result.state
        return result

    def match(self, line: Line) -> MatchResult:
        """Return the result of the first matcher, in priority order, that matches."""
        if self._state.docstring_state is DocStringState.OPEN:
            matchers: Sequence[Matcher] = DOCSTRING_PRIORITY
        else:
            matchers = PRIORITY
        for matcher in matchers:
            result = self._apply(matcher, line)
            if result.matched:
                return result
        # match_other always matches; unreachable
        raise AssertionError("no matcher accepted the line")

    def match_eof(self, line: Line) -> MatchResult:
        return self._apply(match_eof, line)

    def match_empty(self, line: Line) -> MatchResult:
        return self._apply(match_empty, line)

    def match_comment(self, line: Line) -> MatchResult:
        return self._apply(match_comment, line)

    def match_language(self, line: Line) -> MatchResult:
        return self._apply(match_language, line)

    def match_tag_line(self, line: Line) -> MatchResult:
        return self._apply(match_tag_line, line)

    def match_feature_line(self, line: Line) -> MatchResult:
        return self._apply(match_feature_line, line)

    def match_background_line(self, line: Line) -> MatchResult:
        return self._apply(match_background_line, line)

    def match_scenario_line(self, line: Line) -> MatchResult:
        return self._apply(match_scenario_line, line)

    def match_scenario_outline_line(self, line: Line) -> MatchResult:
        return self._apply(match_scenario_outline_line, line)

    def match_examples_line(self, line: Line) -> MatchResult:
        return self._apply(match_examples_line, line)

    def match_step_line(self, line: Line) -> MatchResult:
        return self._apply(match_step_line, line)

    def match_docstring_separator(self, line: Line) -> MatchResult:
        return self._apply(match_docstring_separator, line)

    def match_table_row(self, line: Line) -> MatchResult:
        return self._apply(match_table_row, line)

    def match_other(self, line: Line) -> MatchResult:
        return self._apply(match_other, line)


def split_lines(source: str) -> list[Line]:
    """Split source into Lines (no EOF line).

    Lines end at ``\\n``; a trailing ``\\r`` is dropped. A final line
    terminator does not start another line.
    """
    if not source:
        return []
    texts = source.split("\n")
    if source.endswith("\n"):
        texts.pop()
    return [Line(text.removesuffix("\r"), index) for index, text in enumerate(texts)]


class Lexer:
    """Line scanner producing the token stream of one document.

    Usage:
            >>> lexer = Lexer("Feature: Login\\n  Scenario: Logging in\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(FEATURE_LINE, 'Login', 1:1)
        Token(SCENARIO_LINE, 'Logging in', 2:3)
        Token(EOF, '', 3:1)

    Unsupported language directives are collected in ``errors`` (or
    raised, with ``LexConfig.strict_language``).

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_config", "_matcher", "errors")

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Scenario file text
            source_file: Optional source file path for locations and errors
                (overrides the config's source_file)
            config: Lexer configuration (defaults to the context config)
        """
        self._source = source
        self._config = config if config is not None else get_lex_config()
        self._matcher = TokenMatcher(
            provider=self._config.dialect_provider,
            language=self._config.default_language,
            source_file=source_file or self._config.source_file,
        )
        self.errors: list[ParseError] = []

    @property
    def matcher(self) -> TokenMatcher:
        return self._matcher

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            One token per line, then exactly one EOF token.

        Raises:
            UnsupportedLanguageError: Only with ``strict_language``.
        """
        lines = split_lines(self._source)
        lines.append(Line(None, len(lines)))
        for line in lines:
            result = self._matcher.match(line)
            if result.diagnostic is not None:
                self._report(result.diagnostic)
            elif result.token.type is TokenType.LANGUAGE:
                logger.debug(
                    "Switched dialect to %r at %s", result.token.text, result.token.location
                )
            yield result.token

    def _report(self, error: ParseError) -> None:
        if self._config.strict_language:
            raise error
        logger.warning("%s; keeping dialect %r", error, self._matcher.state.language)
        self.errors.append(error)
