"""Tests ensuring matcher state is consistent across a document.

These tests verify that the scanner threads docstring and dialect state
from line to line and cleans it up, so no state leaks between blocks.
"""

from __future__ import annotations

from pepino.dialects import create_default_provider
from pepino.lexer import DocStringState, Lexer, TokenMatcher
from pepino.line import Line
from pepino.tokens import TokenType


def _types(source: str) -> list[TokenType]:
    return [token.type for token in Lexer(source).tokenize()]


class TestDocStringStateConsistency:
    """Verify docstring state is properly managed."""

    def test_state_cleared_after_close(self) -> None:
        lexer = Lexer('Given x\n  """\n  text\n  """\n')
        list(lexer.tokenize())

        state = lexer.matcher.state
        assert state.docstring_state is DocStringState.CLOSED
        assert state.active_docstring_separator == ""
        assert state.indent_to_remove == 0

    def test_unterminated_docstring_stays_open(self) -> None:
        lexer = Lexer('"""\ntext\n')
        tokens = list(lexer.tokenize())

        assert tokens[-1].type is TokenType.EOF
        assert lexer.matcher.state.active_docstring_separator == '"""'

    def test_content_is_not_reclassified(self) -> None:
        source = '"""\n# comment\n@tag\nGiven a step\n| a |\nFeature: x\n\n"""'
        types = _types(source)

        assert types[0] is TokenType.DOCSTRING_SEPARATOR
        assert types[1:7] == [TokenType.OTHER] * 6
        assert types[7] is TokenType.DOCSTRING_SEPARATOR

    def test_other_fence_is_content(self) -> None:
        tokens = list(Lexer('```\n"""\n```\n').tokenize())

        assert [t.type for t in tokens] == [
            TokenType.DOCSTRING_SEPARATOR,
            TokenType.OTHER,
            TokenType.DOCSTRING_SEPARATOR,
            TokenType.EOF,
        ]
        assert tokens[1].text == '"""'

    def test_lines_after_docstring_are_structural(self) -> None:
        types = _types('"""\nx\n"""\nGiven y\n')
        assert types[3] is TokenType.STEP_LINE


class TestDialectStateConsistency:
    """Verify the dialect carries across lines."""

    def test_language_switch_persists(self) -> None:
        tokens = list(Lexer("# language: de\nFunktionalität: x\n  Angenommen y\n").tokenize())

        assert tokens[0].type is TokenType.LANGUAGE
        assert tokens[1].type is TokenType.FEATURE_LINE
        assert tokens[2].keyword == "Angenommen "
        assert all(t.dialect == "de" for t in tokens[1:])

    def test_unsupported_language_keeps_default(self) -> None:
        lexer = Lexer("# language: zz\nFeature: still English\n")
        tokens = list(lexer.tokenize())

        assert tokens[0].type is TokenType.LANGUAGE
        assert tokens[0].text == "zz"
        assert tokens[1].type is TokenType.FEATURE_LINE
        assert tokens[1].dialect == "en"
        assert len(lexer.errors) == 1
        assert lexer.errors[0].language == "zz"

    def test_later_switch_overrides_earlier(self) -> None:
        source = "# language: fr\n# language: es\nCaracterística: x\n"
        tokens = list(Lexer(source).tokenize())
        assert tokens[2].type is TokenType.FEATURE_LINE
        assert tokens[2].dialect == "es"


class TestTokenMatcher:
    """The stateful matcher front end."""

    def test_priority_order(self) -> None:
        matcher = TokenMatcher()
        expected = [
            (None, TokenType.EOF),
            ("   ", TokenType.EMPTY),
            ("# language: en", TokenType.LANGUAGE),
            ("# plain comment", TokenType.COMMENT),
            ("@tag", TokenType.TAG_LINE),
            ("Feature: f", TokenType.FEATURE_LINE),
            ("Background:", TokenType.BACKGROUND_LINE),
            ("Scenario: s", TokenType.SCENARIO_LINE),
            ("Scenario Outline: o", TokenType.SCENARIO_OUTLINE_LINE),
            ("Examples:", TokenType.EXAMPLES_LINE),
            ("And then some", TokenType.STEP_LINE),
            ("| a |", TokenType.TABLE_ROW),
            ("description", TokenType.OTHER),
        ]
        for index, (text, token_type) in enumerate(expected):
            assert matcher.match(Line(text, index)).token.type is token_type

    def test_method_updates_state(self) -> None:
        matcher = TokenMatcher()
        matcher.match_docstring_separator(Line('  """', 0))
        assert matcher.state.indent_to_remove == 2
        assert matcher.match_other(Line("    x", 1)).token.text == "  x"

    def test_miss_keeps_state(self) -> None:
        matcher = TokenMatcher()
        before = matcher.state
        assert not matcher.match_feature_line(Line("nothing", 0)).matched
        assert matcher.state is before

    def test_reset(self) -> None:
        matcher = TokenMatcher(language="nl")
        matcher.match_language(Line("# language: fr", 0))
        matcher.match_docstring_separator(Line('"""', 1))
        matcher.reset()
        assert matcher.state.language == "nl"
        assert matcher.state.docstring_state is DocStringState.CLOSED

    def test_independent_matchers_share_no_state(self) -> None:
        provider = create_default_provider()
        first = TokenMatcher(provider)
        second = TokenMatcher(provider)
        first.match(Line("# language: fr", 0))
        first.match(Line('"""', 1))

        assert second.state.language == "en"
        assert second.state.docstring_state is DocStringState.CLOSED
        assert second.match(Line("Given x", 0)).token.type is TokenType.STEP_LINE
