"""Tests for accurate source location tracking.

Token locations and span columns feed error messages and editor
integration. These tests verify line numbers, token columns and the
columns of tags and table cells in the original, untrimmed line.
"""

from pepino.lexer import Lexer
from pepino.tokens import TokenType


def _tokens(source: str, source_file: str | None = None):
    return list(Lexer(source, source_file=source_file).tokenize())


class TestTokenLocations:
    """Line and column of whole-line tokens."""

    def test_feature_location(self) -> None:
        feature = _tokens("Feature: Login")[0]
        assert feature.location.lineno == 1
        assert feature.location.col_offset == 1

    def test_indented_step_location(self) -> None:
        step = _tokens("Feature: x\n    Given y")[1]
        assert step.type is TokenType.STEP_LINE
        assert (step.location.lineno, step.location.col_offset) == (2, 5)

    def test_comment_and_other_start_at_column_one(self) -> None:
        tokens = _tokens("   # note\n   free text")
        assert tokens[0].location.col_offset == 1
        assert tokens[1].type is TokenType.OTHER
        assert tokens[1].location.col_offset == 1

    def test_language_location_is_indent(self) -> None:
        token = _tokens("  # language: fr")[0]
        assert token.location.col_offset == 3

    def test_consecutive_lines_increment(self) -> None:
        tokens = _tokens("a\nb\n\nc")
        assert [t.location.lineno for t in tokens] == [1, 2, 3, 4, 5]

    def test_eof_after_trailing_newline(self) -> None:
        eof = _tokens("Feature: x\n")[-1]
        assert eof.type is TokenType.EOF
        assert eof.location.lineno == 2

    def test_eof_of_empty_source(self) -> None:
        tokens = _tokens("")
        assert len(tokens) == 1
        assert (tokens[0].location.lineno, tokens[0].location.col_offset) == (1, 1)

    def test_crlf_line_endings(self) -> None:
        tokens = _tokens("Feature: x\r\n  Scenario: y\r\n")
        assert tokens[0].text == "x"
        assert tokens[1].text == "y"
        assert tokens[1].location.lineno == 2

    def test_source_file_in_location(self) -> None:
        token = _tokens("Feature: x", source_file="login.feature")[0]
        assert str(token.location) == "login.feature:1:1"


class TestSpanColumns:
    """Columns of tags and table cells."""

    def test_tag_columns(self) -> None:
        source = "    @fast   @db"
        tags = _tokens(source)[0].items
        assert [(t.column, t.text) for t in tags] == [(5, "@fast"), (13, "@db")]

    def test_table_cell_columns(self) -> None:
        source = "    |  id | name |"
        cells = _tokens(source)[0].items
        assert [(c.column, c.text) for c in cells] == [(8, "id"), (13, "name")]
        for cell in cells:
            assert source[cell.column - 1 :].startswith(cell.text)

    def test_unicode_cells(self) -> None:
        source = "| café | ñ |"
        cells = _tokens(source)[0].items
        assert [(c.column, c.text) for c in cells] == [(3, "café"), (10, "ñ")]
