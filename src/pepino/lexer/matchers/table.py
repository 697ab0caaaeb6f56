"""Table row matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.constants import TABLE_CELL_SEPARATOR
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import LineSpan, TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def split_table_cells(trimmed_text: str, indent: int) -> tuple[LineSpan, ...]:
    """Split a table row into positioned cells.

    Surrounding spaces are trimmed, then exactly one leading and one
    trailing character (the ``|`` delimiters) are removed and the rest is
    split on ``|``. Empty cells are kept as empty spans; the number of cells
    is not checked against other rows.

    Args:
        trimmed_text: Line text without leading whitespace
        indent: Leading whitespace count of the line

    Returns:
        One span per cell; each column points at the first non-space
        character of the cell (or just past its spaces when empty).

    Example:
            >>> split_table_cells("| a | bb | |", 0)
            (LineSpan(column=3, text='a'), LineSpan(column=7, text='bb'), LineSpan(column=12, text=''))

    """
    row = trimmed_text.strip(" ")[len(TABLE_CELL_SEPARATOR) : -len(TABLE_CELL_SEPARATOR)]

    cells: list[LineSpan] = []
    # 1-indexed column of the | preceding the current cell
    column = indent + 1
    for raw in row.split(TABLE_CELL_SEPARATOR):
        leading = len(raw) - len(raw.lstrip(" "))
        cells.append(LineSpan(column + leading + 1, raw.strip(" ")))
        column += len(raw) + 1
    return tuple(cells)


def match_table_row(line: Line, state: MatcherState) -> MatchResult:
    if not line.starts_with(TABLE_CELL_SEPARATOR):
        return MatchResult.no_match(state)
    items = split_table_cells(line.trimmed_text, line.indent)
    return MatchResult.match(
        new_token(line, state, TokenType.TABLE_ROW, line.indent, items=items), state
    )
