"""Tag line matcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pepino.constants import TAG_PREFIX
from pepino.lexer.matchers.base import new_token
from pepino.lexer.result import MatchResult
from pepino.tokens import LineSpan, TokenType

if TYPE_CHECKING:
    from pepino.lexer.state import MatcherState
    from pepino.line import Line


def split_tags(trimmed_text: str, indent: int) -> tuple[LineSpan, ...]:
    """Split a tag line into positioned tags.

    Fragments that are blank once trimmed (stray or doubled ``@``) are
    dropped. Duplicates are kept, in source order.

    Args:
        trimmed_text: Line text without leading whitespace
        indent: Leading whitespace count of the line

    Returns:
        One span per tag; each column points at the tag's ``@``.

    Example:
            >>> split_tags("@smoke @@wip", 2)
            (LineSpan(column=3, text='@smoke'), LineSpan(column=11, text='@wip'))

    """
    tags: list[LineSpan] = []
    # 1-indexed column of the @ preceding the current fragment
    column = indent
    for fragment in trimmed_text.split(TAG_PREFIX):
        name = fragment.strip()
        if name:
            tags.append(LineSpan(column, TAG_PREFIX + name))
        column += len(fragment) + 1
    return tuple(tags)


def match_tag_line(line: Line, state: MatcherState) -> MatchResult:
    if not line.starts_with(TAG_PREFIX):
        return MatchResult.no_match(state)
    items = split_tags(line.trimmed_text, line.indent)
    return MatchResult.match(
        new_token(line, state, TokenType.TAG_LINE, line.indent, items=items), state
    )
