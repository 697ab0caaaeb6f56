"""Line matchers for the Pepino lexer.

Each matcher is a plain function ``(line, state) -> MatchResult``. It
either declines (NO_MATCH, state unchanged) or returns a token and the
state for the next line. Matchers never raise.

PRIORITY is the order a scanner tries them in; the first match wins.
Inside an open docstring only DOCSTRING_PRIORITY applies, so content
lines are never taken for steps, tags or comments.
"""

from pepino.lexer.matchers.base import Matcher, new_token
from pepino.lexer.matchers.docstring import match_docstring_separator
from pepino.lexer.matchers.keywords import (
    match_background_line,
    match_examples_line,
    match_feature_line,
    match_scenario_line,
    match_scenario_outline_line,
    match_step_line,
    match_title_line,
)
from pepino.lexer.matchers.language import match_language
from pepino.lexer.matchers.simple import (
    match_comment,
    match_empty,
    match_eof,
    match_other,
)
from pepino.lexer.matchers.table import match_table_row, split_table_cells
from pepino.lexer.matchers.tags import match_tag_line, split_tags

PRIORITY: tuple[Matcher, ...] = (
    match_eof,
    match_empty,
    match_language,  # Before comment: a directive is comment-shaped
    match_comment,
    match_tag_line,
    match_feature_line,
    match_background_line,
    match_scenario_line,
    match_scenario_outline_line,
    match_examples_line,
    match_step_line,
    match_docstring_separator,
    match_table_row,
    match_other,
)

DOCSTRING_PRIORITY: tuple[Matcher, ...] = (
    match_eof,
    match_docstring_separator,
    match_other,
)

__all__ = [
    "DOCSTRING_PRIORITY",
    "PRIORITY",
    "Matcher",
    "match_background_line",
    "match_comment",
    "match_docstring_separator",
    "match_empty",
    "match_eof",
    "match_examples_line",
    "match_feature_line",
    "match_language",
    "match_other",
    "match_scenario_line",
    "match_scenario_outline_line",
    "match_step_line",
    "match_table_row",
    "match_tag_line",
    "match_title_line",
    "new_token",
    "split_table_cells",
    "split_tags",
]
