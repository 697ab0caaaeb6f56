"""Token and TokenType definitions for the Pepino lexer.

The matcher produces one Token per recognized line; a downstream grammar
consumes the stream. Each Token has a type, a source location and an
optional keyword, text and list of positioned sub-tokens.

Thread Safety:
Token and LineSpan are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.line import Line
    from pepino.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the matcher.

    Values are the names used in the one-line text form of a token
    (see ``pepino.formatting``).

    """

    # Document structure
    EOF = "EOF"
    EMPTY = "Empty"
    COMMENT = "Comment"
    LANGUAGE = "Language"

    # Structural headers
    TAG_LINE = "TagLine"
    FEATURE_LINE = "FeatureLine"
    BACKGROUND_LINE = "BackgroundLine"
    SCENARIO_LINE = "ScenarioLine"
    SCENARIO_OUTLINE_LINE = "ScenarioOutlineLine"
    EXAMPLES_LINE = "ExamplesLine"

    # Step content
    STEP_LINE = "StepLine"
    DOCSTRING_SEPARATOR = "DocStringSeparator"  # """ or ```
    TABLE_ROW = "TableRow"  # | cell | cell |

    # Anything else (free description text, docstring content)
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class LineSpan:
    """A sub-token located inside its line: a tag or a table cell.

    Attributes:
        column: 1-indexed offset of the first character in the untrimmed line
        text: The tag (with its ``@``) or the trimmed cell text

    """

    column: int
    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the matcher.

    Attributes:
        type: The token type (from TokenType enum)
        location: Where the token starts (1-indexed line and column)
        keyword: Matched localized keyword, for title and step lines
        text: Payload text (title, step text, comment, content type, ...)
        items: Positioned tags or table cells, left to right
        dialect: Language code of the dialect active when the line matched
        line: The source line the token was produced from

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    location: SourceLocation
    keyword: str | None = None
    text: str | None = None
    items: tuple[LineSpan, ...] = ()
    dialect: str = "en"
    line: Line | None = field(default=None, repr=False, compare=False, hash=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text or ""
        if len(val) > 20:
            val = val[:17] + "..."
        loc = self.location
        return f"Token({self.type.name}, {val!r}, {loc.lineno}:{loc.col_offset})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self.location.col_offset
