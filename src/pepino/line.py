"""A single physical source line and its derived properties.

Lines are created by the scanner (``pepino.lexer.Lexer``) and handed to
the matchers one at a time. A line whose text is ``None`` marks the end
of input.

Thread Safety:
Line is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from pepino.constants import TITLE_KEYWORD_SEPARATOR


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line of a scenario file.

    Attributes:
        text: Raw line text without its line terminator, or None at EOF
        index: 0-based line index in the source
        indent: Count of leading whitespace characters
        trimmed_text: Text with leading whitespace removed

    Example:
            >>> line = Line("    Given a user", 2)
            >>> line.line_number, line.indent, line.trimmed_text
            (3, 4, 'Given a user')

    """

    text: str | None
    index: int
    indent: int = field(init=False)
    trimmed_text: str = field(init=False)

    def __post_init__(self) -> None:
        trimmed = self.text.lstrip() if self.text is not None else ""
        object.__setattr__(self, "trimmed_text", trimmed)
        object.__setattr__(
            self, "indent", len(self.text) - len(trimmed) if self.text is not None else 0
        )

    @property
    def line_number(self) -> int:
        """1-indexed line number, as reported in token locations."""
        return self.index + 1

    def is_eof(self) -> bool:
        return self.text is None

    def is_empty(self) -> bool:
        """True for whitespace-only lines (and at EOF)."""
        return not self.trimmed_text.strip()

    def starts_with(self, prefix: str) -> bool:
        """Check the trimmed text for a prefix."""
        return self.trimmed_text.startswith(prefix)

    def starts_with_title_keyword(self, keyword: str) -> bool:
        """Check for ``keyword`` immediately followed by the title separator."""
        return self.trimmed_text.startswith(keyword + TITLE_KEYWORD_SEPARATOR)

    def get_rest_trimmed(self, length: int) -> str:
        """Return the trimmed text after its first ``length`` characters, stripped."""
        return self.trimmed_text[length:].strip()

    def get_line_text(self, indent_to_remove: int = 0) -> str:
        """Return the raw text with up to ``indent_to_remove`` leading spaces removed.

        Only space characters are removed; a line with fewer leading spaces
        loses just the ones it has.
        """
        if self.text is None:
            return ""
        pos = 0
        text_len = len(self.text)
        while pos < indent_to_remove and pos < text_len and self.text[pos] == " ":
            pos += 1
        return self.text[pos:]
