"""Exception classes for Pepino.

Provides standardized exceptions for error handling throughout Pepino.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.location import SourceLocation


class PepinoError(Exception):
    """Base exception for all Pepino errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PepinoError):
    """Error found while lexing a scenario file.

    Carries an optional source position so callers can point at the line.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnsupportedLanguageError(ParseError):
    """A ``# language:`` directive named a code the dialect provider lacks.

    Returned by the language matcher alongside its token rather than
    raised, so the caller chooses whether to keep lexing with the
    previous dialect or abort.
    """

    def __init__(self, language: str, location: SourceLocation) -> None:
        """Initialize unsupported language error.

        Args:
            language: The unresolved language code
            location: Location of the directive line
        """
        self.language = language
        self.location = location
        super().__init__(
            f"Language not supported: {language}",
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
        )


class DialectError(PepinoError):
    """Error in a dialect keyword table.

    Raised when a table entry is missing a keyword category or when
    a provider cannot resolve the default language.
    """

    def __init__(self, language: str, message: str) -> None:
        self.language = language
        super().__init__(f"Dialect '{language}': {message}")
