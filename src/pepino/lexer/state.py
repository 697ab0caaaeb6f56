"""Carried matcher state and docstring modes.

MatcherState is an immutable value. Each matcher takes the current state
and returns the state for the next line, so the only sequential coupling
between lines is the value the caller threads through.

Thread Safety:
MatcherState is frozen. The dialect provider it references is shared
read-only data.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

from pepino.constants import DEFAULT_DIALECT
from pepino.errors import DialectError

if TYPE_CHECKING:
    from pepino.dialects import Dialect, DialectProvider


class DocStringState(Enum):
    """Docstring fence modes.

    - CLOSED: Outside any docstring
    - OPEN: Inside a docstring; only the opening literal closes it

    """

    CLOSED = auto()
    OPEN = auto()


@dataclass(frozen=True, slots=True)
class MatcherState:
    """State carried from one line to the next within one document.

    Attributes:
        provider: Dialect provider used to resolve ``# language:`` lines
        language: Code of the active dialect
        dialect: The active dialect
        active_docstring_separator: Opening fence literal, "" when closed
        indent_to_remove: Indent of the opening fence; 0 when closed
        source_file: Path reported in token locations (optional)

    """

    provider: DialectProvider
    language: str
    dialect: Dialect
    active_docstring_separator: str = ""
    indent_to_remove: int = 0
    source_file: str | None = None

    @classmethod
    def initial(
        cls,
        provider: DialectProvider,
        language: str = DEFAULT_DIALECT,
        source_file: str | None = None,
    ) -> MatcherState:
        """Create the start-of-document state.

        Raises:
            DialectError: If the provider has no dialect for ``language``.
        """
        dialect = provider.get_dialect(language)
        if dialect is None:
            raise DialectError(language, "default language is not provided")
        return cls(
            provider=provider, language=language, dialect=dialect, source_file=source_file
        )

    @property
    def docstring_state(self) -> DocStringState:
        if self.active_docstring_separator:
            return DocStringState.OPEN
        return DocStringState.CLOSED

    def with_dialect(self, language: str, dialect: Dialect) -> MatcherState:
        return replace(self, language=language, dialect=dialect)

    def open_docstring(self, separator: str, indent: int) -> MatcherState:
        return replace(self, active_docstring_separator=separator, indent_to_remove=indent)

    def close_docstring(self) -> MatcherState:
        return replace(self, active_docstring_separator="", indent_to_remove=0)
