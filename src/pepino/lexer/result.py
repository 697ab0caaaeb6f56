"""Outcome of running one matcher against one line.

A matcher never raises; it returns a MatchResult tagged with one of three
outcomes. The result always carries the state to use for the next line
(unchanged on a miss).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pepino.errors import ParseError
    from pepino.lexer.state import MatcherState
    from pepino.tokens import Token


class MatchOutcome(Enum):
    """Tag of a MatchResult."""

    NO_MATCH = auto()
    MATCH = auto()
    MATCH_WITH_DIAGNOSTIC = auto()  # Token plus a recoverable error


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Tagged result of a matcher call.

    Build with ``no_match``, ``match`` or ``match_with_diagnostic``
    rather than the constructor.

    Attributes:
        outcome: Which of the three variants this is
        state: State for the next line
        token: The matched token (None on NO_MATCH)
        diagnostic: Recoverable error (MATCH_WITH_DIAGNOSTIC only)

    """

    outcome: MatchOutcome
    state: MatcherState
    token: Token | None = None
    diagnostic: ParseError | None = None

    @classmethod
    def no_match(cls, state: MatcherState) -> MatchResult:
        return cls(MatchOutcome.NO_MATCH, state)

    @classmethod
    def match(cls, token: Token, state: MatcherState) -> MatchResult:
        return cls(MatchOutcome.MATCH, state, token)

    @classmethod
    def match_with_diagnostic(
        cls, token: Token, state: MatcherState, diagnostic: ParseError
    ) -> MatchResult:
        return cls(MatchOutcome.MATCH_WITH_DIAGNOSTIC, state, token, diagnostic)

    @property
    def matched(self) -> bool:
        """True for both MATCH and MATCH_WITH_DIAGNOSTIC."""
        return self.outcome is not MatchOutcome.NO_MATCH
