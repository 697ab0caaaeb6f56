"""Localized keyword sets.

A Dialect holds one ordered keyword tuple per structural category. Keyword
order matters: matchers take the first keyword that fits a line, so the
table lists longer, more specific keywords ahead of their prefixes where a
language needs it (``"Et que "`` before ``"Et "``).

Thread Safety:
Dialect is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pepino.errors import DialectError

# Keys of one language entry in the keyword table
KEYWORD_CATEGORIES: tuple[str, ...] = (
    "feature",
    "background",
    "scenario",
    "scenarioOutline",
    "examples",
    "given",
    "when",
    "then",
    "and",
    "but",
)


@dataclass(frozen=True, slots=True)
class Dialect:
    """Keywords of one language, keyed by language code.

    Attributes:
        language: Language code (e.g. "en", "fr", "en-pirate")
        name: English name of the language
        native: Name of the language in that language
        feature_keywords ... but_keywords: Ordered keyword tuples

    """

    language: str
    name: str
    native: str
    feature_keywords: tuple[str, ...]
    background_keywords: tuple[str, ...]
    scenario_keywords: tuple[str, ...]
    scenario_outline_keywords: tuple[str, ...]
    examples_keywords: tuple[str, ...]
    given_keywords: tuple[str, ...]
    when_keywords: tuple[str, ...]
    then_keywords: tuple[str, ...]
    and_keywords: tuple[str, ...]
    but_keywords: tuple[str, ...]

    @property
    def step_keywords(self) -> tuple[str, ...]:
        """All step keywords in table order (given, when, then, and, but).

        Repeats are dropped keeping the first occurrence, which leaves the
        first-match result of any line unchanged.
        """
        return tuple(
            dict.fromkeys(
                self.given_keywords
                + self.when_keywords
                + self.then_keywords
                + self.and_keywords
                + self.but_keywords
            )
        )

    @classmethod
    def from_dict(cls, language: str, data: Mapping[str, Any]) -> Dialect:
        """Create a Dialect from one entry of the keyword table.

        Args:
            language: Language code the entry is keyed by
            data: Mapping with a keyword list per category, plus optional
                "name" and "native"

        Returns:
            New Dialect instance.

        Raises:
            DialectError: If a keyword category is missing or not a list.

        """
        keywords: dict[str, tuple[str, ...]] = {}
        for category in KEYWORD_CATEGORIES:
            value = data.get(category)
            if not isinstance(value, Sequence) or isinstance(value, str):
                raise DialectError(language, f"missing keyword list '{category}'")
            keywords[category] = tuple(value)

        return cls(
            language=language,
            name=data.get("name", language),
            native=data.get("native", language),
            feature_keywords=keywords["feature"],
            background_keywords=keywords["background"],
            scenario_keywords=keywords["scenario"],
            scenario_outline_keywords=keywords["scenarioOutline"],
            examples_keywords=keywords["examples"],
            given_keywords=keywords["given"],
            when_keywords=keywords["when"],
            then_keywords=keywords["then"],
            and_keywords=keywords["and"],
            but_keywords=keywords["but"],
        )
