"""Shared fixtures for Pepino tests."""

from __future__ import annotations

import pytest

from pepino.dialects import Dialect, DialectRegistryBuilder, create_default_provider
from pepino.lexer import MatcherState


def _make_dialect(language: str = "xx", **overrides: list[str]) -> Dialect:
    """Build a small dialect; keyword lists can be overridden per category."""
    entry: dict[str, list[str]] = {
        "feature": ["Feature"],
        "background": ["Background"],
        "scenario": ["Scenario"],
        "scenarioOutline": ["Scenario Outline"],
        "examples": ["Examples"],
        "given": ["Given "],
        "when": ["When "],
        "then": ["Then "],
        "and": ["And "],
        "but": ["But "],
    }
    entry.update(overrides)
    return Dialect.from_dict(language, entry)


@pytest.fixture
def make_dialect():
    """Factory for small test dialects: make_dialect("xx", given=["Given "])."""
    return _make_dialect


@pytest.fixture
def state() -> MatcherState:
    """Start-of-document state with the built-in English dialect."""
    return MatcherState.initial(create_default_provider())


@pytest.fixture
def english_only_provider():
    """Provider knowing only a copy of the built-in English dialect."""
    english = create_default_provider().get_dialect("en")
    return DialectRegistryBuilder().register(english).build()
