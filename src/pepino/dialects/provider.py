"""Dialect providers: language code to Dialect lookup.

The matcher only needs ``get_dialect(language)``; any object with that
method satisfies the DialectProvider protocol. The built-in provider is
loaded once from the bundled ``languages.json`` and cached.

Thread Safety:
DialectRegistry is immutable after creation. Safe to share.
Use DialectRegistryBuilder for mutable construction.

Example:
    >>> builder = DialectRegistryBuilder()
    >>> builder.register_mapping({"xx": {...}})
    >>> provider = builder.build()
    >>> provider.get_dialect("xx")
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from types import MappingProxyType
from typing import Any, Protocol

from pepino.dialects.dialect import Dialect
from pepino.utils.logger import get_logger

logger = get_logger(__name__)

_LANGUAGES_RESOURCE = "languages.json"


class DialectProvider(Protocol):
    """Protocol for objects resolving a language code to a Dialect."""

    def get_dialect(self, language: str) -> Dialect | None:
        """Return the dialect for ``language``, or None if unknown."""
        ...


class DialectRegistry:
    """Immutable mapping of language codes to dialects.

    Thread Safety:
        Immutable after creation. Safe to share across threads and
        across matcher instances.
    """

    __slots__ = ("_dialects",)

    def __init__(self, dialects: Mapping[str, Dialect]) -> None:
        """Initialize registry with a pre-built mapping.

        Use DialectRegistryBuilder to create instances.
        """
        self._dialects = MappingProxyType(dict(dialects))

    def get_dialect(self, language: str) -> Dialect | None:
        """Get dialect for a language code.

        Args:
            language: Language code (e.g., "en", "fr")

        Returns:
            Dialect if known, None otherwise
        """
        return self._dialects.get(language)

    @property
    def languages(self) -> frozenset[str]:
        """Get all known language codes."""
        return frozenset(self._dialects)

    def __contains__(self, language: str) -> bool:
        """Support 'language in registry' syntax."""
        return language in self._dialects

    def __len__(self) -> int:
        """Number of known languages."""
        return len(self._dialects)


class DialectRegistryBuilder:
    """Mutable builder for DialectRegistry.

    Example:
        >>> builder = create_registry_with_builtins()
        >>> builder.register(my_dialect)
        >>> provider = builder.build()
    """

    __slots__ = ("_dialects",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._dialects: dict[str, Dialect] = {}

    def register(self, dialect: Dialect) -> DialectRegistryBuilder:
        """Register a dialect, replacing any previous one for its language.

        Returns:
            Self for chaining
        """
        self._dialects[dialect.language] = dialect
        return self

    def register_mapping(self, table: Mapping[str, Mapping[str, Any]]) -> DialectRegistryBuilder:
        """Register every entry of a keyword table keyed by language code.

        Raises:
            DialectError: If an entry is missing a keyword category.

        Returns:
            Self for chaining
        """
        for language, data in table.items():
            self.register(Dialect.from_dict(language, data))
        return self

    def build(self) -> DialectRegistry:
        """Build immutable registry from registered dialects."""
        return DialectRegistry(self._dialects)

    def __len__(self) -> int:
        """Number of registered dialects."""
        return len(self._dialects)


def load_builtin_table() -> dict[str, Any]:
    """Read the bundled keyword table."""
    source = resources.files("pepino.dialects").joinpath(_LANGUAGES_RESOURCE)
    table = json.loads(source.read_text(encoding="utf-8"))
    logger.debug("Loaded %d dialects from %s", len(table), _LANGUAGES_RESOURCE)
    return table


# Cached singleton; safe to share, DialectRegistry is immutable
_BUILTIN_REGISTRY: DialectRegistry | None = None


def create_default_provider() -> DialectRegistry:
    """Get the built-in dialect provider (cached singleton).

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _BUILTIN_REGISTRY
    if _BUILTIN_REGISTRY is None:
        _BUILTIN_REGISTRY = create_registry_with_builtins().build()
    return _BUILTIN_REGISTRY


def create_registry_with_builtins() -> DialectRegistryBuilder:
    """Create a builder pre-populated with the bundled dialects.

    Use this to add or override languages:

        >>> builder = create_registry_with_builtins()
        >>> builder.register(Dialect.from_dict("xx", entry))
        >>> provider = builder.build()

    Returns:
        DialectRegistryBuilder with bundled dialects already registered
    """
    return DialectRegistryBuilder().register_mapping(load_builtin_table())
