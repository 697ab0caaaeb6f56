"""Dialects: localized keyword tables keyed by language code.

Provides:
- Dialect: ordered keyword tuples for one language
- DialectProvider: protocol the matcher resolves languages through
- DialectRegistry / DialectRegistryBuilder: immutable provider and its builder
- create_default_provider: cached provider over the bundled languages.json
"""

from pepino.dialects.dialect import KEYWORD_CATEGORIES, Dialect
from pepino.dialects.provider import (
    DialectProvider,
    DialectRegistry,
    DialectRegistryBuilder,
    create_default_provider,
    create_registry_with_builtins,
    load_builtin_table,
)

__all__ = [
    "KEYWORD_CATEGORIES",
    "Dialect",
    "DialectProvider",
    "DialectRegistry",
    "DialectRegistryBuilder",
    "create_default_provider",
    "create_registry_with_builtins",
    "load_builtin_table",
]
