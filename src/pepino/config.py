"""ContextVar-based lexer configuration for Pepino.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A config passed explicitly to ``Lexer`` or ``tokenize`` wins over the
context value.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pepino.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(default_language="fr")):
        tokens = list(Lexer(source).tokenize())

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from pepino.constants import DEFAULT_DIALECT

if TYPE_CHECKING:
    from pepino.dialects import DialectProvider


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        default_language: Dialect in effect until a ``# language:`` line
        dialect_provider: Provider to resolve languages (None = built-in table)
        strict_language: Raise on an unsupported language instead of
            collecting the diagnostic and continuing
        source_file: Path reported in token locations and errors

    """

    default_language: str = DEFAULT_DIALECT
    dialect_provider: DialectProvider | None = None
    strict_language: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "default_language": "nl",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_language
            'nl'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(strict_language=True)):
        ...     list(Lexer("# language: xx").tokenize())
        Traceback (most recent call last):
        UnsupportedLanguageError: 1:1 Language not supported: xx

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
