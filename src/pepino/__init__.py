"""
Pepino: line lexer for internationalized Given/When/Then scenario files

Turns the lines of a scenario file (Feature, Background, Scenario,
Scenario Outline, Examples, steps, docstrings, tables, tags, comments and
``# language:`` directives) into typed tokens with exact columns, in any
language of the dialect table. Zero runtime dependencies.

Quick Start:
    >>> from pepino import tokenize, format_tokens
    >>> print(format_tokens(tokenize("Feature: Login\\n  Scenario: Logging in\\n")))
    (1:1)FeatureLine:Feature/Login/
    (2:3)ScenarioLine:Scenario/Logging in/
    EOF

    >>> # Other languages, per file
    >>> tokens = tokenize("# language: fr\\nFonctionnalité: Connexion\\n")
    >>> tokens[1].keyword, tokens[1].dialect
    ('Fonctionnalité', 'fr')

Custom Dialects:
    >>> from pepino import Dialect, LexConfig, create_registry_with_builtins
    >>>
    >>> builder = create_registry_with_builtins()
    >>> builder.register(Dialect.from_dict("xx", my_keyword_entry))
    >>> tokens = tokenize(source, config=LexConfig(dialect_provider=builder.build()))
"""

from pepino.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pepino.dialects import (
    Dialect,
    DialectProvider,
    DialectRegistry,
    DialectRegistryBuilder,
    create_default_provider,
    create_registry_with_builtins,
)
from pepino.errors import DialectError, ParseError, PepinoError, UnsupportedLanguageError
from pepino.formatting import format_token, format_tokens
from pepino.lexer import (
    DocStringState,
    Lexer,
    MatcherState,
    MatchOutcome,
    MatchResult,
    TokenMatcher,
)
from pepino.line import Line
from pepino.location import SourceLocation
from pepino.serialization import to_dict, to_json
from pepino.tokens import LineSpan, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize a scenario file.

    Args:
        source: Scenario file text
        source_file: Optional source file path for locations and errors
        config: Lexer configuration (defaults to the context config)

    Returns:
        One token per line followed by an EOF token. Unsupported language
        directives are logged and skipped; use ``Lexer`` directly to
        inspect them, or ``LexConfig(strict_language=True)`` to raise.

    """
    return list(Lexer(source, source_file=source_file, config=config).tokenize())


__all__ = [
    # Main API
    "tokenize",
    "Lexer",
    "TokenMatcher",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Dialects
    "Dialect",
    "DialectProvider",
    "DialectRegistry",
    "DialectRegistryBuilder",
    "create_default_provider",
    "create_registry_with_builtins",
    # Tokens and lines
    "Token",
    "TokenType",
    "LineSpan",
    "Line",
    "SourceLocation",
    # Matcher state
    "MatcherState",
    "DocStringState",
    "MatchOutcome",
    "MatchResult",
    # Output
    "format_token",
    "format_tokens",
    "to_dict",
    "to_json",
    # Errors
    "PepinoError",
    "ParseError",
    "UnsupportedLanguageError",
    "DialectError",
]
