"""Tests for ContextVar-based lexer configuration.

Validates defaults, immutability, thread isolation and the context manager.
"""

from threading import Thread

import pytest

from pepino import (
    LexConfig,
    Lexer,
    TokenType,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.default_language == "en"
        assert config.dialect_provider is None
        assert config.strict_language is False
        assert config.source_file is None

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.default_language = "fr"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"default_language": "nl", "colour": "blue"})
        assert config.default_language == "nl"
        assert not hasattr(config, "colour")


class TestContextVarConfig:
    """Get, set, reset and scoped config."""

    def setup_method(self) -> None:
        reset_lex_config()

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(default_language="de"))
        assert get_lex_config().default_language == "de"
        reset_lex_config()
        assert get_lex_config().default_language == "en"

    def test_lexer_reads_context_config(self) -> None:
        set_lex_config(LexConfig(default_language="es"))
        assert tokenize("Escenario: x")[0].type is TokenType.SCENARIO_LINE

    def test_explicit_config_wins(self) -> None:
        set_lex_config(LexConfig(default_language="es"))
        tokens = tokenize("Scenario: x", config=LexConfig())
        assert tokens[0].type is TokenType.SCENARIO_LINE
        assert tokens[0].dialect == "en"

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(strict_language=True)):
            assert get_lex_config().strict_language is True
        assert get_lex_config().strict_language is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(default_language="it")):
                raise RuntimeError("boom")
        assert get_lex_config().default_language == "en"

    def test_source_file_from_config(self) -> None:
        lexer = Lexer("Feature: x", config=LexConfig(source_file="a.feature"))
        token = next(iter(lexer.tokenize()))
        assert token.location.source_file == "a.feature"

    def test_thread_isolation(self) -> None:
        seen: dict[str, str] = {}

        def worker() -> None:
            seen["worker"] = get_lex_config().default_language

        set_lex_config(LexConfig(default_language="fr"))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen["worker"] == "en"
        assert get_lex_config().default_language == "fr"
