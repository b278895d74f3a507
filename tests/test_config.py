"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and validation.
"""

from threading import Thread

import pytest

from p3lex import (
    LexConfig,
    Lexer,
    Token,
    TokenType,
    UnsupportedCharacterError,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.indent_width == 4
        assert config.error_context == 10
        assert config.raw_strings is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.indent_width = 8  # type: ignore[misc]

    @pytest.mark.parametrize("width", [0, -4])
    def test_rejects_non_positive_indent_width(self, width: int) -> None:
        with pytest.raises(ValueError, match="indent_width"):
            LexConfig(indent_width=width)

    def test_rejects_negative_error_context(self) -> None:
        with pytest.raises(ValueError, match="error_context"):
            LexConfig(error_context=-1)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"indent_width": 2, "raw_strings": True, "colour": "red"})
        assert config == LexConfig(indent_width=2, raw_strings=True)

    def test_from_empty_dict(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextAccessors:
    """get/set/reset and the context manager."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_is_active(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(indent_width=2))
        assert get_lex_config().indent_width == 2

        reset_lex_config()
        assert get_lex_config().indent_width == 4

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(indent_width=8)):
            assert get_lex_config().indent_width == 8
        assert get_lex_config().indent_width == 4

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(indent_width=8)):
                raise RuntimeError("boom")
        assert get_lex_config().indent_width == 4

    def test_error_context_width_used_by_lexer(self) -> None:
        with lex_config_context(LexConfig(error_context=2)):
            lexer = Lexer("abcde$fghij")
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            list(lexer)
        assert exc_info.value.context == "de$fg"


class TestThreadIsolation:
    """Config set in one thread is invisible to another."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, list[Token]] = {}

        def worker(name: str, width: int) -> None:
            set_lex_config(LexConfig(indent_width=width))
            results[name] = list(Lexer("x\n    y"))

        threads = [
            Thread(target=worker, args=("two", 2)),
            Thread(target=worker, args=("four", 4)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results["two"][2] == Token(TokenType.INDENT, 2)
        assert results["four"][2] == Token(TokenType.INDENT, 1)
        assert get_lex_config() == LexConfig()
