"""Tests ensuring lexer state is consistent between pulls.

The lexer is pull-based: each call to next_token() advances the cursor by
exactly one token and updates the start-of-line flag.
"""

from __future__ import annotations

from p3lex.config import LexConfig, lex_config_context
from p3lex.lexer import Lexer
from p3lex.tokens import Token, TokenType


class TestPullProtocol:
    """Verify next_token(), iteration and tokenize() agree."""

    def test_next_token_returns_none_when_exhausted(self) -> None:
        lexer = Lexer("x")

        assert lexer.next_token() == Token(TokenType.IDENT, "x")
        assert lexer.next_token() is None
        assert lexer.next_token() is None

    def test_no_work_before_first_pull(self) -> None:
        """Constructing a lexer over bad input does not raise."""
        lexer = Lexer("$$$")

        assert lexer.position == 0

    def test_iteration_matches_tokenize(self) -> None:
        source = "def f(a, b):\n    return a ** b\n"

        assert list(Lexer(source)) == list(Lexer(source).tokenize())

    def test_iteration_resumes_after_manual_pull(self) -> None:
        lexer = Lexer("a b c")
        first = lexer.next_token()
        rest = list(lexer)

        assert first == Token(TokenType.IDENT, "a")
        assert rest == [Token(TokenType.IDENT, "b"), Token(TokenType.IDENT, "c")]

    def test_lexer_is_its_own_iterator(self) -> None:
        lexer = Lexer("a")

        assert iter(lexer) is lexer


class TestPositionTracking:
    """Verify the cursor only moves forward, one token at a time."""

    def test_position_after_each_token(self) -> None:
        lexer = Lexer("ab //= 12")
        positions = []
        while lexer.next_token() is not None:
            positions.append(lexer.position)

        assert positions == [2, 6, 9]

    def test_position_at_end(self) -> None:
        lexer = Lexer("x = 1  ")
        list(lexer)

        assert lexer.position == len("x = 1  ")

    def test_comment_leaves_newline_unconsumed(self) -> None:
        lexer = Lexer("# c\nx")
        lexer.next_token()

        assert lexer.position == 3


class TestStartOfLineFlag:
    """Verify the start-of-line flag follows NEWLINE tokens."""

    def test_initially_at_line_start(self) -> None:
        assert Lexer("x").at_line_start is True

    def test_cleared_after_token(self) -> None:
        lexer = Lexer("x\ny")
        lexer.next_token()

        assert lexer.at_line_start is False

    def test_set_after_newline(self) -> None:
        lexer = Lexer("x\ny")
        lexer.next_token()
        lexer.next_token()

        assert lexer.at_line_start is True

    def test_cleared_after_indent(self) -> None:
        lexer = Lexer("    x")

        assert lexer.next_token() == Token(TokenType.INDENT, 1)
        assert lexer.at_line_start is False

    def test_single_space_keeps_flag(self) -> None:
        """A discarded lone space does not end the start of the line."""
        lexer = Lexer(" ")

        assert lexer.next_token() is None
        assert lexer.at_line_start is True


class TestConfigResolution:
    """Verify which configuration a lexer uses."""

    def test_explicit_config_wins(self) -> None:
        config = LexConfig(indent_width=2)
        with lex_config_context(LexConfig(indent_width=8)):
            lexer = Lexer("x", config=config)

        assert lexer.config is config

    def test_context_config_captured_at_construction(self) -> None:
        with lex_config_context(LexConfig(indent_width=2)):
            lexer = Lexer("  x")

        assert lexer.next_token() == Token(TokenType.INDENT, 1)

    def test_default_config(self) -> None:
        assert Lexer("").config.indent_width == 4
