"""Tests for canonical text output and JSON token dumps."""

from __future__ import annotations

from io import StringIO

import pytest

from p3lex import LexConfig, Token, TokenType, tokenize
from p3lex.serialization import (
    from_dict,
    from_json,
    render,
    to_dict,
    to_json,
    untokenize,
    write_token,
    write_tokens,
)


class TestRender:
    """Canonical surface form of each token category."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            (Token(TokenType.IF), "if "),
            (Token(TokenType.NONE), "None "),
            (Token(TokenType.ELSE), "else"),
            (Token(TokenType.DOUBLE_AMPERSAND), "and "),
            (Token(TokenType.DOUBLE_PIPE), "or "),
            (Token(TokenType.IDENT, "count"), "count "),
            (Token(TokenType.INT_LIT, "0x1F"), "0x1F "),
            (Token(TokenType.FLOAT_LIT, ".5"), ".5 "),
            (Token(TokenType.BOOLEAN_LIT, True), "True "),
            (Token(TokenType.BOOLEAN_LIT, False), "False "),
            (Token(TokenType.DOUBLE_SLASH_EQUALS), "//="),
            (Token(TokenType.LEFT_PAREN), "("),
            (Token(TokenType.NEWLINE), "\n"),
            (Token(TokenType.COMMENT, " note"), "# note"),
        ],
    )
    def test_canonical_forms(self, token: Token, expected: str) -> None:
        assert render(token) == expected

    def test_string_is_single_quoted(self) -> None:
        assert render(Token(TokenType.STR_LIT, "hi")) == "'hi'"

    def test_string_escapes_single_quote(self) -> None:
        assert render(Token(TokenType.STR_LIT, "it's")) == "'it\\'s'"

    def test_string_keeps_double_quote(self) -> None:
        assert render(Token(TokenType.STR_LIT, 'say "x"')) == "'say \"x\"'"

    def test_string_tags_sorted(self) -> None:
        token = Token(TokenType.STR_LIT, "x", frozenset({"f"}))
        assert render(token) == "f'x'"

    def test_indent_uses_default_width(self) -> None:
        assert render(Token(TokenType.INDENT, 2)) == " " * 8

    def test_indent_uses_given_width(self) -> None:
        assert render(Token(TokenType.INDENT, 3), LexConfig(indent_width=2)) == " " * 6


class TestWriters:
    """write_token / write_tokens / untokenize."""

    def test_write_token_to_sink(self) -> None:
        sink = StringIO()
        write_token(Token(TokenType.IDENT, "a"), sink)
        write_token(Token(TokenType.PLUS_EQUALS), sink)
        write_token(Token(TokenType.INT_LIT, "1"), sink)

        assert sink.getvalue() == "a +=1 "

    def test_write_tokens_preserves_order(self) -> None:
        sink = StringIO()
        write_tokens(tokenize("x = y\n"), sink)

        assert sink.getvalue() == "x =y \n"

    def test_sink_errors_propagate(self) -> None:
        sink = StringIO()
        sink.close()

        with pytest.raises(ValueError):
            write_token(Token(TokenType.IDENT, "a"), sink)

    def test_untokenize_empty(self) -> None:
        assert untokenize([]) == ""

    def test_untokenize_accepts_generator(self) -> None:
        tokens = (t for t in tokenize("a.b"))
        assert untokenize(tokens) == "a .b "


class TestJsonRoundTrip:
    """to_dict / from_dict / to_json / from_json."""

    def test_to_dict_without_value(self) -> None:
        assert to_dict(Token(TokenType.COLON)) == {"type": "COLON"}

    def test_to_dict_with_value(self) -> None:
        assert to_dict(Token(TokenType.INDENT, 2)) == {"type": "INDENT", "value": 2}

    def test_to_dict_string_has_sorted_tags(self) -> None:
        token = Token(TokenType.STR_LIT, "x", frozenset({"r"}))
        assert to_dict(token) == {"type": "STR_LIT", "value": "x", "tags": ["r"]}

    def test_to_dict_untagged_string_has_empty_tags(self) -> None:
        assert to_dict(Token(TokenType.STR_LIT, ""))["tags"] == []

    def test_from_dict_restores_token(self) -> None:
        data = {"type": "BOOLEAN_LIT", "value": False}
        assert from_dict(data) == Token(TokenType.BOOLEAN_LIT, False)

    def test_from_dict_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing 'type'"):
            from_dict({"value": 1})

    def test_from_dict_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict({"type": "HEREDOC"})

    def test_json_round_trip(self) -> None:
        tokens = tokenize("if f'a\\n' != None:\n    x //= 2  # halve\n")

        assert from_json(to_json(tokens)) == tokens

    def test_to_json_is_deterministic(self) -> None:
        tokens = tokenize("a = 'x'")
        assert to_json(tokens) == to_json(list(tokens))
        assert to_json(tokens).startswith('[{"type": "IDENT", "value": "a"}')

    def test_to_json_indent(self) -> None:
        assert "\n" in to_json(tokenize("a"), indent=2)

    def test_from_json_rejects_non_array(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON array"):
            from_json('{"type": "IF"}')

    def test_from_json_rejects_invalid_json(self) -> None:
        # json.JSONDecodeError is a ValueError subclass
        with pytest.raises(ValueError):
            from_json("[{")
