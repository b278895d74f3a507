"""Token serialization — canonical source text and JSON dumps.

Two output forms:
- Source text: each token written in its canonical surface form, so a
  token stream can be turned back into lexable source.
- JSON: a deterministic dump of the token stream, useful for diagnostics
  and for caching scan results.

Canonical text rules:
- Punctuation, operators, comments and NEWLINE are written with no
  trailing space.
- Keywords, identifiers, numbers and booleans are followed by one space so
  that concatenated tokens stay separable. ``else`` is the exception and
  takes no trailing space.
- ``&&`` and ``||`` are written as the keywords ``and`` and ``or``.
- String literals are always written single-quoted, with embedded single
  quotes escaped. Only the decoded value survives, so the round trip is
  semantic, not byte-exact.

Example:
    from p3lex import tokenize
    from p3lex.serialization import untokenize, to_json, from_json

    tokens = tokenize("x = 1\\n")
    untokenize(tokens)           # "x =1 \\n"
    from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from io import StringIO
from typing import Any, TextIO

from p3lex.config import LexConfig, get_lex_config
from p3lex.tokens import SYMBOLS, Token, TokenType

# Token types written as "<text> "
_SPACED_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENT,
        TokenType.INT_LIT,
        TokenType.FLOAT_LIT,
    }
)

# Keywords and logical operators whose canonical form differs from SYMBOLS
_WORD_FORMS: dict[TokenType, str] = {
    TokenType.DOUBLE_AMPERSAND: "and ",
    TokenType.DOUBLE_PIPE: "or ",
    TokenType.ELSE: "else",
}


def render(token: Token, config: LexConfig | None = None) -> str:
    """Render a token in its canonical surface form.

    Args:
        token: Token to render.
        config: Configuration supplying the indent width (defaults to the
            active context config).

    Returns:
        Source text for the token.

    """
    token_type = token.type

    word = _WORD_FORMS.get(token_type)
    if word is not None:
        return word
    if token.is_keyword:
        return f"{SYMBOLS[token_type]} "
    if token_type in _SPACED_TYPES:
        return f"{token.value} "
    if token_type is TokenType.BOOLEAN_LIT:
        return "True " if token.value else "False "
    if token_type is TokenType.STR_LIT:
        tags = "".join(sorted(token.tags))
        value = str(token.value).replace("'", "\\'")
        return f"{tags}'{value}'"
    if token_type is TokenType.COMMENT:
        return f"#{token.value}"
    if token_type is TokenType.INDENT:
        indent_width = (config or get_lex_config()).indent_width
        return " " * indent_width * int(token.value or 0)
    return SYMBOLS[token_type]


def write_token(token: Token, sink: TextIO, config: LexConfig | None = None) -> None:
    """Write one token's canonical form to a text sink.

    Errors raised by the sink (closed stream, disk full) propagate.
    """
    sink.write(render(token, config))


def write_tokens(
    tokens: Iterable[Token], sink: TextIO, config: LexConfig | None = None
) -> None:
    """Write every token of a stream to a text sink, in order."""
    config = config or get_lex_config()
    for token in tokens:
        sink.write(render(token, config))


def untokenize(tokens: Iterable[Token], config: LexConfig | None = None) -> str:
    """Render a token stream back to source text."""
    buffer = StringIO()
    write_tokens(tokens, buffer, config)
    return buffer.getvalue()


# =========================================================================
# JSON round-trip
# =========================================================================


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    ``value`` is omitted for tokens without one and ``tags`` is only
    present (sorted) for string literals.

    """
    result: dict[str, Any] = {"type": token.type.name}
    if token.value is not None:
        result["value"] = token.value
    if token.type is TokenType.STR_LIT:
        result["tags"] = sorted(token.tags)
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If ``type`` is missing or unknown.

    """
    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)

    try:
        token_type = TokenType[type_name]
    except KeyError:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg) from None

    return Token(
        type=token_type,
        value=data.get("value"),
        tags=frozenset(data.get("tags", ())),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Output is deterministic (sorted keys, sorted tags).

    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of token dicts.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
