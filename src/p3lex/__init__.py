"""
p3lex — Lexer for an indentation-sensitive, Python-like surface syntax

Turns source text into a flat stream of typed tokens and writes tokens back
out as source text. Features a pull-based scanner, one-character-lookahead
operator resolution, and zero runtime dependencies.

Quick Start:
    >>> from p3lex import tokenize, untokenize
    >>> tokens = tokenize("if x == 1:\\n    y = 2\\n")
    >>> tokens[:3]
    [Token(IF), Token(IDENT, 'x'), Token(DOUBLE_EQUAL)]
    >>> untokenize(tokens)
    'if x ==1 :\\n    y =2 \\n'

    >>> # Or pull tokens one at a time
    >>> from p3lex import Lexer
    >>> lexer = Lexer("a //= b")
    >>> lexer.next_token()
    Token(IDENT, 'a')

Installation:
    pip install p3lex              # Core lexer (zero deps)
    pip install p3lex[test]        # + pytest and hypothesis
"""

from collections.abc import Iterable

from p3lex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from p3lex.errors import (
    LexError,
    MalformedIndentError,
    MalformedLiteralError,
    P3LexError,
    UnsupportedCharacterError,
    UnterminatedLiteralError,
)
from p3lex.lexer import Lexer
from p3lex.serialization import (
    from_json,
    render,
    to_json,
    write_token,
    write_tokens,
)
from p3lex.serialization import untokenize as _untokenize
from p3lex.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, config: LexConfig | None = None) -> list[Token]:
    """Scan source text to exhaustion.

    Args:
        source: Complete source text
        config: Lexer configuration (uses the active context config if None)

    Returns:
        Every token in source order.

    Raises:
        LexError: On malformed input.

    Example:
        >>> tokenize("0x1F + 3.14")
        [Token(INT_LIT, '0x1F'), Token(PLUS), Token(FLOAT_LIT, '3.14')]
    """
    return list(Lexer(source, config=config))


def untokenize(tokens: Iterable[Token], *, config: LexConfig | None = None) -> str:
    """Render tokens back to source text.

    Example:
        >>> untokenize([Token(TokenType.IDENT, "a"), Token(TokenType.DOUBLE_SLASH)])
        'a //'
    """
    return _untokenize(tokens, config)


__all__ = [
    # Main API
    "tokenize",
    "untokenize",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    # Serialization
    "render",
    "write_token",
    "write_tokens",
    "to_json",
    "from_json",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "P3LexError",
    "LexError",
    "MalformedIndentError",
    "MalformedLiteralError",
    "UnterminatedLiteralError",
    "UnsupportedCharacterError",
    # Version
    "__version__",
]
