"""Punctuation and operator scanner mixin."""

from __future__ import annotations

from p3lex.config import LexConfig
from p3lex.errors import UnsupportedCharacterError
from p3lex.tokens import Token, TokenType

# Characters that are always a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_CURLY,
    "}": TokenType.RIGHT_CURLY,
    "[": TokenType.LEFT_SQUARE,
    "]": TokenType.RIGHT_SQUARE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

# Leading symbols whose only extension is a trailing "=": (bare, with "=")
EQUALS_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    ":": (TokenType.COLON, TokenType.COLON_EQUALS),
    "+": (TokenType.PLUS, TokenType.PLUS_EQUALS),
    "%": (TokenType.PERCENT, TokenType.PERCENT_EQUALS),
    "=": (TokenType.EQUAL, TokenType.DOUBLE_EQUAL),
}

# Leading symbols that may double and then take "=":
# (bare, bare with "=", doubled, doubled with "=")
DOUBLING_FAMILIES: dict[str, tuple[TokenType, TokenType | None, TokenType, TokenType | None]] = {
    "*": (
        TokenType.ASTERISK,
        TokenType.ASTERISK_EQUALS,
        TokenType.DOUBLE_ASTERISK,
        TokenType.DOUBLE_ASTERISK_EQUALS,
    ),
    "/": (
        TokenType.SLASH,
        TokenType.SLASH_EQUALS,
        TokenType.DOUBLE_SLASH,
        TokenType.DOUBLE_SLASH_EQUALS,
    ),
    "<": (
        TokenType.LEFT_ANGLE,
        None,
        TokenType.LEFT_SHIFT,
        TokenType.LEFT_SHIFT_EQUALS,
    ),
    ">": (
        TokenType.RIGHT_ANGLE,
        None,
        TokenType.RIGHT_SHIFT,
        TokenType.RIGHT_SHIFT_EQUALS,
    ),
    "&": (
        TokenType.AMPERSAND,
        TokenType.AMPERSAND_EQUALS,
        TokenType.DOUBLE_AMPERSAND,
        None,
    ),
    "|": (
        TokenType.PIPE,
        TokenType.PIPE_EQUALS,
        TokenType.DOUBLE_PIPE,
        None,
    ),
}


class OperatorScannerMixin:
    """Mixin providing operator scanning with one character of lookahead.

    Every decision prefers the longest valid match: ``**=`` beats ``**``
    beats ``*``, and ``//=`` is never split into ``//`` followed by ``=``.
    ``<=`` and ``>=`` are not operators here; they scan as an angle bracket
    followed by EQUAL.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _config: LexConfig

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming. Implemented by Lexer."""
        raise NotImplementedError

    def _take(self, expected: str) -> bool:
        """Consume the next character if it is ``expected``."""
        if self._peek() == expected:
            self._pos += 1
            return True
        return False

    def _scan_operator(self) -> Token:
        """Scan punctuation or an operator starting at the cursor.

        Raises:
            UnsupportedCharacterError: If no operator starts with the character.
        """
        start = self._pos
        char = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            return Token(token_type)

        pair = EQUALS_PAIRS.get(char)
        if pair is not None:
            bare, with_equals = pair
            return Token(with_equals if self._take("=") else bare)

        family = DOUBLING_FAMILIES.get(char)
        if family is not None:
            return Token(self._resolve_doubling(char, family))

        if char == "-":
            if self._take("="):
                return Token(TokenType.MINUS_EQUALS)
            if self._take(">"):
                return Token(TokenType.THIN_ARROW)
            return Token(TokenType.MINUS)

        if char == "!" and self._take("="):
            return Token(TokenType.NOT_EQUAL)

        raise self._unsupported(start)

    def _resolve_doubling(
        self,
        char: str,
        family: tuple[TokenType, TokenType | None, TokenType, TokenType | None],
    ) -> TokenType:
        """Walk the two-step decision tree for a doubling operator."""
        bare, bare_equals, doubled, doubled_equals = family
        if self._take(char):
            if doubled_equals is not None and self._take("="):
                return doubled_equals
            return doubled
        if bare_equals is not None and self._take("="):
            return bare_equals
        return bare

    def _unsupported(self, offset: int) -> UnsupportedCharacterError:
        """Build the error for an unrecognized character at ``offset``."""
        width = self._config.error_context
        context = self._source[max(0, offset - width) : offset + width + 1]
        return UnsupportedCharacterError(self._source[offset], offset, context)
