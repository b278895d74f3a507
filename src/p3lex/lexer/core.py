"""Pull-based state-machine lexer.

Scans one token per call, character by character, with at most one
character of lookahead for operator disambiguation. The consumer controls
pacing: no work happens until the next token is requested.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from p3lex.config import LexConfig, get_lex_config
from p3lex.lexer.charsets import DIGITS, IDENT_START, QUOTES, WHITESPACE
from p3lex.lexer.scanners import (
    CommentScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    StringScannerMixin,
    WhitespaceScannerMixin,
    WordScannerMixin,
)
from p3lex.tokens import Token, TokenType


class Lexer(
    WhitespaceScannerMixin,
    WordScannerMixin,
    NumberScannerMixin,
    StringScannerMixin,
    CommentScannerMixin,
    OperatorScannerMixin,
):
    """Pull-based lexer over a complete source string.

    Dispatch order for each call to ``next_token()``:
    1. Leading spaces at the start of a logical line (INDENT)
    2. Newline (NEWLINE), other whitespace is skipped
    3. Letter + quote (tagged string), letter/underscore (identifier/keyword)
    4. Digit, or dot + digit (number)
    5. Quote (string)
    6. ``#`` (comment)
    7. Operators and punctuation, anything else is an error

    Usage:
            >>> lexer = Lexer("if x == 1:\\n    y = 2\\n")
            >>> for token in lexer:
            ...     print(token)
        Token(IF)
        Token(IDENT, 'x')
        Token(DOUBLE_EQUAL)
        Token(INT_LIT, '1')
        Token(COLON)
        Token(NEWLINE)
        Token(INDENT, 1)
        Token(IDENT, 'y')
        Token(EQUAL)
        Token(INT_LIT, '2')
        Token(NEWLINE)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_start_of_line",
        "_config",
    )

    def __init__(self, source: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Complete, already-decoded source text
            config: Lexer configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._start_of_line = True
        self._config = config if config is not None else get_lex_config()

    @property
    def position(self) -> int:
        """Index of the next unconsumed character."""
        return self._pos

    @property
    def at_line_start(self) -> bool:
        """Whether leading spaces would currently be read as indentation."""
        return self._start_of_line

    @property
    def config(self) -> LexConfig:
        return self._config

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source into a token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def next_token(self) -> Token | None:
        """Scan the next token.

        Returns:
            The next Token, or None once the source is exhausted.

        Raises:
            LexError: On malformed input. The lexer cannot continue afterwards.
        """
        token = self._dispatch()
        if token is not None:
            self._start_of_line = token.type is TokenType.NEWLINE
        return token

    def _dispatch(self) -> Token | None:
        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]

            if char == " " and self._start_of_line:
                token = self._scan_leading_spaces()
                if token is None:
                    continue
                return token
            if char == "\n":
                return self._scan_newline()
            if char in WHITESPACE:
                self._pos += 1
                continue

            if self._starts_tagged_string():
                return self._scan_string()
            if char in IDENT_START:
                return self._scan_word()
            if char in DIGITS or (char == "." and self._peek(1) in DIGITS):
                return self._scan_number()
            if char in QUOTES:
                return self._scan_string()
            if char == "#":
                return self._scan_comment()
            return self._scan_operator()
        return None

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character without advancing.

        Args:
            offset: Distance from the cursor (0 is the current character)

        Returns:
            The character, or empty string past the end of input.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._pos += 1
        return char
