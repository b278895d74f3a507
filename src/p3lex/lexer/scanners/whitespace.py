"""Whitespace and indentation scanner mixin."""

from __future__ import annotations

from p3lex.config import LexConfig
from p3lex.errors import MalformedIndentError
from p3lex.tokens import Token, TokenType


class WhitespaceScannerMixin:
    """Mixin providing indentation and newline scanning.

    Leading spaces only mean something while the start-of-line flag is set.
    Everywhere else whitespace is discarded by the dispatcher.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _config: LexConfig

    def _scan_leading_spaces(self) -> Token | None:
        """Turn a run of leading spaces into an INDENT token.

        A lone space is tolerated noise and produces nothing; the caller keeps
        scanning with the start-of-line flag still set.

        Returns:
            INDENT token, or None for a single discarded space.

        Raises:
            MalformedIndentError: If the run is not a whole number of units.
        """
        start = self._pos
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len and source[pos] == " ":
            pos += 1
        self._pos = pos

        width = pos - start
        if width == 1:
            return None

        indent_width = self._config.indent_width
        if width % indent_width:
            raise MalformedIndentError(width, indent_width, start)
        return Token(TokenType.INDENT, width // indent_width)

    def _scan_newline(self) -> Token:
        """Consume a newline character."""
        self._pos += 1
        return Token(TokenType.NEWLINE)
