"""Comment scanner mixin."""

from __future__ import annotations

from p3lex.tokens import Token, TokenType


class CommentScannerMixin:
    """Mixin providing ``#`` comment scanning."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _scan_comment(self) -> Token:
        """Scan from ``#`` up to, not including, the newline or end of input.

        The marker is dropped; the newline is left for the dispatcher so it
        still produces a NEWLINE token.
        """
        start = self._pos + 1
        end = self._source.find("\n", start)
        if end == -1:
            end = self._source_len
        self._pos = end
        return Token(TokenType.COMMENT, self._source[start:end])
