"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from p3lex.lexer.charsets import ASCII_LETTERS, IDENT_CHARS, QUOTES
from p3lex.tokens import BOOLEANS, KEYWORDS, Token, TokenType


class WordScannerMixin:
    """Mixin providing identifier, keyword and boolean scanning.

    Keywords win over identifiers: any word that exactly matches a reserved
    word (case-sensitive) resolves to its keyword token.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _starts_tagged_string(self) -> bool:
        """Check for a single prefix letter directly followed by a quote.

        Only one tag is recognized: ``rf"x"`` scans as IDENT ``rf`` followed
        by an untagged string.
        """
        pos = self._pos
        return (
            pos + 1 < self._source_len
            and self._source[pos] in ASCII_LETTERS
            and self._source[pos + 1] in QUOTES
        )

    def _scan_word(self) -> Token:
        """Scan an identifier and resolve it against the keyword tables."""
        start = self._pos
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len and source[pos] in IDENT_CHARS:
            pos += 1
        self._pos = pos

        text = source[start:pos]
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return Token(keyword)
        if text in BOOLEANS:
            return Token(TokenType.BOOLEAN_LIT, BOOLEANS[text])
        return Token(TokenType.IDENT, text)
