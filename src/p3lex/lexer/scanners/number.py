"""Numeric literal scanner mixin."""

from __future__ import annotations

from p3lex.lexer.charsets import DIGITS, HEX_LETTERS, NUMBER_MARKERS
from p3lex.tokens import Token, TokenType


class NumberScannerMixin:
    """Mixin providing integer and float literal scanning.

    Literals keep their exact source text. Nothing is parsed or validated
    here: ``1..2`` and ``0xb`` are accepted as written, and a consumer that
    needs the numeric value must parse it with arbitrary precision itself.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _scan_number(self) -> Token:
        """Scan digits, ``x``/``b`` markers and dots.

        Any dot makes the literal a FLOAT_LIT. Once an ``x`` marker has been
        consumed, hex letters are part of the literal as well.
        """
        start = self._pos
        source = self._source
        source_len = self._source_len
        pos = start
        is_float = False
        is_hex = False

        while pos < source_len:
            char = source[pos]
            if char == ".":
                is_float = True
            elif char == "x":
                is_hex = True
            elif char in DIGITS or char in NUMBER_MARKERS:
                pass
            elif is_hex and char in HEX_LETTERS:
                pass
            else:
                break
            pos += 1
        self._pos = pos

        text = source[start:pos]
        if is_float:
            return Token(TokenType.FLOAT_LIT, text)
        return Token(TokenType.INT_LIT, text)
