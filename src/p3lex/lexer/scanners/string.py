"""String literal scanner mixin."""

from __future__ import annotations

from p3lex.config import LexConfig
from p3lex.errors import MalformedLiteralError, UnterminatedLiteralError
from p3lex.lexer.charsets import HEX_DIGITS, OCT_DIGITS, QUOTES, SIMPLE_ESCAPES
from p3lex.tokens import Token, TokenType

# Tags that switch off escape decoding when LexConfig.raw_strings is set
RAW_TAGS = frozenset("rR")


class StringScannerMixin:
    """Mixin providing string literal scanning.

    Handles the optional prefix tag, the body up to the matching quote, and
    the escape sequences ``\\' \\" \\\\ \\n \\r \\t \\xHH \\0OO``.
    Triple-quoted strings are not recognized: ``'''`` scans as an empty
    string followed by the start of another one.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _config: LexConfig

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self) -> Token:
        """Scan a (possibly tagged) string literal.

        The cursor sits on the first tag letter or on the opening quote.

        Raises:
            UnterminatedLiteralError: If input ends before the closing quote.
            MalformedLiteralError: On an unknown escape or bad escape digits.
        """
        start = self._pos
        tags: set[str] = set()
        char = self._advance()
        while char not in QUOTES:
            if not char:
                raise UnterminatedLiteralError('"', start)
            tags.add(char)
            char = self._advance()
        quote = char

        raw = self._config.raw_strings and not tags.isdisjoint(RAW_TAGS)
        parts: list[str] = []
        while True:
            if self._pos >= self._source_len:
                raise UnterminatedLiteralError(quote, start)
            char = self._advance()
            if char == "\\":
                parts.append(self._scan_escape(quote, start, raw=raw))
            elif char == quote:
                break
            else:
                parts.append(char)

        return Token(TokenType.STR_LIT, "".join(parts), frozenset(tags))

    def _scan_escape(self, quote: str, start: int, *, raw: bool = False) -> str:
        """Decode the escape sequence after a backslash.

        Args:
            quote: Quote character of the enclosing literal
            start: Offset of the enclosing literal (for unterminated errors)
            raw: Keep the sequence verbatim instead of decoding it

        Returns:
            The decoded character (or the verbatim sequence when raw).
        """
        escape_offset = self._pos - 1
        if self._pos >= self._source_len:
            raise UnterminatedLiteralError(quote, start)

        char = self._advance()
        if raw:
            return "\\" + char

        decoded = SIMPLE_ESCAPES.get(char)
        if decoded is not None:
            return decoded
        if char == "x":
            return self._scan_code_point(HEX_DIGITS, 16, "hex", quote, start, escape_offset)
        if char == "0":
            return self._scan_code_point(OCT_DIGITS, 8, "octal", quote, start, escape_offset)

        msg = f"invalid escape sequence '\\{char}'"
        raise MalformedLiteralError(msg, escape_offset)

    def _scan_code_point(
        self,
        allowed: frozenset[str],
        base: int,
        kind: str,
        quote: str,
        start: int,
        escape_offset: int,
    ) -> str:
        """Read the two digits of a ``\\x`` or ``\\0`` escape."""
        digits = self._source[self._pos : self._pos + 2]
        if len(digits) < 2:
            raise UnterminatedLiteralError(quote, start)
        if not (digits[0] in allowed and digits[1] in allowed):
            msg = f"invalid {kind} digits {digits!r} in escape sequence"
            raise MalformedLiteralError(msg, escape_offset)

        self._pos += 2
        return chr(int(digits, base))
