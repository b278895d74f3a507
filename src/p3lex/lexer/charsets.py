"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII is recognized; anything outside these sets that is not an
operator is an unsupported character.

Usage:
    from p3lex.lexer.charsets import IDENT_START

    if char in IDENT_START:  # O(1) lookup
        ...
"""

import string

DIGITS: frozenset[str] = frozenset(string.digits)

ASCII_LETTERS: frozenset[str] = frozenset(string.ascii_letters)

IDENT_START: frozenset[str] = ASCII_LETTERS | frozenset("_")

IDENT_CHARS: frozenset[str] = IDENT_START | DIGITS

QUOTES: frozenset[str] = frozenset("'\"")

# ASCII whitespace minus the newline, which is significant
WHITESPACE: frozenset[str] = frozenset(" \t\r\f")

HEX_DIGITS: frozenset[str] = frozenset(string.hexdigits)

OCT_DIGITS: frozenset[str] = frozenset(string.octdigits)

# Letters accepted inside a numeric literal before any hex marker
NUMBER_MARKERS: frozenset[str] = frozenset("xb")

# Hex letters, accepted only after an ``x`` marker
HEX_LETTERS: frozenset[str] = frozenset("abcdefABCDEF")

# Backslash escapes that map to exactly one character
SIMPLE_ESCAPES: dict[str, str] = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
