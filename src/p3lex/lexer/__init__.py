"""Pull-based state-machine lexer for p3lex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition, dispatch, navigation)
├── charsets.py          # Character classes and escape table
└── scanners/            # One mixin per lexical unit class
    ├── whitespace.py    # Indentation and newlines
    ├── word.py          # Identifiers, keywords, booleans
    ├── number.py        # Integer and float literals
    ├── string.py        # String literals and escapes
    ├── comment.py       # # comments
    └── operator.py      # Punctuation and operator decision trees

Usage:
    >>> from p3lex.lexer import Lexer
    >>> list(Lexer("a // b //= c"))
    [Token(IDENT, 'a'), Token(DOUBLE_SLASH), Token(IDENT, 'b'), Token(DOUBLE_SLASH_EQUALS), Token(IDENT, 'c')]

"""

from p3lex.lexer.core import Lexer

__all__ = ["Lexer"]
