"""Scanners for the p3lex lexer.

Each scanner is a mixin that turns one class of lexical unit into a token.
The Lexer core decides which one runs based on the character at the cursor.
"""

from __future__ import annotations

from p3lex.lexer.scanners.comment import CommentScannerMixin
from p3lex.lexer.scanners.number import NumberScannerMixin
from p3lex.lexer.scanners.operator import OperatorScannerMixin
from p3lex.lexer.scanners.string import StringScannerMixin
from p3lex.lexer.scanners.whitespace import WhitespaceScannerMixin
from p3lex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "StringScannerMixin",
    "WhitespaceScannerMixin",
    "WordScannerMixin",
]
