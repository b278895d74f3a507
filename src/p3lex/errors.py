"""Exception classes for p3lex.

Every malformed-input condition the scanner can hit is raised as a typed
exception at the point of detection. None of them are recoverable: the
lexer that raised cannot be resumed.
"""

from __future__ import annotations


class P3LexError(Exception):
    """Base exception for all p3lex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(P3LexError):
    """Error during scanning.

    Raised when the lexer encounters input it cannot turn into a token.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        context: str | None = None,
    ) -> None:
        """Initialize lex error with optional position.

        Args:
            message: Error description
            offset: Cursor index in the source where the error was detected
            context: Source text surrounding the failure point (optional)
        """
        self.message = message
        self.offset = offset
        self.context = context

        location = f"offset {offset}: " if offset is not None else ""
        text = f"{location}{message}"
        if context is not None:
            text += f" (context: {context!r})"

        super().__init__(text)


class MalformedIndentError(LexError):
    """A run of leading spaces that is not a whole number of indent units."""

    def __init__(
        self,
        width: int,
        indent_width: int,
        offset: int | None = None,
    ) -> None:
        """Initialize indentation error.

        Args:
            width: Number of leading spaces found
            indent_width: Configured width of one indentation unit
            offset: Cursor index where the run started
        """
        self.width = width
        self.indent_width = indent_width
        super().__init__(
            f"indentation of {width} spaces is not a multiple of {indent_width}",
            offset,
        )


class MalformedLiteralError(LexError):
    """Invalid escape sequence or bad digits inside a string literal."""

    pass


class UnterminatedLiteralError(MalformedLiteralError):
    """A string literal ran into the end of input before its closing quote."""

    def __init__(self, quote: str, offset: int | None = None) -> None:
        """Initialize unterminated literal error.

        Args:
            quote: The quote character that opened the literal
            offset: Cursor index of the opening quote
        """
        self.quote = quote
        super().__init__(f"unterminated string literal, missing closing {quote}", offset)


class UnsupportedCharacterError(LexError):
    """A character that no scanning rule accepts."""

    def __init__(self, char: str, offset: int, context: str) -> None:
        """Initialize unsupported character error.

        Args:
            char: The offending character
            offset: Cursor index of the character
            context: Window of source text around the character
        """
        self.char = char
        super().__init__(f"unsupported character {char!r}", offset, context)
