"""Token and TokenType definitions for the p3lex scanner.

The lexer produces a stream of Token objects that a consumer (serializer,
JSON dump, or a future parser) pulls one at a time. Each Token has a type
and, for the literal-like kinds, a value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structural punctuation
    - Operators (bare, compound-assignment and doubled forms)
    - Literals
    - Whitespace-significant tokens and comments
    - Keywords (one per reserved word)

    """

    # Structural punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_CURLY = auto()  # {
    RIGHT_CURLY = auto()  # }
    LEFT_SQUARE = auto()  # [
    RIGHT_SQUARE = auto()  # ]
    LEFT_ANGLE = auto()  # <
    RIGHT_ANGLE = auto()  # >
    COLON = auto()  # :
    COLON_EQUALS = auto()  # :=
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    DOT = auto()  # .
    THIN_ARROW = auto()  # ->

    # Operators
    EQUAL = auto()  # =
    DOUBLE_EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    PLUS = auto()  # +
    PLUS_EQUALS = auto()  # +=
    MINUS = auto()  # -
    MINUS_EQUALS = auto()  # -=
    ASTERISK = auto()  # *
    ASTERISK_EQUALS = auto()  # *=
    DOUBLE_ASTERISK = auto()  # **
    DOUBLE_ASTERISK_EQUALS = auto()  # **=
    SLASH = auto()  # /
    SLASH_EQUALS = auto()  # /=
    DOUBLE_SLASH = auto()  # //
    DOUBLE_SLASH_EQUALS = auto()  # //=
    PERCENT = auto()  # %
    PERCENT_EQUALS = auto()  # %=
    AMPERSAND = auto()  # &
    AMPERSAND_EQUALS = auto()  # &=
    DOUBLE_AMPERSAND = auto()  # &&
    PIPE = auto()  # |
    PIPE_EQUALS = auto()  # |=
    DOUBLE_PIPE = auto()  # ||
    LEFT_SHIFT = auto()  # <<
    LEFT_SHIFT_EQUALS = auto()  # <<=
    RIGHT_SHIFT = auto()  # >>
    RIGHT_SHIFT_EQUALS = auto()  # >>=

    # Literals
    IDENT = auto()
    INT_LIT = auto()  # exact source digits
    FLOAT_LIT = auto()  # exact source digits
    BOOLEAN_LIT = auto()
    STR_LIT = auto()  # decoded value + prefix tags

    # Whitespace-significant and trivia
    NEWLINE = auto()
    INDENT = auto()  # value is the level, not a space count
    COMMENT = auto()

    # Keywords
    AND = auto()
    AS = auto()
    ASSERT = auto()
    BREAK = auto()
    CLASS = auto()
    CONTINUE = auto()
    DEF = auto()
    DEL = auto()
    ELIF = auto()
    ELSE = auto()
    EXCEPT = auto()
    FINALLY = auto()
    FOR = auto()
    FROM = auto()
    GLOBAL = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    IS = auto()
    LAMBDA = auto()
    NONE = auto()
    NONLOCAL = auto()
    NOT = auto()
    OR = auto()
    PASS = auto()
    RAISE = auto()
    RETURN = auto()
    TRY = auto()
    WHILE = auto()
    WITH = auto()
    YIELD = auto()


# Reserved words, matched case-sensitively against identifier text
KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "as": TokenType.AS,
    "assert": TokenType.ASSERT,
    "break": TokenType.BREAK,
    "class": TokenType.CLASS,
    "continue": TokenType.CONTINUE,
    "def": TokenType.DEF,
    "del": TokenType.DEL,
    "elif": TokenType.ELIF,
    "else": TokenType.ELSE,
    "except": TokenType.EXCEPT,
    "finally": TokenType.FINALLY,
    "for": TokenType.FOR,
    "from": TokenType.FROM,
    "global": TokenType.GLOBAL,
    "if": TokenType.IF,
    "import": TokenType.IMPORT,
    "in": TokenType.IN,
    "is": TokenType.IS,
    "lambda": TokenType.LAMBDA,
    "None": TokenType.NONE,
    "nonlocal": TokenType.NONLOCAL,
    "not": TokenType.NOT,
    "or": TokenType.OR,
    "pass": TokenType.PASS,
    "raise": TokenType.RAISE,
    "return": TokenType.RETURN,
    "try": TokenType.TRY,
    "while": TokenType.WHILE,
    "with": TokenType.WITH,
    "yield": TokenType.YIELD,
}

# Both capitalizations are accepted for boolean literals
BOOLEANS: dict[str, bool] = {
    "True": True,
    "true": True,
    "False": False,
    "false": False,
}

# Canonical surface text for every token type that carries no value
SYMBOLS: dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_CURLY: "{",
    TokenType.RIGHT_CURLY: "}",
    TokenType.LEFT_SQUARE: "[",
    TokenType.RIGHT_SQUARE: "]",
    TokenType.LEFT_ANGLE: "<",
    TokenType.RIGHT_ANGLE: ">",
    TokenType.COLON: ":",
    TokenType.COLON_EQUALS: ":=",
    TokenType.SEMICOLON: ";",
    TokenType.COMMA: ",",
    TokenType.DOT: ".",
    TokenType.THIN_ARROW: "->",
    TokenType.EQUAL: "=",
    TokenType.DOUBLE_EQUAL: "==",
    TokenType.NOT_EQUAL: "!=",
    TokenType.PLUS: "+",
    TokenType.PLUS_EQUALS: "+=",
    TokenType.MINUS: "-",
    TokenType.MINUS_EQUALS: "-=",
    TokenType.ASTERISK: "*",
    TokenType.ASTERISK_EQUALS: "*=",
    TokenType.DOUBLE_ASTERISK: "**",
    TokenType.DOUBLE_ASTERISK_EQUALS: "**=",
    TokenType.SLASH: "/",
    TokenType.SLASH_EQUALS: "/=",
    TokenType.DOUBLE_SLASH: "//",
    TokenType.DOUBLE_SLASH_EQUALS: "//=",
    TokenType.PERCENT: "%",
    TokenType.PERCENT_EQUALS: "%=",
    TokenType.AMPERSAND: "&",
    TokenType.AMPERSAND_EQUALS: "&=",
    TokenType.DOUBLE_AMPERSAND: "&&",
    TokenType.PIPE: "|",
    TokenType.PIPE_EQUALS: "|=",
    TokenType.DOUBLE_PIPE: "||",
    TokenType.LEFT_SHIFT: "<<",
    TokenType.LEFT_SHIFT_EQUALS: "<<=",
    TokenType.RIGHT_SHIFT: ">>",
    TokenType.RIGHT_SHIFT_EQUALS: ">>=",
    TokenType.NEWLINE: "\n",
    **{token_type: word for word, token_type in KEYWORDS.items()},
}

KEYWORD_TYPES: frozenset[TokenType] = frozenset(KEYWORDS.values())

LITERAL_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENT,
        TokenType.INT_LIT,
        TokenType.FLOAT_LIT,
        TokenType.BOOLEAN_LIT,
        TokenType.STR_LIT,
    }
)

OPERATOR_TYPES: frozenset[TokenType] = frozenset(
    token_type
    for token_type in SYMBOLS
    if token_type not in KEYWORD_TYPES and token_type is not TokenType.NEWLINE
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Payload for literal-like tokens:
            - IDENT, INT_LIT, FLOAT_LIT, COMMENT: the source text (str)
            - STR_LIT: the escape-decoded string (str)
            - BOOLEAN_LIT: the resolved bool
            - INDENT: the indentation level (int, >= 1)
            - everything else: None
        tags: Prefix letters that preceded a string literal's opening quote.
            Always empty for non-string tokens.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str | int | bool | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.STR_LIT:
            return f"Token({self.type.name}, {self.value!r}, tags={''.join(sorted(self.tags))!r})"
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        """Check if this token carries literal source data."""
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is punctuation or an operator."""
        return self.type in OPERATOR_TYPES
