"""
Token definitions for the exprscan lexer.

This module defines every token kind the scanner can produce:
- Literals (floats, integers, strings)
- Names and reserved words
- Single-character punctuation
- The INVALID marker used to report a lexical failure

It also holds the two fixed lookup tables (reserved words, punctuation)
and the delimiter character class shared by the matchers.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token kinds.

    Organized by category for clarity.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    FLOAT = auto()                  # 15.41, -.5
    INT = auto()                    # 42, -7
    STRING = auto()                 # "hello\n"

    # ========================================================================
    # Names and reserved words
    # ========================================================================
    NAME = auto()                   # n, iffy, +

    DEF = auto()                    # def
    IF = auto()                     # if
    FUN = auto()                    # fun
    NOT = auto()                    # not
    AND = auto()                    # and
    OR = auto()                     # or

    # ========================================================================
    # Punctuation
    # ========================================================================
    OPAREN = auto()                 # (
    CPAREN = auto()                 # )
    OBRACE = auto()                 # {
    CBRACE = auto()                 # }
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    PERIOD = auto()                 # .

    # ========================================================================
    # Errors
    # ========================================================================
    INVALID = auto()                # Unlexable residual input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and for the command line token dump.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of text

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


def location_at(text: str, offset: int, filename: str = "<string>") -> SourceLocation:
    """Compute the 1-based line/column of ``offset`` within ``text``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return SourceLocation(filename, line, column, offset)


@dataclass(frozen=True)
class Token:
    """
    A classified unit of source text.

    Carries the token kind, the raw lexeme, the payload (number, name,
    decoded string or offending text) and the location of its first
    character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Payload, None for punctuation and reserved words
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_punctuation(self) -> bool:
        return self.type in PUNCTUATION_TYPES

    @property
    def is_invalid(self) -> bool:
        return self.type == TokenType.INVALID


# Lookup tables used by the lexer. Both are read-only process-wide constants.

RESERVED_WORDS = MappingProxyType({
    "def": TokenType.DEF,
    "if": TokenType.IF,
    "fun": TokenType.FUN,
    "not": TokenType.NOT,
    "and": TokenType.AND,
    "or": TokenType.OR,
})

# Reserved words are matched by uppercasing the candidate lexeme
RESERVED_WORDS_UPPER = MappingProxyType(
    {word.upper(): token_type for word, token_type in RESERVED_WORDS.items()}
)

PUNCTUATION = MappingProxyType({
    "(": TokenType.OPAREN,
    ")": TokenType.CPAREN,
    "{": TokenType.OBRACE,
    "}": TokenType.CBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ".": TokenType.PERIOD,
})

WHITESPACE = " \t\r\n"

# Characters that may follow a number, name or string literal
DELIMITERS = frozenset(WHITESPACE) | frozenset(PUNCTUATION)

LITERAL_TYPES = frozenset({
    TokenType.FLOAT, TokenType.INT, TokenType.STRING,
})

KEYWORD_TYPES = frozenset(RESERVED_WORDS.values())

PUNCTUATION_TYPES = frozenset(PUNCTUATION.values())
