"""
exprscan Lexer Package

Implements the longest-match lexical scanner for the expression language.

Key Features:
- Fixed-order, longest-match token identification
- Block (/* */) and line (//) comments discarded during scanning
- Escape-aware string literal decoding
- Lexical errors reported as a terminal INVALID token with a diagnostic
- Source location tracking for every token
"""

from .tokens import Token, TokenType, SourceLocation, RESERVED_WORDS, PUNCTUATION
from .lexer import Lexer, scan, identify, render_tokens, tokenize_string, tokenize_file
from .strings import StringState, parse_string_literal
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "RESERVED_WORDS",
    "PUNCTUATION",
    "StringState",
    "parse_string_literal",
    "LexerError",
    "Diagnostic",
    "scan",
    "identify",
    "render_tokens",
    "tokenize_string",
    "tokenize_file",
]
