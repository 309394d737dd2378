"""
exprscan lexer - turns source text into a flat list of tokens

Each step trims whitespace off the remaining input and tries the token
categories in a fixed order: block comment, line comment, float, integer,
name/reserved word, punctuation, string literal. The first category that
matches wins; each matcher is greedy on its own so that ordering plus
greediness gives longest-match behaviour. Anything else ends the scan
with a single INVALID token holding the rest of the input.
"""

import logging
import re
import sys
from decimal import Decimal
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, RESERVED_WORDS_UPPER, PUNCTUATION, WHITESPACE
)
from .errors import (
    LexerError, create_invalid_number_error, create_invalid_identifier_error
)
from .strings import parse_string_literal

logger = logging.getLogger(__name__)


# Numbers and names must end right before one of these (or end of input)
_DELIMITER_CHARS = r' \t\r\n(){},;.'
_FOLLOWED_BY_DELIMITER = r'(?=[' + _DELIMITER_CHARS + r']|\Z)'

BLOCK_COMMENT_PATTERN = re.compile(r'/\*.*?\*/', re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(r'//[^\n]*')
FLOAT_PATTERN = re.compile(r'[+-]?[0-9]*\.[0-9]+' + _FOLLOWED_BY_DELIMITER)
INT_PATTERN = re.compile(r'[+-]?[0-9]+' + _FOLLOWED_BY_DELIMITER)
NAME_PATTERN = re.compile(
    r'[^0-9"' + _DELIMITER_CHARS + r'][^"' + _DELIMITER_CHARS + r']*' + _FOLLOWED_BY_DELIMITER
)

# Order matters: literals before names and punctuation so "15.4" is one
# FLOAT, comments before everything. A None kind means "discard".
TOKEN_MATCHERS: Tuple[Tuple["re.Pattern[str]", Optional[TokenType]], ...] = (
    (BLOCK_COMMENT_PATTERN, None),
    (LINE_COMMENT_PATTERN, None),
    (FLOAT_PATTERN, TokenType.FLOAT),
    (INT_PATTERN, TokenType.INT),
    (NAME_PATTERN, TokenType.NAME),
)

# Used only to explain an INVALID token
_NUMBER_START_PATTERN = re.compile(r'[0-9]')
_UNDELIMITED_RUN_PATTERN = re.compile(r'[^' + _DELIMITER_CHARS + r']+')
_NAME_BEFORE_QUOTE_PATTERN = re.compile(
    r'[^0-9"' + _DELIMITER_CHARS + r'][^"' + _DELIMITER_CHARS + r']*(?=")'
)


def parse_int_literal(lexeme: str) -> int:
    """
    Convert a signed digit run to an int of any length.

    ``int()`` refuses strings beyond the interpreter's digit limit
    (4300 by default on 3.11+); Decimal parsing has no such limit.
    """
    try:
        return int(lexeme)
    except ValueError:
        return int(Decimal(lexeme))


class Lexer:
    """
    Scanner for the expression language.

    Walks the source with an index instead of slicing, so the caller's
    text is never copied or modified. A Lexer holds per-scan state and
    should not be shared between threads; use ``scan`` for one-off calls.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Text to scan
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.end = len(source)
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens in source order. If lexing failed, the last
            token is INVALID and ``errors`` holds its diagnostic.
        """
        self.pos = 0
        self.end = len(self.source)
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        while True:
            self._trim_whitespace()
            if self.pos >= self.end:
                break

            token, new_pos = self._next_token()
            if token is not None:
                self.tokens.append(token)
            self._advance_to(new_pos)

        logger.debug("Scanned %d tokens from %s", len(self.tokens), self.filename)
        return self.tokens

    def _next_token(self) -> Tuple[Optional[Token], int]:
        """
        Identify the token starting at the current position.

        Returns:
            (token, new position); token is None when a comment was skipped
        """
        start = self.pos

        for pattern, token_type in TOKEN_MATCHERS:
            match = pattern.match(self.source, start, self.end)
            if match is None:
                continue
            if token_type is None:
                return None, match.end()
            return self._make_token(token_type, match.group(0)), match.end()

        current_char = self.source[start]

        if current_char in PUNCTUATION:
            return Token(PUNCTUATION[current_char], current_char, None, self._location()), start + 1

        if current_char == '"':
            try:
                value, new_pos = parse_string_literal(
                    self.source, start + 1, self.end, self.filename
                )
            except LexerError as e:
                return self._invalid(e), self.end
            lexeme = self.source[start:new_pos]
            return Token(TokenType.STRING, lexeme, value, self._location()), new_pos

        return self._invalid(self._diagnose()), self.end

    def _make_token(self, token_type: TokenType, lexeme: str) -> Token:
        location = self._location()

        if token_type == TokenType.FLOAT:
            return Token(token_type, lexeme, float(lexeme), location)
        if token_type == TokenType.INT:
            return Token(token_type, lexeme, parse_int_literal(lexeme), location)

        keyword = RESERVED_WORDS_UPPER.get(lexeme.upper())
        if keyword is not None:
            return Token(keyword, lexeme, None, location)
        return Token(TokenType.NAME, lexeme, sys.intern(lexeme), location)

    def _invalid(self, error: LexerError) -> Token:
        """Wrap the rest of the input as the terminal INVALID token."""
        self.errors.append(error)
        logger.debug("Lexing stopped at %s: %s", error.location, error.args[0])
        residue = self.source[self.pos:self.end]
        return Token(TokenType.INVALID, residue, residue, self._location())

    def _diagnose(self) -> LexerError:
        """Work out why nothing matched at the current position."""
        location = self._location()

        if _NUMBER_START_PATTERN.match(self.source, self.pos, self.end):
            run = _UNDELIMITED_RUN_PATTERN.match(self.source, self.pos, self.end)
            return create_invalid_number_error(run.group(0), location)

        # Past trimming, punctuation and quotes, a name only fails when
        # its run stops at a double quote
        name = _NAME_BEFORE_QUOTE_PATTERN.match(self.source, self.pos, self.end)
        return create_invalid_identifier_error(name.group(0), location)

    def _trim_whitespace(self):
        """Drop whitespace from both ends of the unconsumed input."""
        while self.end > self.pos and self.source[self.end - 1] in WHITESPACE:
            self.end -= 1
        new_pos = self.pos
        while new_pos < self.end and self.source[new_pos] in WHITESPACE:
            new_pos += 1
        self._advance_to(new_pos)

    def _advance_to(self, new_pos: int):
        """Move forward to ``new_pos``, updating line/column."""
        newlines = self.source.count('\n', self.pos, new_pos)
        if newlines:
            self.line += newlines
            self.column = new_pos - self.source.rfind('\n', self.pos, new_pos)
        else:
            self.column += new_pos - self.pos
        self.pos = new_pos

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_errors(self) -> bool:
        """Check if the last scan ended in an INVALID token."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        return list(self.errors)


def scan(text: str, filename: str = "<string>") -> List[Token]:
    """
    Scan ``text`` into tokens.

    Never raises for bad input: a lexical error shows up as a trailing
    INVALID token.
    """
    return Lexer(text, filename).tokenize()


def identify(cursor: str) -> Tuple[Optional[Token], str]:
    """
    Identify the single next token at the start of ``cursor``.

    Args:
        cursor: Non-empty remaining input, already trimmed

    Returns:
        (token or None for a skipped comment, unconsumed remainder)
    """
    lexer = Lexer(cursor)
    token, new_pos = lexer._next_token()
    return token, cursor[new_pos:]


def render_tokens(tokens: List[Token]) -> str:
    """Rebuild source text from tokens, one space between lexemes."""
    return ' '.join(token.lexeme for token in tokens)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
