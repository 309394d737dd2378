"""
Error handling for the exprscan lexer.

Lexical failures reach callers as INVALID tokens. The diagnostics defined
here describe why a scan stopped, with source location information and
help text for the command line and the strict wrappers.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, RESERVED_WORDS


@dataclass
class Diagnostic:
    """A lexer diagnostic (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception carrying a lexical error diagnostic.

    Raised by the string literal parser and by the strict tokenize
    helpers; the scanner itself turns it into an INVALID token.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


def suggest_keyword_corrections(word: str) -> List[str]:
    """Suggest reserved words within one edit of ``word``."""
    candidate = word.lower()
    if candidate in RESERVED_WORDS:
        return []
    return [keyword for keyword in RESERVED_WORDS
            if _edit_distance(candidate, keyword) <= 1]


def _edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein distance between two strings."""
    if len(s1) < len(s2):
        return _edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


ERROR_CODES = {
    "L002": "Unterminated string literal",
    "L003": "Invalid character after string literal",
    "L004": "Invalid numeric literal",
    "L005": "Unexpected character in identifier",
}


def _preview(text: str, limit: int = 20) -> str:
    first_line = text.split("\n", 1)[0]
    if len(first_line) > limit:
        return first_line[:limit] + "..."
    return first_line


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to the end of input."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote', 'Check for a trailing \\ escaping the closing quote']
    )


def create_string_boundary_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a closing quote glued to a non-delimiter."""
    return LexerError(
        message=f"Invalid character after string literal: '{char}'",
        location=location,
        code="L003",
        help_text="A string literal must be followed by whitespace, punctuation or end of input.",
        suggestions=["Insert a space after the closing quote", 'Escape the quote as \\"']
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a digit run followed by a non-delimiter."""
    return LexerError(
        message=f"Invalid numeric literal: '{_preview(lexeme)}'",
        location=location,
        code="L004",
        help_text="Numbers must be followed by whitespace, punctuation or end of input.",
        suggestions=["Separate the number from the following text", "Names cannot start with a digit"]
    )


def create_invalid_identifier_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a name that runs into a double quote."""
    suggestions = suggest_keyword_corrections(lexeme)
    return LexerError(
        message=f"Unexpected character in identifier: '{_preview(lexeme)}'",
        location=location,
        code="L005",
        help_text='Names cannot contain or be directly followed by a " quote.',
        suggestions=[f"Did you mean '{keyword}'?" for keyword in suggestions] or None
    )
