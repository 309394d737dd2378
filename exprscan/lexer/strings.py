"""
String literal decoding.

A two-state machine walks the literal body one character at a time,
building the decoded text. Only ``\\n`` is a named escape; a backslash
before any other character yields that character unchanged.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

from .tokens import DELIMITERS, location_at
from .errors import create_unterminated_string_error, create_string_boundary_error


class StringState(Enum):
    NORMAL = auto()
    ESCAPED = auto()


ESCAPE_SEQUENCES = {
    'n': '\n',
}


def parse_string_literal(
    text: str,
    start: int,
    end: Optional[int] = None,
    filename: str = "<string>"
) -> Tuple[str, int]:
    """
    Decode a string literal body.

    Args:
        text: Source text
        start: Index of the first character after the opening quote
        end: Index where the input stops (defaults to ``len(text)``)
        filename: Name used in error locations

    Returns:
        Tuple of (decoded text, index just past the closing quote)

    Raises:
        LexerError: L002 if the input ends inside the literal, L003 if the
            closing quote is followed by something other than a delimiter
    """
    if end is None:
        end = len(text)

    state = StringState.NORMAL
    value_parts: List[str] = []
    pos = start

    while pos < end:
        char = text[pos]

        if state is StringState.ESCAPED:
            value_parts.append(ESCAPE_SEQUENCES.get(char, char))
            state = StringState.NORMAL
        elif char == '\\':
            state = StringState.ESCAPED
        elif char == '"':
            after = pos + 1
            if after < end and text[after] not in DELIMITERS:
                raise create_string_boundary_error(
                    text[after], location_at(text, after, filename)
                )
            return ''.join(value_parts), after
        else:
            value_parts.append(char)

        pos += 1

    # Point at the opening quote
    raise create_unterminated_string_error(
        location_at(text, max(start - 1, 0), filename)
    )
