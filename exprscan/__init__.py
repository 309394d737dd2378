"""
exprscan

Lexical scanner for a small expression-oriented language. Converts source
text into a flat list of classified tokens for a downstream parser.

Architecture:
    exprscan/
    ├── lexer/           # Tokens, diagnostics, string decoding, scanner
    └── cli.py           # Command line token dump

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, scan, identify

__all__ = [
    # Core API
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "scan",
    "identify",

    # Version info
    "__version__",
    "__license__",
]
