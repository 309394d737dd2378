#!/usr/bin/env python3
"""
exprscan command line front end
===============================

Scans a source file (or standard input) and prints the resulting tokens.

Usage:
    exprscan [FILE] [options]

Options:
    --json      Output tokens as a JSON array
    --strict    Print only the diagnostic when lexing fails
    --verbose   Enable debug logging
"""

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict, List, Optional

from .lexer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)


# CPython's default int <-> str digit limit (3.11+)
MAX_INT_OUTPUT_DIGITS = 4300


def output_value(token: Token) -> Any:
    """
    Payload as printed by the dump.

    Non-finite floats (overflowing literals) and ints too long for str()
    are shown as their lexeme instead.
    """
    value = token.value
    if token.type == TokenType.FLOAT and not math.isfinite(value):
        return token.lexeme
    if token.type == TokenType.INT:
        if len(token.lexeme.lstrip('+-')) > MAX_INT_OUTPUT_DIGITS:
            return token.lexeme
    return value


def token_to_dict(token: Token) -> Dict[str, Any]:
    """Convert a token to a JSON-serializable dictionary."""
    return {
        'type': token.type.name,
        'lexeme': token.lexeme,
        'value': output_value(token),
        'line': token.location.line,
        'column': token.location.column,
        'offset': token.location.offset,
    }


def format_token(token: Token) -> str:
    """Format a token as one line of the plain text dump."""
    location = f"{token.location.line}:{token.location.column}"
    if token.value is None:
        return f"{location:<8} {token.type.name}"
    return f"{location:<8} {token.type.name} {output_value(token)!r}"


def read_source(path: Optional[str]) -> str:
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exprscan',
        description="Scan expression-language source into tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprscan program.ex               # Dump tokens, one per line
    exprscan program.ex --json        # Dump tokens as JSON
    echo 'fun(n){ n }' | exprscan     # Scan standard input
        """
    )

    parser.add_argument('file', nargs='?', default=None,
                        help='Source file to scan (default: standard input)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--strict', action='store_true',
                        help='Suppress token output when lexing fails')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the exprscan command"""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    filename = args.file if args.file not in (None, '-') else '<stdin>'

    try:
        source = read_source(args.file)
    except OSError as e:
        print(f"Error reading file '{args.file}': {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)

    logger.debug("Read %d characters from %s", len(source), filename)

    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if not (args.strict and lexer.has_errors()):
        if args.json:
            print(json.dumps([token_to_dict(token) for token in tokens], indent=2, allow_nan=False))
        else:
            for token in tokens:
                print(format_token(token))

    if lexer.has_errors():
        for error in lexer.get_diagnostics():
            print(str(error), end='', file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
