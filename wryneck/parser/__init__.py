# Wryneck Parser
"""
Parser for Wryneck token streams, layered one grammar per module:
- base: token cursor, ErrorRecord diagnostics and the recovery policy
- expressions: precedence tiers and atoms
- statements: let / return / expression / comment statements
- declarations: function definitions, bodies and test blocks
- program: the top-level assembler and the Parser entry class
"""

from ..lexer import tokenize
from .base import ErrorRecord, ParseResult
from .program import Parser


def parse_tokens(tokens, dialect=None, source_code=None):
    """Parse a token stream into a ParseResult (program plus diagnostics)."""
    return Parser(tokens, dialect=dialect, source_code=source_code).parse()


def parse(source_code, dialect=None):
    """Tokenize and parse source text."""
    return parse_tokens(tokenize(source_code), dialect=dialect, source_code=source_code)


__all__ = [
    'ErrorRecord',
    'ParseResult',
    'Parser',
    'parse',
    'parse_tokens',
]
