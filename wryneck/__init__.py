# Wryneck Language - Parser Components
"""
Core modules for the Wryneck parser:
- errors: Error types and diagnostic rendering
- grammar: Lark token grammar for the Wryneck language
- lexer: Tokenizer built on the token grammar
- dialect: Keyword tables for the ASCII and emoji dialects
- nodes: AST node models
- parser: Error-recovering recursive-descent parser
- formatter: AST to source pretty printer
- introspection: Function summaries for tooling
"""

from .errors import WryneckError, NumberFormatError
from .grammar import token_grammar
from .lexer import tokenize
from .dialect import Dialect, Role, get_dialect, load_dialect, resolve_dialect
from .parser import ErrorRecord, ParseResult, Parser, parse, parse_tokens
from .formatter import format_program
from .introspection import summarize

__all__ = [
    'WryneckError',
    'NumberFormatError',
    'token_grammar',
    'tokenize',
    'Dialect',
    'Role',
    'get_dialect',
    'load_dialect',
    'resolve_dialect',
    'ErrorRecord',
    'ParseResult',
    'Parser',
    'parse',
    'parse_tokens',
    'format_program',
    'summarize',
]
