"""
Tokenizer for Wryneck source text.

Built on Lark's basic lexer, driven by the terminals in grammar.py. The parser
only needs lark Token objects (type, text and position), so any other
tokenizer producing them can be used instead.
"""
from functools import lru_cache

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from .errors import WryneckError, get_line_context
from .grammar import token_grammar

END = "$END"


@lru_cache(maxsize=None)
def _lexer():
    return Lark(token_grammar, parser="lalr", lexer="basic")


def tokenize(source_code):
    """Split source text into a list of lark Tokens (whitespace dropped)."""
    try:
        return list(_lexer().lex(source_code))
    except UnexpectedCharacters as e:
        raise WryneckError(
            f"Unexpected character {e.char!r}",
            line_number=e.line,
            column=e.column,
            context=get_line_context(source_code, e.line),
            suggestion="Remove the character or put it inside a string",
        )


def end_token(tokens, source_code=None):
    """
    Build the end-of-input sentinel that follows `tokens`.

    The sentinel sits at the end of the source when it is known, otherwise
    right after the last token.
    """
    if source_code is not None:
        pos = len(source_code)
        line = source_code.count("\n") + 1
        column = pos - (source_code.rfind("\n") + 1) + 1
    elif tokens:
        last = tokens[-1]
        pos = last.end_pos
        line = last.end_line
        column = last.end_column
    else:
        pos, line, column = 0, 1, 1
    return Token(END, "", start_pos=pos, line=line, column=column,
                 end_line=line, end_column=column, end_pos=pos)
