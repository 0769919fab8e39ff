"""
Program assembler: top-level comments and functions until the input runs out.
"""
from ..dialect import Role
from ..nodes import Comment, Program
from .base import Mismatch, ParseResult
from .declarations import DeclarationGrammar


class Parser(DeclarationGrammar):
    """
    Recursive-descent parser for one token stream.

    Each instance parses once. Syntax errors never raise: they are collected
    in `errors` and replaced by placeholder nodes. NumberFormatError does
    raise, since the lexer should never produce an out of range literal.
    """

    def parse(self):
        program = self.program()
        return ParseResult(program=program, errors=self.errors)

    def program(self):
        items = []
        while not self.at_end():
            token = self.current
            if token.type == "COMMENT":
                self.advance()
                items.append(Comment(text=str(token)))
            elif self.at_role(Role.FUNCTION):
                try:
                    items.append(self.function())
                except Mismatch as e:
                    self.recover(e)
            else:
                self.recover(Mismatch(token, [self.describe_role(Role.FUNCTION), "comment"]))
        return Program(items=items)
