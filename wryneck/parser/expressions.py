"""
Expression grammar.

    expr    := term (("+" | "-") term)*
    term    := atom (("*" | "/") atom)*
    atom    := COMMENT* (NUMBER | STRING | "(" expr ")" | block | if
             | NAME "(" (expr ("," expr)* ","?)? ")" | NAME)
    block   := "{" statement* "}"
    if      := IF expr block (ELSE block)?

Both tiers fold left in a loop, so `a - b - c` is `(a - b) - c`.
"""
from ..dialect import Role
from ..errors import NumberFormatError, get_line_context
from ..grammar import describe_terminal
from ..nodes import (
    BinaryOp, Block, Comment, CommentedExpression, ErrorExpression, FunctionCall, If,
    Number, Opcode, String, Variable,
)
from .base import Mismatch, ParserBase

INT32_MAX = 2 ** 31 - 1
INT32_DIGITS = len(str(INT32_MAX))

ADDITIVE = {"PLUS": Opcode.ADD, "MINUS": Opcode.SUB}
MULTIPLICATIVE = {"STAR": Opcode.MUL, "SLASH": Opcode.DIV}

ATOM_STARTS = ("NUMBER", "STRING", "LPAR", "LBRACE")


class ExpressionGrammar(ParserBase):
    """Expressions. Block statements come from StatementGrammar further down the chain."""

    def starts_expression(self, token=None):
        token = self.current if token is None else token
        return (token.type in ATOM_STARTS
                or self.role(token) == Role.IF
                or self.is_identifier(token))

    def expected_expression(self):
        return [describe_terminal(t) for t in ATOM_STARTS] + [
            self.describe_role(Role.IF), describe_terminal("NAME"),
        ]

    # ---------- PRECEDENCE TIERS ----------
    def expression(self):
        return self._tier(ADDITIVE, self.term)

    def term(self):
        return self._tier(MULTIPLICATIVE, self.atom)

    def _tier(self, operators, operand):
        left = operand()
        while self.current.type in operators:
            op = operators[self.advance().type]
            left = BinaryOp(left=left, op=op, right=operand())
        return left

    # ---------- ATOMS ----------
    def atom(self):
        """
        Parse one atom; anything unusable becomes an ErrorExpression.

        Comments met where an operand is expected are attached to that operand.
        """
        comments = []
        while self.check("COMMENT"):
            comments.append(Comment(text=str(self.advance())))
        try:
            node = self._atom()
        except Mismatch as e:
            self.recover(e)
            node = ErrorExpression()
        for comment in reversed(comments):
            node = CommentedExpression(comment=comment, expression=node)
        return node

    def _atom(self):
        token = self.current

        if token.type == "NUMBER":
            return self.number(self.advance())

        if token.type == "STRING":
            self.advance()
            return String(text=str(token)[1:-1])

        if token.type == "LPAR":
            self.advance()
            inner = self.expression()
            self.expect("RPAR")
            return inner

        if token.type == "LBRACE":
            return self.block()

        if self.role(token) == Role.IF:
            return self.if_expression()

        if self.is_identifier(token):
            # NAME directly followed by "(" is always a call
            if self.peek().type == "LPAR":
                return self.call()
            self.advance()
            return Variable(name=str(token))

        raise Mismatch(token, self.expected_expression())

    def number(self, token):
        text = str(token)
        # int() refuses very long digit strings, so check the length first
        if len(text.lstrip("0")) > INT32_DIGITS or int(text) > INT32_MAX:
            raise NumberFormatError(
                text,
                line_number=token.line,
                column=token.column,
                context=get_line_context(self.source_code, token.line),
            )
        return Number(value=int(text))

    def call(self):
        name = str(self.advance())
        self.expect("LPAR")
        args = []
        while not self.check("RPAR"):
            args.append(self.expression())
            if not self.accept("COMMA"):
                break
        self.expect("RPAR")
        return FunctionCall(name=name, args=args)

    def block(self):
        self.expect("LBRACE")
        statements = []
        while not self.check("RBRACE") and not self.at_end():
            statements.append(self.statement())
        self.expect("RBRACE")
        return Block(statements=statements)

    def if_expression(self):
        self.expect_role(Role.IF)
        condition = self.expression()
        body = self.block()
        else_body = None
        if self.at_role(Role.ELSE):
            self.advance()
            else_body = self.block()
        return If(condition=condition, body=body, else_body=else_body)
