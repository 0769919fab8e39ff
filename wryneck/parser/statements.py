"""
Statement grammar.

    statement := LET NAME "=" expr ";"
               | RETURN expr ";"
               | expr ";"
               | COMMENT

Every statement is terminated; a block has no trailing value expression.
"""
from ..dialect import Role
from ..nodes import Comment, ErrorStatement, ExpressionStatement, Let, Return
from .base import Mismatch
from .expressions import ExpressionGrammar


class StatementGrammar(ExpressionGrammar):

    def statement(self):
        """Parse one statement; anything unusable becomes an ErrorStatement."""
        try:
            return self._statement()
        except Mismatch as e:
            self.recover(e)
            return ErrorStatement()

    def _statement(self):
        token = self.current

        if token.type == "COMMENT":
            self.advance()
            return Comment(text=str(token))

        role = self.role(token)
        if role == Role.LET:
            return self.let_statement()
        if role == Role.RETURN:
            return self.return_statement()

        if self.starts_expression(token):
            expression = self.expression()
            self.expect("SEMICOLON")
            return ExpressionStatement(expression=expression)

        raise Mismatch(token, self.expected_statement())

    def let_statement(self):
        self.expect_role(Role.LET)
        name = self.expect_identifier()
        self.expect("EQUAL")
        value = self.expression()
        self.expect("SEMICOLON")
        return Let(name=name, value=value)

    def return_statement(self):
        self.expect_role(Role.RETURN)
        value = self.expression()
        self.expect("SEMICOLON")
        return Return(value=value)

    def expected_statement(self):
        return [self.describe_role(Role.LET), self.describe_role(Role.RETURN)] \
            + self.expected_expression() + ["comment"]
