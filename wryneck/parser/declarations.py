"""
Declaration grammar.

    function   := definition expr tests?
    definition := FUNCTION NAME "(" (NAME ("," NAME)* ","?)? ")"
    tests      := "[" (expr "=" expr ("," expr "=" expr)* ","?)? "]"

A missing test block gives an empty tuple and no diagnostic. Inside a present
block each malformed pair is reported and dropped; the well-formed pairs are
kept.
"""
from ..dialect import Role
from ..grammar import describe_terminal
from ..nodes import Function, FunctionDefinition, Parameter, Test
from .base import Mismatch
from .statements import StatementGrammar


class DeclarationGrammar(StatementGrammar):

    def function(self):
        definition = self.definition()
        body = self.expression()
        tests = self.tests_block()
        return Function(definition=definition, body=body, tests=tests)

    def definition(self):
        self.expect_role(Role.FUNCTION)
        name = self.dialect.canonical_name(self.expect_identifier())
        self.expect("LPAR")
        params = []
        while not self.check("RPAR"):
            params.append(Parameter(name=self.expect_identifier()))
            if not self.accept("COMMA"):
                break
        self.expect("RPAR")
        return FunctionDefinition(name=name, params=params)

    def tests_block(self):
        if not self.accept("LSQB"):
            return []
        tests = []
        while not self.check("RSQB") and not self.at_end():
            try:
                tests.append(self.test_case())
            except Mismatch as e:
                self.recover(e)
                continue
            if not self.accept("COMMA") and not self.check("RSQB"):
                self.recover(Mismatch(self.current, [describe_terminal("COMMA"), describe_terminal("RSQB")]))
        try:
            self.expect("RSQB")
        except Mismatch as e:
            self.recover(e)
        return tests

    def test_case(self):
        test_input = self.expression()
        self.expect("EQUAL")
        test_output = self.expression()
        return Test(input=test_input, output=test_output)
