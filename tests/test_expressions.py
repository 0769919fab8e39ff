"""
Unit tests for the expression grammar: precedence tiers and atoms.
"""
import pytest

from wryneck.errors import NumberFormatError
from wryneck.formatter import Formatter
from wryneck.lexer import tokenize
from wryneck.nodes import (
    BinaryOp, Block, Comment, CommentedExpression, ErrorExpression, ExpressionStatement,
    FunctionCall, If, Let, Number, Opcode, String, Variable,
)
from wryneck.parser import Parser


def parser_for(source, dialect=None):
    return Parser(tokenize(source), dialect=dialect, source_code=source)


def expr(source):
    """Parse one expression and require that it consumed everything cleanly."""
    parser = parser_for(source)
    node = parser.expression()
    assert parser.errors == []
    assert parser.at_end()
    return node


def num(n):
    return Number(value=n)


def var(name):
    return Variable(name=name)


class TestPrecedence:
    """Tests for the additive and multiplicative tiers."""

    def test_single_atom(self):
        """A lone identifier is a Variable."""
        assert expr("a") == var("a")

    def test_addition(self):
        """a+b is one BinaryOp."""
        assert expr("a+b") == BinaryOp(left=var("a"), op=Opcode.ADD, right=var("b"))

    def test_multiplication_binds_tighter_on_the_right(self):
        """1+2*3 parses as Add(1, Mul(2, 3))."""
        assert expr("1+2*3") == BinaryOp(
            left=num(1), op=Opcode.ADD,
            right=BinaryOp(left=num(2), op=Opcode.MUL, right=num(3)),
        )

    def test_multiplication_binds_tighter_on_the_left(self):
        """1*2+3 parses as Add(Mul(1, 2), 3)."""
        assert expr("1*2+3") == BinaryOp(
            left=BinaryOp(left=num(1), op=Opcode.MUL, right=num(2)),
            op=Opcode.ADD, right=num(3),
        )

    def test_additive_left_associative(self):
        """a+b-c folds to the left: (a+b)-c."""
        assert expr("a+b-c") == BinaryOp(
            left=BinaryOp(left=var("a"), op=Opcode.ADD, right=var("b")),
            op=Opcode.SUB, right=var("c"),
        )

    def test_multiplicative_left_associative(self):
        """8/4/2 folds to the left: (8/4)/2."""
        assert expr("8/4/2") == BinaryOp(
            left=BinaryOp(left=num(8), op=Opcode.DIV, right=num(4)),
            op=Opcode.DIV, right=num(2),
        )

    def test_parentheses_override_precedence(self):
        """(a+b)*c multiplies the sum; parentheses leave no node."""
        assert expr("(a+b)*c") == BinaryOp(
            left=BinaryOp(left=var("a"), op=Opcode.ADD, right=var("b")),
            op=Opcode.MUL, right=var("c"),
        )

    def test_redundant_parentheses(self):
        """((a)) is just a."""
        assert expr("((a))") == var("a")

    def test_long_chain_does_not_recurse(self):
        """A very long operator chain parses without hitting the recursion limit."""
        node = expr(" + ".join(["1"] * 2000))
        depth = 0
        while isinstance(node, BinaryOp):
            assert node.right == num(1)
            node = node.left
            depth += 1
        assert depth == 1999

    def test_long_chain_formats(self):
        """The formatter walks a long chain without recursing on each operator."""
        node = expr(" + ".join(["1"] * 3000))
        text = Formatter().expression(node)
        assert text.startswith("(" * 2999 + "1 + 1) + 1)")
        assert text.endswith(" + 1)")
        assert text.count("+") == 2999


class TestAtoms:
    """Tests for literals, calls, blocks and conditionals."""

    def test_number(self):
        """Decimal literals become Number."""
        assert expr("42") == num(42)

    def test_largest_number(self):
        """The signed 32-bit maximum is accepted."""
        assert expr("2147483647") == num(2147483647)

    def test_number_out_of_range_is_a_hard_failure(self):
        """A literal past the 32-bit range raises instead of recovering."""
        with pytest.raises(NumberFormatError) as exc:
            parser_for("2147483648").expression()
        assert exc.value.literal == "2147483648"

    def test_very_long_literal_is_a_number_error(self):
        """Digit runs longer than int() converts still raise NumberFormatError."""
        digits = "9" * 5000
        with pytest.raises(NumberFormatError) as exc:
            parser_for(digits).expression()
        assert exc.value.literal == digits

    def test_leading_zeros(self):
        """Leading zeros do not count towards the range check."""
        assert expr("0" * 20 + "2147483647") == num(2147483647)
        assert expr("000") == num(0)

    def test_string(self):
        """Strings keep the text between the quotes."""
        assert expr('"hello world"') == String(text="hello world")

    def test_call(self):
        """An identifier followed by ( is a call."""
        assert expr("add(1, x)") == FunctionCall(name="add", args=[num(1), var("x")])

    def test_call_without_arguments(self):
        """f() has an empty argument tuple."""
        node = expr("f()")
        assert node == FunctionCall(name="f", args=[])
        assert node.args == ()

    def test_call_trailing_comma(self):
        """A trailing comma in the argument list is allowed."""
        assert expr("f(1, 2,)") == FunctionCall(name="f", args=[num(1), num(2)])

    def test_call_with_space_before_paren(self):
        """Whitespace between name and ( still makes a call."""
        assert expr("f (1)") == FunctionCall(name="f", args=[num(1)])

    def test_nested_calls(self):
        """Arguments are full expressions."""
        assert expr("f(g(1) * 2)") == FunctionCall(name="f", args=[
            BinaryOp(left=FunctionCall(name="g", args=[num(1)]), op=Opcode.MUL, right=num(2)),
        ])

    def test_empty_block(self):
        """{} is a Block with no statements."""
        node = expr("{}")
        assert node == Block(statements=[])
        assert node.statements == ()

    def test_block_with_statements(self):
        """Blocks hold statements in order."""
        assert expr("{ 1; 2; }") == Block(statements=[
            ExpressionStatement(expression=num(1)),
            ExpressionStatement(expression=num(2)),
        ])

    def test_if_without_else(self):
        """if without else leaves else_body empty."""
        assert expr("if x { 1; }") == If(
            condition=var("x"),
            body=Block(statements=[ExpressionStatement(expression=num(1))]),
            else_body=None,
        )

    def test_if_with_else(self):
        """Both branches become Blocks, even when empty."""
        assert expr("if a + 1 {} else {}") == If(
            condition=BinaryOp(left=var("a"), op=Opcode.ADD, right=num(1)),
            body=Block(statements=[]),
            else_body=Block(statements=[]),
        )

    def test_if_as_operand(self):
        """Conditionals are atoms and can appear inside arithmetic."""
        node = expr("1 + if c { } * 2")
        assert node.op == Opcode.ADD
        assert isinstance(node.right, BinaryOp)
        assert isinstance(node.right.left, If)


class TestComments:
    """Tests for comments where an operand is expected."""

    def test_comment_after_operator(self):
        """A comment between an operator and its operand is kept on the operand."""
        assert expr("1 + // two\n2") == BinaryOp(
            left=num(1), op=Opcode.ADD,
            right=CommentedExpression(comment=Comment(text="// two"), expression=num(2)),
        )

    def test_several_comments(self):
        """Consecutive comments nest in source order."""
        node = expr("// a\n// b\nx")
        assert node.comment.text == "// a"
        assert node.expression.comment.text == "// b"
        assert node.expression.expression == var("x")

    def test_comment_in_let_value(self):
        """A comment after = belongs to the value."""
        parser = parser_for("{ let x = 1 + // c\n 2; }")
        block = parser.expression()
        assert parser.errors == []
        assert block.statements[0] == Let(name="x", value=BinaryOp(
            left=num(1), op=Opcode.ADD,
            right=CommentedExpression(comment=Comment(text="// c"), expression=num(2)),
        ))

    def test_comment_before_missing_operand(self):
        """The comment survives even when the operand is an error."""
        parser = parser_for("1 + // c\n")
        node = parser.expression()
        assert node.right == CommentedExpression(
            comment=Comment(text="// c"), expression=ErrorExpression(),
        )
        assert len(parser.errors) == 1
        assert parser.errors[0].at_eof


class TestExpressionErrors:
    """Tests for the error atom."""

    def test_unusable_token_becomes_error(self):
        """A token that cannot start an atom is consumed and replaced."""
        parser = parser_for(")")
        assert parser.expression() == ErrorExpression()
        assert len(parser.errors) == 1
        assert parser.errors[0].text == ")"
        assert parser.at_end()

    def test_error_operand_keeps_the_operator(self):
        """The rest of a binary operation survives a bad operand."""
        parser = parser_for("1 + ] * 2")
        node = parser.expression()
        assert node == BinaryOp(
            left=num(1), op=Opcode.ADD,
            right=BinaryOp(left=ErrorExpression(), op=Opcode.MUL, right=num(2)),
        )
        assert len(parser.errors) == 1

    def test_keyword_is_not_an_identifier(self):
        """Keyword spellings never parse as variables."""
        parser = parser_for("let")
        assert parser.expression() == ErrorExpression()
        assert parser.errors[0].text == "let"

    def test_unclosed_call_at_end_of_input(self):
        """Running out of input inside a call turns the call into an error."""
        parser = parser_for("f(1")
        assert parser.expression() == ErrorExpression()
        assert len(parser.errors) == 1
        assert parser.errors[0].at_eof

    def test_missing_close_paren(self):
        """A missing ) reports the token found in its place."""
        parser = parser_for("(1 2")
        assert parser.expression() == ErrorExpression()
        assert parser.errors[0].text == "2"
        assert parser.errors[0].expected == ("`)`",)
        assert parser.at_end()

    def test_error_at_end_of_input_consumes_nothing(self):
        """At end of input the error atom is produced without moving."""
        parser = parser_for("1 +")
        node = parser.expression()
        assert node == BinaryOp(left=num(1), op=Opcode.ADD, right=ErrorExpression())
        assert parser.errors[0].at_eof
