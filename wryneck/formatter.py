"""
Wryneck Formatter - renders an AST back to source text.

Output uses the dialect's canonical keyword spellings, four-space indentation
and fully parenthesised binary operations. Formatting a program without error
placeholders and parsing the result again gives an equal AST.
"""

from .dialect import Role, resolve_dialect
from .errors import WryneckError
from .nodes import (
    BinaryOp, Block, Comment, CommentedExpression, ErrorExpression, ErrorStatement,
    ExpressionStatement, FunctionCall, If, Let, Number, Return, String, Variable,
)

INDENT = "    "


class Formatter:
    """
    Renders nodes to text, one method per node kind.

    Statement and top-level methods return whole lines (with indentation and
    newline); expression methods return inline text and only break lines
    inside blocks and after comments.

    Names that are keywords in the target dialect cannot be written and raise
    WryneckError.
    """

    def __init__(self, dialect=None):
        self.dialect = resolve_dialect(dialect)
        self.depth = 0

    def indent(self, text=""):
        return INDENT * self.depth + text

    def identifier(self, name):
        if self.dialect.is_keyword(name):
            raise WryneckError(
                f"'{name}' is a keyword in the {self.dialect.name} dialect",
                suggestion="Rename it before formatting into this dialect",
            )
        return name

    # ---------- TOP LEVEL ----------
    def program(self, program):
        return "".join(self.top_level(item) for item in program.items)

    def top_level(self, item):
        if isinstance(item, Comment):
            return self.indent(item.text) + "\n"
        return self.function(item)

    def function(self, func):
        out = [self.definition(func.definition), " ", self.expression(func.body)]
        if func.tests:
            out.append("\n" + self.indent("[") + "\n")
            self.depth += 1
            for test in func.tests:
                out.append(self.indent(f"{self.expression(test.input)} = {self.expression(test.output)},\n"))
            self.depth -= 1
            out.append(self.indent("]"))
        out.append("\n\n")
        return "".join(out)

    def definition(self, definition):
        marker = self.dialect.spelling(Role.FUNCTION)
        name = self.identifier(self.dialect.display_name(definition.name))
        params = ", ".join(self.identifier(p.name) for p in definition.params)
        return self.indent(f"{marker} {name}({params})")

    # ---------- STATEMENTS ----------
    def statement(self, stmt):
        if isinstance(stmt, Let):
            line = f"{self.dialect.spelling(Role.LET)} {self.identifier(stmt.name)} = {self.expression(stmt.value)};"
        elif isinstance(stmt, Return):
            line = f"{self.dialect.spelling(Role.RETURN)} {self.expression(stmt.value)};"
        elif isinstance(stmt, ExpressionStatement):
            line = f"{self.expression(stmt.expression)};"
        elif isinstance(stmt, Comment):
            line = stmt.text
        elif isinstance(stmt, ErrorStatement):
            line = "error!"
        else:
            raise TypeError(f"not a statement: {type(stmt).__name__}")
        return self.indent(line) + "\n"

    # ---------- EXPRESSIONS ----------
    def expression(self, expr):
        if isinstance(expr, Number):
            return str(expr.value)
        if isinstance(expr, String):
            return f'"{expr.text}"'
        if isinstance(expr, Variable):
            return self.identifier(expr.name)
        if isinstance(expr, FunctionCall):
            return f"{self.identifier(expr.name)}({', '.join(self.expression(arg) for arg in expr.args)})"
        if isinstance(expr, BinaryOp):
            return self.binary_op(expr)
        if isinstance(expr, Block):
            return self.block(expr)
        if isinstance(expr, If):
            return self.if_expression(expr)
        if isinstance(expr, CommentedExpression):
            return f"{expr.comment.text}\n" + self.indent(self.expression(expr.expression))
        if isinstance(expr, ErrorExpression):
            return "error"
        raise TypeError(f"not an expression: {type(expr).__name__}")

    def binary_op(self, expr):
        # left operands nest as deep as the operator chain is long
        spine = []
        while isinstance(expr, BinaryOp):
            spine.append(expr)
            expr = expr.left
        text = self.expression(expr)
        for node in reversed(spine):
            text = f"({text} {node.op.value} {self.expression(node.right)})"
        return text

    def block(self, block):
        if not block.statements:
            return "{}"
        self.depth += 1
        body = "".join(self.statement(stmt) for stmt in block.statements)
        self.depth -= 1
        return "{\n" + body + self.indent("}")

    def if_expression(self, expr):
        text = f"{self.dialect.spelling(Role.IF)} {self.expression(expr.condition)} {self.block(expr.body)}"
        if expr.else_body is not None:
            text += f" {self.dialect.spelling(Role.ELSE)} {self.block(expr.else_body)}"
        return text


def format_program(program, dialect=None):
    """Render a Program as source text in the given dialect."""
    return Formatter(dialect).program(program)
