"""
Wryneck AST.

Every node is a frozen pydantic model tagged with a `kind` literal, so the
Expression, Statement and TopLevel unions are discriminated on it. Error
placeholders are ordinary variants of their union, never None.
"""
from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Opcode(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# --- Comments ---

class Comment(Node):
    """A line comment, `text` runs from the `//` to the end of the line."""
    kind: Literal["comment"] = "comment"
    text: str

    @property
    def content(self):
        return self.text[2:].strip()


# --- Expressions ---

class Number(Node):
    kind: Literal["number"] = "number"
    value: int


class String(Node):
    """A string literal; `text` is what appears between the quotes, escapes untouched."""
    kind: Literal["string"] = "string"
    text: str


class Variable(Node):
    kind: Literal["variable"] = "variable"
    name: str


class FunctionCall(Node):
    kind: Literal["call"] = "call"
    name: str
    args: Tuple["Expression", ...] = ()


class Block(Node):
    kind: Literal["block"] = "block"
    statements: Tuple["Statement", ...] = ()


class If(Node):
    kind: Literal["if"] = "if"
    condition: "Expression"
    body: Block
    else_body: Optional[Block] = None


class BinaryOp(Node):
    kind: Literal["binary_op"] = "binary_op"
    left: "Expression"
    op: Opcode
    right: "Expression"


class CommentedExpression(Node):
    """An operand preceded by a comment, as in `1 + // note` followed by `2`."""
    kind: Literal["commented"] = "commented"
    comment: Comment
    expression: "Expression"


class ErrorExpression(Node):
    kind: Literal["expression_error"] = "expression_error"


Expression = Annotated[
    Union[Number, String, Variable, FunctionCall, Block, If, BinaryOp, CommentedExpression,
          ErrorExpression],
    Field(discriminator="kind"),
]


# --- Statements ---

class Let(Node):
    kind: Literal["let"] = "let"
    name: str
    value: Expression


class Return(Node):
    kind: Literal["return"] = "return"
    value: Expression


class ExpressionStatement(Node):
    kind: Literal["expression"] = "expression"
    expression: Expression


class ErrorStatement(Node):
    kind: Literal["statement_error"] = "statement_error"


Statement = Annotated[
    Union[Let, Return, ExpressionStatement, Comment, ErrorStatement],
    Field(discriminator="kind"),
]


# --- Declarations ---

class Parameter(Node):
    name: str


class FunctionDefinition(Node):
    name: str
    params: Tuple[Parameter, ...] = ()


class Test(Node):
    """An input/output pair; checking that they agree is left to an evaluator."""
    input: Expression
    output: Expression


class Function(Node):
    kind: Literal["function"] = "function"
    definition: FunctionDefinition
    body: Expression
    tests: Tuple[Test, ...] = ()

    @property
    def name(self):
        return self.definition.name


TopLevel = Annotated[Union[Function, Comment], Field(discriminator="kind")]


class Program(Node):
    items: Tuple[TopLevel, ...] = ()

    @property
    def functions(self):
        return [item for item in self.items if isinstance(item, Function)]


for _model in (FunctionCall, Block, If, BinaryOp, CommentedExpression, Let, Return,
               ExpressionStatement, Test, Function, Program):
    _model.model_rebuild()


ERROR_NODES = (ErrorExpression, ErrorStatement)


def iter_children(node):
    """Yield the direct child nodes of `node`, in source order."""
    if isinstance(node, Program):
        yield from node.items
    elif isinstance(node, Function):
        yield node.body
        for test in node.tests:
            yield test
    elif isinstance(node, Test):
        yield node.input
        yield node.output
    elif isinstance(node, Block):
        yield from node.statements
    elif isinstance(node, If):
        yield node.condition
        yield node.body
        if node.else_body is not None:
            yield node.else_body
    elif isinstance(node, BinaryOp):
        yield node.left
        yield node.right
    elif isinstance(node, FunctionCall):
        yield from node.args
    elif isinstance(node, (Let, Return)):
        yield node.value
    elif isinstance(node, (ExpressionStatement, CommentedExpression)):
        yield node.expression


def contains_errors(node):
    """True when an error placeholder is reachable from `node`."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, ERROR_NODES):
            return True
        stack.extend(iter_children(current))
    return False
