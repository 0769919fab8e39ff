"""
Wryneck Introspection - function summaries for tooling.

Extracts the signature and test metadata of every function in a parsed
program, for the CLI `inspect` command and other tools that want to know what
a file defines without walking the AST themselves.
"""
from typing import List, Tuple

from pydantic import BaseModel

from .nodes import Function, contains_errors


class FunctionSummary(BaseModel):
    name: str
    params: Tuple[str, ...]
    tests: int
    # A function is testable when it carries at least one input/output pair
    testable: bool
    clean: bool


class ProgramSummary(BaseModel):
    functions: List[FunctionSummary]
    comments: int
    errors: int


def summarize_function(func: Function) -> FunctionSummary:
    return FunctionSummary(
        name=func.name,
        params=tuple(p.name for p in func.definition.params),
        tests=len(func.tests),
        testable=bool(func.tests),
        clean=not contains_errors(func),
    )


def summarize(result) -> ProgramSummary:
    """Summarise a ParseResult."""
    functions = [summarize_function(f) for f in result.program.functions]
    return ProgramSummary(
        functions=functions,
        comments=len(result.program.items) - len(functions),
        errors=len(result.errors),
    )
