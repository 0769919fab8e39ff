import os
import sys

from pydantic_core import PydanticSerializationError

from wryneck.dialect import resolve_dialect
from wryneck.errors import WryneckError, render_diagnostic
from wryneck.formatter import format_program
from wryneck.introspection import summarize
from wryneck.lexer import tokenize
from wryneck.parser import parse_tokens

DIALECT_ENV = "WRYNECK_DIALECT"

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)

def pick_dialect(name=None):
    """Dialect from the argument, else $WRYNECK_DIALECT, else the default."""
    if name is None:
        name = os.environ.get(DIALECT_ENV)
    dialect = resolve_dialect(name)
    debug_log(f"Using dialect '{dialect.name}'")
    return dialect

def read_source(file_path):
    """Read a source file, or stdin when the path is None or '-'."""
    if file_path is None or file_path == "-":
        return "<stdin>", sys.stdin.read()
    if not os.path.exists(file_path):
        raise WryneckError(f"File '{file_path}' not found.")
    with open(file_path, 'r', encoding='utf-8') as f:
        return file_path, f.read()

def parse_source(source_code, dialect=None, file_path="<string>"):
    # STEP 1: TOKENIZE
    debug_log(f"Parsing source: {file_path}")
    tokens = tokenize(source_code)
    debug_log(f"{len(tokens)} tokens")

    # STEP 2: PARSE (syntax errors are collected, not raised)
    result = parse_tokens(tokens, dialect=pick_dialect(dialect), source_code=source_code)
    debug_log(f"{len(result.program.items)} top-level items, {len(result.errors)} errors")
    return result

def parse_file(file_path, dialect=None):
    file_path, source_code = read_source(file_path)
    return source_code, parse_source(source_code, dialect, file_path)

def format_source(source_code, dialect=None):
    """Parse and pretty print source text in the same dialect."""
    dialect = pick_dialect(dialect)
    result = parse_source(source_code, dialect)
    return format_program(result.program, dialect), result

def analyze_source(source_code, dialect=None):
    return summarize(parse_source(source_code, dialect))

def dump_ast(program):
    """The syntax tree as indented JSON."""
    try:
        return program.model_dump_json(indent=2)
    except PydanticSerializationError as e:
        # pydantic caps nesting depth; long operator chains can pass it
        raise WryneckError(
            "Syntax tree is too deeply nested to dump as JSON",
            context=str(e),
            suggestion="Split very long operator chains with let statements",
        )

def report_errors(result, source_code, color=True, stream=None):
    """Write every diagnostic of a ParseResult as a caret report."""
    stream = sys.stderr if stream is None else stream
    for record in result.errors:
        print(render_diagnostic(record, source_code, color=color), file=stream)
    return len(result.errors)
