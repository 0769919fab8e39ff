"""
Unit tests for wryneck/formatter.py.
"""
import pytest

from wryneck.dialect import ASCII, EMOJI
from wryneck.errors import WryneckError
from wryneck.formatter import Formatter, format_program
from wryneck.nodes import (
    Block, ErrorExpression, ErrorStatement, ExpressionStatement, Function,
    FunctionDefinition, Program,
)
from wryneck.parser import parse


SAMPLES = [
    "fn add(x, y) { *)> x + y; } [1+1=2, 2+2=4]",
    "fn main() {}",
    "egg one() 1 []",
    "// leading comment\nfn f(a) {\n  // inside\n  let b = (a - 1) * (a + 1) / 2;\n  *)> b;\n}\n",
    'fn g() { if x { print("yes"); } else { if y {} else { 1; }; }; f(); f(1, g(2),); }',
    'fn s() "text with \\"escapes\\""',
    "fn n() { { { 1; }; }; } [n() = 1, if 1 {} = 2]",
    "fn c(x) {\n  let y = x + // twice\n  x;\n  *)> // done\n  y;\n} [c(1) = // one\n 2]",
]


class TestFormatting:
    """Tests for the rendered text."""

    def test_add_example(self):
        """Bodies are indented, operations parenthesised, tests listed."""
        result = parse("fn add(x, y) { *)> x + y; } [1+1=2, 2+2=4]")
        assert format_program(result.program) == (
            "fn add(x, y) {\n"
            "    *)> (x + y);\n"
            "}\n"
            "[\n"
            "    (1 + 1) = 2,\n"
            "    (2 + 2) = 4,\n"
            "]\n"
            "\n"
        )

    def test_emoji_dialect_spelling(self):
        """The emoji dialect writes 🥚, 🐔 and 🐣."""
        result = parse('🥚 🐣() { *)> "hi"; }', dialect=EMOJI)
        assert format_program(result.program, EMOJI) == '🥚 🐣() {\n    🐔 "hi";\n}\n\n'

    def test_nested_blocks(self):
        """Nested blocks indent one level per brace."""
        result = parse("fn f(x) { if x { 1; } else { 2; }; }")
        assert format_program(result.program) == (
            "fn f(x) {\n"
            "    if x {\n"
            "        1;\n"
            "    } else {\n"
            "        2;\n"
            "    };\n"
            "}\n"
            "\n"
        )

    def test_empty_block(self):
        """Empty blocks stay on one line."""
        assert format_program(parse("fn f() {}").program) == "fn f() {}\n\n"

    def test_comments(self):
        """Comments are written back verbatim."""
        result = parse("//top\nfn f() {\n// in\n}")
        assert format_program(result.program) == "//top\nfn f() {\n    // in\n}\n\n"

    def test_comment_inside_expression(self):
        """A comment before an operand ends its line; the operand follows indented."""
        result = parse("fn f(x) {\n  let y = x + // again\n  x;\n}")
        assert format_program(result.program) == (
            "fn f(x) {\n"
            "    let y = (x + // again\n"
            "    x);\n"
            "}\n"
            "\n"
        )

    def test_error_placeholders(self):
        """Placeholders render as error markers."""
        program = Program(items=[Function(
            definition=FunctionDefinition(name="f"),
            body=Block(statements=[
                ErrorStatement(),
                ExpressionStatement(expression=ErrorExpression()),
            ]),
        )])
        assert format_program(program) == "fn f() {\n    error!\n    error;\n}\n\n"

    def test_rejects_non_nodes(self):
        """Unknown objects are a programming error."""
        with pytest.raises(TypeError):
            Formatter().expression("nope")


class TestRoundTrip:
    """Re-parsing formatted output gives the same tree."""

    @pytest.mark.parametrize("source", SAMPLES)
    def test_idempotent(self, source):
        """parse(format(parse(s))) equals parse(s) for clean programs."""
        first = parse(source)
        assert first.ok
        text = format_program(first.program)
        second = parse(text)
        assert second.ok
        assert second.program == first.program
        assert format_program(second.program) == text

    @pytest.mark.parametrize("source", SAMPLES)
    def test_translate_between_dialects(self, source):
        """An ASCII program rendered in the emoji dialect parses back the same."""
        first = parse(source, dialect=ASCII)
        emoji_text = format_program(first.program, EMOJI)
        assert parse(emoji_text, dialect=EMOJI).program == first.program


class TestKeywordNames:
    """Names that are keywords in the dialect being written."""

    def test_ascii_keyword_from_emoji_source(self):
        """egg is a name in the emoji dialect but a function marker in ascii."""
        result = parse("🥚 f() { let egg = 1; 🐔 egg; }", dialect=EMOJI)
        assert result.ok
        with pytest.raises(WryneckError, match="'egg' is a keyword in the ascii dialect"):
            format_program(result.program, ASCII)

    @pytest.mark.parametrize("source", [
        "fn 🐔() 1",
        "fn f(🐔) 1",
        "fn f() 🐔",
        "fn f() 🐔(1)",
        "fn f() { let 🐔 = 1; }",
    ])
    def test_emoji_keyword_from_ascii_source(self, source):
        """The chicken is a name in ascii but the return marker in emoji."""
        result = parse(source)
        assert result.ok
        with pytest.raises(WryneckError, match="'🐔' is a keyword in the emoji dialect"):
            format_program(result.program, EMOJI)

    def test_same_dialect_never_collides(self):
        """Parsed names are never keywords of the dialect they were parsed in."""
        result = parse("fn f() { let 🐔 = 1; *)> 🐔; }")
        assert format_program(result.program, ASCII) == (
            "fn f() {\n    let 🐔 = 1;\n    *)> 🐔;\n}\n\n"
        )
