"""
Token cursor and error recovery shared by every grammar layer.

Recovery is "substitute and continue": a production that meets a token it
cannot use raises Mismatch; the nearest recovery point records an ErrorRecord,
consumes the offending token and returns the placeholder node of the category
it parses. The end-of-input token is never consumed, so a recovery point at the
end of input just records and returns.
"""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..dialect import Dialect, Role, resolve_dialect
from ..grammar import describe_terminal
from ..lexer import END, end_token
from ..nodes import Program


class ErrorRecord(BaseModel):
    """One syntax diagnostic: the unexpected token and what would have fit."""
    model_config = ConfigDict(frozen=True)

    token_type: str
    text: str
    start: int
    end: int
    line: Optional[int] = None
    column: Optional[int] = None
    expected: Tuple[str, ...] = ()

    @property
    def at_eof(self):
        return self.token_type == END

    @property
    def message(self):
        if self.at_eof:
            return f"Unrecognized EOF found at {self.start}"
        return f"Unrecognized token `{self.text}` found at {self.start}..{self.end}"

    def __str__(self):
        if self.expected:
            return f"{self.message}; expected {' or '.join(self.expected)}"
        return self.message


class ParseResult(BaseModel):
    """The AST of one parse together with its diagnostics, in detection order."""
    model_config = ConfigDict(frozen=True)

    program: Program
    errors: Tuple[ErrorRecord, ...] = ()

    @property
    def ok(self):
        return not self.errors


class Mismatch(Exception):
    """Raised inside a production when the current token does not fit."""
    def __init__(self, token, expected):
        self.token = token
        self.expected = tuple(expected)
        super().__init__(f"unexpected {token.type} {str(token)!r}")


class ParserBase:
    """Cursor over a token list plus the diagnostics collected so far."""

    def __init__(self, tokens, dialect=None, source_code=None):
        self.tokens = list(tokens)
        self.tokens.append(end_token(self.tokens, source_code))
        self.dialect: Dialect = resolve_dialect(dialect)
        self.source_code = source_code
        self.errors = []
        self.pos = 0

    # ---------- CURSOR ----------
    @property
    def current(self):
        return self.tokens[self.pos]

    def peek(self, offset=1):
        index = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def at_end(self):
        return self.current.type == END

    def advance(self):
        token = self.current
        if token.type != END:
            self.pos += 1
        return token

    def check(self, token_type):
        return self.current.type == token_type

    def accept(self, token_type):
        """Consume the current token if it has the given type."""
        if self.check(token_type):
            return self.advance()
        return None

    def expect(self, token_type):
        if not self.check(token_type):
            raise Mismatch(self.current, [describe_terminal(token_type)])
        return self.advance()

    # ---------- KEYWORDS ----------
    def role(self, token=None) -> Optional[Role]:
        """Keyword role of a token, looked up in the dialect by its text."""
        token = self.current if token is None else token
        if token.type in ("STRING", "COMMENT", "NUMBER", END):
            return None
        return self.dialect.role_of(str(token))

    def at_role(self, role):
        return self.role() == role

    def expect_role(self, role):
        if not self.at_role(role):
            raise Mismatch(self.current, [self.describe_role(role)])
        return self.advance()

    def describe_role(self, role):
        return " or ".join(f"`{s}`" for s in self.dialect.keywords[role])

    def is_identifier(self, token=None):
        token = self.current if token is None else token
        return token.type == "NAME" and not self.dialect.is_keyword(str(token))

    def expect_identifier(self):
        if not self.is_identifier():
            raise Mismatch(self.current, [describe_terminal("NAME")])
        return str(self.advance())

    # ---------- RECOVERY ----------
    def record(self, token, expected=()):
        self.errors.append(ErrorRecord(
            token_type=token.type,
            text=str(token),
            start=token.start_pos,
            end=token.end_pos,
            line=token.line,
            column=token.column,
            expected=tuple(expected),
        ))

    def recover(self, mismatch):
        """Record a mismatch and step past the offending token."""
        self.record(mismatch.token, mismatch.expected)
        if self.current is mismatch.token:
            self.advance()
