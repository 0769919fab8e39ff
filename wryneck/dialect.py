"""
Dialect keyword tables.

Wryneck has one grammar and several keyword spellings. A Dialect maps each
logical keyword role to the spellings it accepts; the first spelling is the
one the formatter writes back.
"""
import os
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import WryneckError


class Role(str, Enum):
    """Logical keyword roles understood by the parser."""
    FUNCTION = "function"
    RETURN = "return"
    LET = "let"
    IF = "if"
    ELSE = "else"


class Dialect(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: Dict[Role, Tuple[str, ...]]
    # Identifier spellings that stand for another function name
    name_aliases: Dict[str, str] = {}

    @model_validator(mode="after")
    def _check_keywords(self):
        missing = [role.value for role in Role if not self.keywords.get(role)]
        if missing:
            raise ValueError(f"no spelling for keyword role(s): {', '.join(missing)}")
        seen = {}
        for role, spellings in self.keywords.items():
            for spelling in spellings:
                if not spelling or spelling != spelling.strip():
                    raise ValueError(f"invalid spelling {spelling!r} for {role.value}")
                if spelling in seen and seen[spelling] != role:
                    raise ValueError(
                        f"spelling {spelling!r} used for both {seen[spelling].value} and {role.value}"
                    )
                seen[spelling] = role
        return self

    def role_of(self, text) -> Optional[Role]:
        """Return the keyword role spelled by `text`, if any."""
        for role, spellings in self.keywords.items():
            if text in spellings:
                return role
        return None

    def is_keyword(self, text) -> bool:
        return self.role_of(text) is not None

    def spelling(self, role: Role) -> str:
        """Canonical spelling of a role."""
        return self.keywords[role][0]

    def canonical_name(self, text) -> str:
        return self.name_aliases.get(text, text)

    def display_name(self, name) -> str:
        for alias, target in self.name_aliases.items():
            if target == name:
                return alias
        return name


ASCII = Dialect(
    name="ascii",
    keywords={
        Role.FUNCTION: ("fn", "egg"),
        Role.RETURN: ("*)>",),
        Role.LET: ("let",),
        Role.IF: ("if",),
        Role.ELSE: ("else",),
    },
)

EMOJI = Dialect(
    name="emoji",
    keywords={
        Role.FUNCTION: ("🥚",),
        Role.RETURN: ("🐔", "*)>"),
        Role.LET: ("let",),
        Role.IF: ("if",),
        Role.ELSE: ("else",),
    },
    name_aliases={"🐣": "hatch"},
)

BUILTIN_DIALECTS = {d.name: d for d in (ASCII, EMOJI)}

DEFAULT_DIALECT = "ascii"


def get_dialect(name) -> Dialect:
    """Look up a built-in dialect by name."""
    try:
        return BUILTIN_DIALECTS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_DIALECTS))
        raise WryneckError(
            f"Unknown dialect '{name}'",
            suggestion=f"Use one of: {known}, or a path to a JSON keyword table",
        )


def load_dialect(path) -> Dialect:
    """Load a dialect keyword table from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return Dialect.model_validate_json(f.read())
    except OSError as e:
        raise WryneckError(f"Cannot read dialect file '{path}': {e.strerror}")
    except ValidationError as e:
        raise WryneckError(
            f"Invalid dialect file '{path}'",
            context=e.errors()[0]["msg"],
            suggestion='Expected {"name": ..., "keywords": {"function": [...], "return": [...], ...}}',
        )


def resolve_dialect(value) -> Dialect:
    """Accept a Dialect, a built-in dialect name, or a JSON file path."""
    if isinstance(value, Dialect):
        return value
    if value is None:
        value = DEFAULT_DIALECT
    if value in BUILTIN_DIALECTS:
        return BUILTIN_DIALECTS[value]
    if os.path.exists(value):
        return load_dialect(value)
    return get_dialect(value)
