"""
Wryneck Token Grammar.

This module contains the Lark grammar that defines the token categories of the
Wryneck language. Only the terminals are used: the start rule just accepts any
token sequence so that Lark keeps every terminal in its lexer. Keywords are not
terminals, they are NAME (or ARROW) tokens whose spelling appears in the
active dialect's keyword table.
"""

# Emoji blocks accepted in identifiers: misc symbols, dingbats, arrows and
# the supplementary pictograph planes.
EMOJI = r"←-⇿⌀-⏿☀-➿⬀-⯿\U0001f000-\U0001faff"

token_grammar = r"""
    start: _token*

    _token: NAME | NUMBER | STRING | COMMENT | ARROW
          | LPAR | RPAR | LBRACE | RBRACE | LSQB | RSQB
          | COMMA | SEMICOLON | EQUAL | PLUS | MINUS | STAR | SLASH
          | UNKNOWN

    // --- Terminals ---
    NAME: /(?:[^\W\d]|[%(emoji)s])(?:\w|[%(emoji)s]|\u200d|\ufe0f)*/
    NUMBER: /[0-9]+/
    STRING: /"(?:[^"\\\n]|\\.)*"/
    COMMENT: /\/\/[^\n]*/

    ARROW: "*)>"
    LPAR: "("
    RPAR: ")"
    LBRACE: "{"
    RBRACE: "}"
    LSQB: "["
    RSQB: "]"
    COMMA: ","
    SEMICOLON: ";"
    EQUAL: "="
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"

    // Anything else is handed to the parser as a single bad token
    UNKNOWN: /[^\s\w(){}\[\],;=+\-*\/%(emoji)s]/

    %%import common.WS
    %%ignore WS
""" % {"emoji": EMOJI}

# Human readable names for terminals, used in "Expected: ..." diagnostics
TERMINAL_DESCRIPTIONS = {
    "NAME": "identifier",
    "NUMBER": "number",
    "STRING": "string",
    "COMMENT": "comment",
    "ARROW": "`*)>`",
    "LPAR": "`(`",
    "RPAR": "`)`",
    "LBRACE": "`{`",
    "RBRACE": "`}`",
    "LSQB": "`[`",
    "RSQB": "`]`",
    "COMMA": "`,`",
    "SEMICOLON": "`;`",
    "EQUAL": "`=`",
    "PLUS": "`+`",
    "MINUS": "`-`",
    "STAR": "`*`",
    "SLASH": "`/`",
    "UNKNOWN": "unknown character",
    "$END": "end of input",
}


def describe_terminal(name):
    """Return a readable description for a terminal name."""
    return TERMINAL_DESCRIPTIONS.get(name, name)
