"""
Error handling utilities for the Wryneck parser.

Syntax errors are recoverable and collected as ErrorRecord diagnostics by the
parser. The exceptions here are for failures that stop a parse outright.
"""

RED = "\033[31m"
RESET = "\033[0m"


class WryneckError(Exception):
    """Custom exception for Wryneck failures with line numbers and hints."""
    def __init__(self, message, line_number=None, column=None, context=None, suggestion=None):
        self.message = message
        self.line_number = line_number
        self.column = column
        self.context = context  # The offending line
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = ["\n❌ Parse Error"]
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class NumberFormatError(WryneckError):
    """An integer literal that does not fit in a signed 32-bit value."""
    def __init__(self, literal, line_number=None, column=None, context=None):
        self.literal = literal
        super().__init__(
            f"Integer literal {literal} is out of range",
            line_number=line_number,
            column=column,
            context=context,
            suggestion="Integer literals must fit in a signed 32-bit value",
        )


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None


def render_diagnostic(record, source_code, color=True):
    """
    Render one ErrorRecord as a caret report.

    Shows the message, the expected tokens, the previous source line and the
    offending line with the bad token highlighted, then a marker under it:

        Unrecognized token `)` found at 14..15
        Expected: number or identifier
        1: fn f() {
        2:     x + );
        -----------^
    """
    red = RED if color else ""
    reset = RESET if color else ""
    out = [f"{red}{record.message}{reset}"]
    if record.expected:
        out.append(f"{red}Expected: {' or '.join(record.expected)}{reset}")

    lines = source_code.split('\n') if source_code else []
    if not lines or record.line is None or record.line > len(lines):
        return "\n".join(out)

    index = record.line - 1
    width = len(str(record.line))
    if index > 0:
        out.append(f"{index:>{width}}: {lines[index - 1]}")

    line = lines[index]
    col = record.column - 1
    if record.at_eof:
        highlighted = line
    else:
        stop = col + (record.end - record.start)
        highlighted = line[:col] + red + line[col:stop] + reset + line[stop:]
    out.append(f"{record.line:>{width}}: {highlighted}")
    out.append("-" * (col + width + 2) + "^")
    return "\n".join(out)
