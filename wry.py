import argparse
import sys

from frontend import (
    analyze_source,
    dump_ast,
    parse_file,
    pick_dialect,
    read_source,
    report_errors,
    set_verbose,
)
from wryneck.errors import WryneckError
from wryneck.formatter import format_program

def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def fail(error):
    print(f"Error: {error}", file=sys.stderr)
    sys.exit(1)

def load(args):
    """Parse the file named on the command line, exiting on hard failures."""
    set_verbose(args.verbose)
    try:
        dialect = pick_dialect(args.dialect)
        source_code, result = parse_file(args.filename, dialect)
    except WryneckError as e:
        fail(e)
    report_errors(result, source_code, color=sys.stderr.isatty())
    return dialect, source_code, result

def cmd_format(args):
    dialect, _, result = load(args)
    try:
        sys.stdout.write(format_program(result.program, dialect))
    except WryneckError as e:
        fail(e)

def cmd_ast(args):
    _, _, result = load(args)
    try:
        print(dump_ast(result.program))
    except WryneckError as e:
        fail(e)

def cmd_check(args):
    _, _, result = load(args)
    if result.ok:
        log(f"✓ {args.filename}: no syntax errors")
        return
    log(f"❌ {args.filename}: {len(result.errors)} syntax error(s)")
    sys.exit(1)

def cmd_inspect(args):
    set_verbose(args.verbose)
    try:
        _, source_code = read_source(args.filename)
        summary = analyze_source(source_code, args.dialect)
    except WryneckError as e:
        fail(e)
    print(summary.model_dump_json(indent=2))

def main():
    parser = argparse.ArgumentParser(description="Wryneck CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    parser.add_argument("--dialect", help="Keyword dialect: ascii, emoji, or a JSON keyword table (default: $WRYNECK_DIALECT or ascii)")
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("format", "Print the file reformatted"),
        ("ast", "Print the syntax tree as JSON"),
        ("check", "Report syntax errors; exit status 1 if there are any"),
        ("inspect", "Print a JSON summary of the functions in the file"),
    ):
        subparsers.add_parser(name, help=help_text).add_argument(
            "filename", nargs="?", default="-", help="Source file (default: read from stdin)")

    args = parser.parse_args()

    if args.command == "format": cmd_format(args)
    elif args.command == "ast": cmd_ast(args)
    elif args.command == "check": cmd_check(args)
    elif args.command == "inspect": cmd_inspect(args)
    else: parser.print_help()

if __name__ == "__main__":
    main()
