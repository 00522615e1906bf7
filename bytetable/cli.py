"""
bytetable — render JSON data as terminal tables and 13-byte record views
"""

import argparse
import json
import sys

from bytetable import config
from bytetable.client import TableRenderer
from bytetable.commands import (
    cmd_bytes,
    cmd_color,
    cmd_pack,
    cmd_render,
    cmd_styles,
    cmd_version,
)
from bytetable.exceptions import CliError
from bytetable.formatters import border_style_names

HELP_TEXT = """\
Usage: bytetable <command> [args...]

Global flags:
  --format table          Output rendered text (default)
  --format json           Output JSON (layout metadata, record views)
  --no-color              Disable ANSI color escapes
  --quiet, -q             Suppress warnings
  --verbose, -v           Enable [RENDER] event logging on stderr
  --version               Show version number

Commands:
  render <json|->         - Render a list of objects (or object of arrays)
    --file <path>           Read the JSON data from a file
    --columns <a,b,c>       Explicit column list and order
    --style <name>          single, double, rounded, bold, minimal, ascii
    --border-color <h,s,l>  Border color (or "none")
    --header-color <h,s,l>  Header color (or "none")
    --row-colors <h,s,l;..> Cycled row colors
    --align <a>             left|center|right, or col=right,other=center
    --no-row-numbers        Omit the leading "#" column
    --max-width <n>         Width budget for column sizing (0 = unlimited)
    --art <style>           Summary art: none, simple, detailed, block
    --truncate              Cut overlong cells to their column width
    --seed <n>              Seed the alignment padding column choice
  bytes <json-array|->    - Render values as 13-byte records
    --file <path>           Read the JSON array from a file
    --sort-by <key>         index, hex, bits, value, bytes
    --order <asc|desc>      Sort order (default: asc)
    --visual                Show shaded glyphs instead of bits
    --style <name>          Border style (default: double)
    --seed <n>              Seed the alignment padding column choice
  pack <json-value>       - Show the 13-byte record of one value
  styles                  - List border styles with a preview
  color <h,s,l>           - Show the ANSI escape for an HSL color
    --fallback              Show the 16-color fallback as the main escape
  version                 - Show version number
"""

# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, no_color, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "table"
    no_color = False
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"bytetable {config.VERSION}")
            sys.exit(0)
        elif argv[i] == "--no-color":
            no_color = True
            i += 1
            continue
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in ("json", "table"):
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: table, json")
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, no_color, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _non_negative_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a non-negative integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return parsed


def build_parser():
    parser = _SubcommandParser(
        prog="bytetable",
        description="Render JSON data as terminal tables and 13-byte record views",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- render ---
    p = sub.add_parser("render")
    p.add_argument("data", nargs="?")
    p.add_argument("--file", "-f")
    p.add_argument("--columns", "-c")  # comma-separated: name,age
    p.add_argument("--style", "-s", choices=border_style_names())
    p.add_argument("--border-color", dest="border_color")
    p.add_argument("--header-color", dest="header_color")
    p.add_argument("--row-colors", dest="row_colors")  # semicolon-separated h,s,l
    p.add_argument("--align", "-a")
    p.add_argument("--no-row-numbers", action="store_true", dest="no_row_numbers")
    p.add_argument("--max-width", type=_non_negative_int, dest="max_width")
    p.add_argument("--art", choices=sorted(config.VALID_ART_STYLES))
    p.add_argument("--truncate", action="store_true")
    p.add_argument("--seed", type=int)
    p.set_defaults(func=cmd_render)

    # --- bytes ---
    p = sub.add_parser("bytes")
    p.add_argument("values", nargs="?")
    p.add_argument("--file", "-f")
    p.add_argument("--sort-by", dest="sort_by", choices=sorted(config.VALID_SORT_KEYS))
    p.add_argument("--order", choices=sorted(config.VALID_SORT_ORDERS), default="asc")
    p.add_argument("--visual", action="store_true")
    p.add_argument("--style", "-s", choices=border_style_names())
    p.add_argument("--seed", type=int)
    p.set_defaults(func=cmd_bytes)

    # --- pack ---
    p = sub.add_parser("pack")
    p.add_argument("value")
    p.set_defaults(func=cmd_pack)

    # --- styles ---
    sub.add_parser("styles").set_defaults(func=cmd_styles)

    # --- color ---
    p = sub.add_parser("color")
    p.add_argument("hsl")
    p.add_argument("--fallback", action="store_true")
    p.set_defaults(func=cmd_color)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=cmd_version)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": "error",
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if len(sys.argv) < 2:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "table"
    try:
        # Extract global flags from anywhere in argv
        fmt, no_color, quiet, verbose, remaining_argv = _extract_global_flags(sys.argv[1:])
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose
        if verbose:
            config.RENDER_LOG_ENABLED = True
        if no_color:
            config.COLORS_ENABLED = False

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flag

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if not handler:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")
        # Built after the flags above so its defaults see them.
        ns.renderer = TableRenderer()
        handler(ns)

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
