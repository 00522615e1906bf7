"""
Shared pure-utility functions for bytetable's outer surfaces.

These helpers parse user input for the CLI, client and MCP server.
They raise CliError on malformed input; the rendering core never calls them.
"""

import json
import sys

from bytetable.exceptions import CliError
from bytetable.models import HslColor


def _safe_json_parse(text, context="input"):
    """Parse JSON with friendly error message on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CliError(f"[ERROR] Invalid JSON in {context}: {e.msg} at position {e.pos}") from None


def _parse_csv_list(raw):
    """Split a comma-separated flag value, dropping blanks."""
    if not raw:
        return []
    return [v.strip() for v in raw.split(",") if v.strip()]


def _parse_hsl(raw, context="color"):
    """Parse "h,s,l" into an HslColor; "none" disables the color."""
    if raw is None:
        return None
    if isinstance(raw, str) and raw.strip().lower() == "none":
        return None
    return HslColor.from_value(raw, context)


def _parse_hsl_list(raw):
    """Parse "h,s,l;h,s,l;..." into a tuple of HslColor."""
    if not raw:
        return None
    parts = [p.strip() for p in raw.split(";") if p.strip()]
    return tuple(HslColor.from_value(p, "row color") for p in parts)


def _parse_align(raw):
    """Parse "center" or "col=right,other=center" into an align value."""
    if raw is None:
        return None
    if "=" not in raw:
        return raw.strip()
    mapping = {}
    for pair in _parse_csv_list(raw):
        if "=" not in pair:
            raise CliError(f"[ERROR] Invalid alignment '{pair}'. Use column=left|center|right.")
        col, align = pair.split("=", 1)
        mapping[col.strip()] = align.strip()
    return mapping


def _read_json_source(value, file_path=None, stdin=None, context="data"):
    """Load JSON from an inline string, "-" for stdin, or a file path."""
    if file_path:
        try:
            with open(file_path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise CliError(f"[ERROR] Cannot read {context} file '{file_path}': {e}") from None
    elif value == "-":
        text = (stdin or sys.stdin).read()
    elif value is None:
        raise CliError(f"[ERROR] Missing {context}. Pass JSON inline, '-' for stdin, or --file.")
    else:
        text = value
    return _safe_json_parse(text, context)
