"""Low-level cell helpers: value formatting, sanitizing, truncation, padding."""

import json
import re

from bytetable.formatters._width import display_width

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

ELLIPSIS = "…"


def _sanitize_str(s):
    """Reduce text to one line that is safe inside a table frame.

    Only the first line survives. Tabs become single spaces and carriage
    returns are dropped before ANSI escapes and control chars are stripped.
    """
    if not s:
        return s
    text = str(s).split("\n", 1)[0].replace("\t", " ").replace("\r", "")
    return _CONTROL_RE.sub("", text)


def _trunc(s, maxlen):
    """Truncate string to *maxlen* display columns with ellipsis indicator."""
    if not s:
        return ""
    if display_width(s) <= maxlen:
        return s
    if maxlen <= 0:
        return ""
    budget = maxlen - 1
    out = []
    used = 0
    for ch in s:
        w = display_width(ch)
        if used + w > budget:
            break
        out.append(ch)
        used += w
    return "".join(out) + ELLIPSIS


def format_value(value, missing=False):
    """Render one cell value as a single line of text.

    Missing keys are empty, None is "null", booleans are lower-case like JSON,
    composites are compact JSON. Only the first line survives.
    """
    if missing:
        return ""
    if value is None:
        text = "null"
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, str):
        text = value
    elif isinstance(value, int):
        try:
            text = str(value)
        except ValueError:
            # past the interpreter's int-to-str digit limit
            text = f"<int {value.bit_length()} bits>"
    elif isinstance(value, float):
        text = str(value)
    elif isinstance(value, (bytes, bytearray)):
        text = value.hex()
    else:
        try:
            text = json.dumps(value, ensure_ascii=False, default=str, separators=(", ", ": "))
        except (TypeError, ValueError):
            try:
                text = str(value)
            except ValueError:
                text = f"<{type(value).__name__}>"
    return _sanitize_str(text)


def render_cell(text, width, align="left"):
    """Pad *text* to exactly *width* display columns.

    Content already wider than *width* comes back unpadded and untruncated;
    callers that need a hard limit truncate first with _trunc().
    """
    padding = width - display_width(text)
    if padding <= 0:
        return text
    if align == "right":
        return " " * padding + text
    if align == "center":
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding
