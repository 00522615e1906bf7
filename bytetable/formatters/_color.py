"""HSL color descriptors → ANSI SGR escape sequences.

The direct path converts to 24-bit RGB. When truecolor output is off, or the
color is out of range, a fixed ladder picks one of the basic 8/16 terminal
colors instead. Nothing in here raises.
"""

import colorsys
import math
from collections.abc import Mapping

from bytetable.formatters._core import _log_render_event

RESET = "\x1b[0m"

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
DARK_GRAY = "\x1b[90m"

# (upper bound exclusive, escape); hues at or past 330 wrap back to red
_HUE_BANDS = (
    (30, RED),
    (90, YELLOW),
    (150, GREEN),
    (210, CYAN),
    (270, BLUE),
    (330, MAGENTA),
)


def _hsl_components(color):
    """Pull (hue, sat, light) floats out of an HslColor, a mapping or a 3-sequence."""
    if isinstance(color, Mapping):
        hue, sat, light = color["h"], color["s"], color["l"]
    elif hasattr(color, "h") and hasattr(color, "s") and hasattr(color, "l"):
        hue, sat, light = color.h, color.s, color.l
    else:
        hue, sat, light = color
    return float(hue), float(sat), float(light)


def _direct_escape(hue, sat, light):
    if not all(math.isfinite(v) for v in (hue, sat, light)):
        raise ValueError("non-finite HSL component")
    if not (0 <= hue <= 360 and 0 <= sat <= 100 and 0 <= light <= 100):
        raise ValueError(f"HSL out of range: {hue}, {sat}, {light}")
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, light / 100.0, sat / 100.0)
    return f"\x1b[38;2;{round(r * 255)};{round(g * 255)};{round(b * 255)}m"


def _ladder_escape(hue, sat, light):
    if light < 20:
        return BLACK
    if light > 80:
        return WHITE
    if sat < 30:
        return WHITE if light > 50 else DARK_GRAY
    hue = hue % 360 if math.isfinite(hue) else 0.0
    for upper, escape in _HUE_BANDS:
        if hue < upper:
            return escape
    return RED


def hsl_to_ansi(color, *, truecolor=True):
    """Convert an HSL descriptor to a foreground escape sequence.

    Returns "" for ``None`` or anything that cannot be read as h/s/l.
    """
    if color is None:
        return ""
    try:
        hue, sat, light = _hsl_components(color)
    except (TypeError, ValueError, KeyError, OverflowError):
        _log_render_event(event="color_fallback", reason="unreadable", color=repr(color))
        return ""
    if truecolor:
        try:
            return _direct_escape(hue, sat, light)
        except ValueError as e:
            _log_render_event(event="color_fallback", reason=str(e))
    return _ladder_escape(hue, sat, light)


def colorize(text, escape):
    """Wrap *text* in *escape* + reset; plain text when there is no escape."""
    if not escape:
        return text
    return f"{escape}{text}{RESET}"
