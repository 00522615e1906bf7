"""Terminal display-width measurement."""

import re

from wcwidth import wcswidth, wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def display_width(text):
    """Return how many terminal columns *text* occupies.

    Wide CJK characters and emoji count 2, combining marks and zero-width
    code points count 0, ANSI escape sequences count 0. This is never the
    same thing as ``len(text)`` for non-ASCII input.
    """
    if not text:
        return 0
    plain = _ANSI_RE.sub("", str(text))
    width = wcswidth(plain)
    if width >= 0:
        return width
    # wcswidth gives up on the whole string when any char is non-printable
    return sum(max(wcwidth(ch), 0) for ch in plain)
