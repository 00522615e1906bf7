"""Core output dispatchers and render logging."""

import json
import sys

from bytetable import config


def _log_render_event(**fields):
    """Emit structured render logs to stderr when enabled."""
    if not config.RENDER_LOG_ENABLED:
        return
    print("[RENDER] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _warn(message):
    """Print a [WARN] line unless the CLI runs in quiet mode."""
    if config.RUNTIME_QUIET:
        return
    print(f"[WARN] {message}", file=sys.stderr)


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output(data, formatter=None, fmt="table"):
    """Output data in requested format.

    ``formatter`` turns *data* into text for ``--format table``; without one,
    strings are printed as-is and everything else falls back to JSON.
    """
    if fmt == "table":
        if formatter:
            print(formatter(data))
            return
        if isinstance(data, str):
            print(data)
            return
    pretty_print(data)
