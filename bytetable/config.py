"""
bytetable shared configuration, constants, and module-level state.
Standalone module — no imports from other project files except exceptions.
"""

import os

from bytetable.exceptions import CliError  # noqa: F401  (re-export)

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")


def load_env():
    """Read KEY=VALUE pairs from the project .env, then let the process env win."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key, val in os.environ.items():
        if key.startswith("BYTETABLE_") or key == "NO_COLOR":
            env[key] = val
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"
CONTRACT_SCHEMA_VERSION = "1.0"

# Byte records and the width alignment unit share the same size.
RECORD_SIZE = 13
BYTE_ALIGNMENT = 13

CELL_PADDING = 2
MIN_COLUMN_WIDTH = 3
BORDER_OVERHEAD = 3

VALID_ALIGNMENTS = {"left", "center", "right"}
VALID_ART_STYLES = {"none", "simple", "detailed", "block"}
VALID_SORT_KEYS = {"index", "hex", "bits", "value", "bytes"}
VALID_SORT_ORDERS = {"asc", "desc"}

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / process environment)
# ---------------------------------------------------------------------------

env = load_env()

DEFAULT_BORDER_STYLE = env.get("BYTETABLE_BORDER_STYLE", "single") or "single"
DEFAULT_MAX_WIDTH = _env_int("BYTETABLE_MAX_WIDTH", 80)
COLORS_ENABLED = _env_bool("BYTETABLE_COLORS", True) and "NO_COLOR" not in env
TRUECOLOR = _env_bool("BYTETABLE_TRUECOLOR", True)
RENDER_LOG_ENABLED = _env_bool("BYTETABLE_RENDER_LOG", False)

# Runtime flags set by the CLI
RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
