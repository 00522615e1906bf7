"""
bytetable exception hierarchy.

All custom exceptions live here to avoid circular imports.
The rendering core never raises these; only the CLI, client and MCP
surfaces do, when user input cannot be parsed.
"""


class CliError(Exception):
    """Exit code 1 — invalid JSON, bad option values, unreadable input files."""

    exit_code = 1
