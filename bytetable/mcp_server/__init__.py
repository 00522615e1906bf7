"""MCP server exposing TableRenderer methods as tools.

Package structure:
  __init__.py       — FastMCP init, register() calls, re-exports
  __main__.py       — ``python -m bytetable.mcp_server`` entry point
  _core.py          — Renderer caching, _call dispatcher, response envelope
  _tools_render.py  — 5 rendering tools (tables, byte records, styles, colors)

Run: python -m bytetable.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from bytetable.mcp_server import _tools_render

mcp = FastMCP(
    "bytetable",
    instructions=(
        "Terminal table rendering tools. Every tool returns {ok, schema_version, data} "
        "or {ok: false, error: {type, message}}. "
        "Tables come back as plain text with box-drawing glyphs; pass "
        'options={"colors": false} when the client cannot show ANSI escapes. '
        "Colors are HSL: h 0-360, s and l 0-100.\n"
        "Byte records are 13 bytes: a type tag (0 unknown, 1 number, 2 string, "
        "3 boolean) and a 12-byte payload."
    ),
)

_tools_render.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

# _core
from bytetable.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
    _get_renderer,
    _is_error,
    _renderer,
)

# _tools_render
from bytetable.mcp_server._tools_render import (  # noqa: E402, F401
    list_border_styles,
    pack_value,
    preview_color,
    render_byte_table,
    render_table,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
