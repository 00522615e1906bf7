"""Render tools: tables, byte records, styles and colors (5 tools, pure)."""

from __future__ import annotations

from typing import Any, Literal

from bytetable.mcp_server._core import _call, _finalize_tool_result, _is_error


def render_table(
    data: list[dict[str, Any]] | dict[str, list[Any]],
    columns: list[str] | None = None,
    options: dict[str, Any] | None = None,
) -> dict:
    """Render tabular data as a bordered terminal table.

    Args:
        data: List of row objects, or an object of column arrays.
        columns: Explicit column names and order (default: union of keys).
        options: border_style, border_color, header_color, row_colors, align,
            show_row_numbers, max_width, art_style, colors, truecolor, truncate.
            Colors are {h, s, l} objects or "h,s,l" strings.

    Returns:
        Envelope whose data has table, row_count, columns (name/width/align),
        total_width, border_style.
    """
    return _finalize_tool_result(
        _call("table_result", data=data, properties=columns, options=options or {})
    )


def render_byte_table(
    values: list[Any],
    sort_by: Literal["index", "hex", "bits", "value", "bytes"] | None = None,
    sort_order: Literal["asc", "desc"] = "asc",
    visual: bool = False,
    options: dict[str, Any] | None = None,
) -> dict:
    """Render scalars as 13-byte records (index, value, hex, bits or shading).

    Returns:
        Envelope whose data has table.
    """
    result = _call(
        "byte_table",
        values=values,
        sort_by=sort_by,
        sort_order=sort_order,
        visual=visual,
        options=options,
    )
    if _is_error(result):
        return _finalize_tool_result(result)
    return _finalize_tool_result({"table": result})


def pack_value(value: str | int | float | bool | None) -> dict:
    """Pack one scalar into its 13-byte record.

    Returns:
        Envelope whose data has value, type_tag, type_name, bytes, hex, bits, shaded.
    """
    return _finalize_tool_result(_call("pack", value=value))


def list_border_styles() -> dict:
    """List the available border styles with a one-line preview each.

    Returns:
        Envelope whose data has styles (list of name/preview).
    """
    result = _call("list_styles")
    if _is_error(result):
        return _finalize_tool_result(result)
    return _finalize_tool_result({"styles": result})


def preview_color(h: float, s: float, l: float, truecolor: bool | None = None) -> dict:  # noqa: E741
    """Show the ANSI escape an HSL color maps to, plus its 16-color fallback.

    Returns:
        Envelope whose data has h, s, l, escape, fallback_escape, sample.
    """
    return _finalize_tool_result(_call("color", color=(h, s, l), truecolor=truecolor))


def register(mcp):
    """Register all render tools with the FastMCP instance."""
    mcp.tool()(render_table)
    mcp.tool()(render_byte_table)
    mcp.tool()(pack_value)
    mcp.tool()(list_border_styles)
    mcp.tool()(preview_color)
