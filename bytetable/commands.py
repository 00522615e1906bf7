"""
Command implementations for bytetable.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Rendering logic lives in client.py (TableRenderer). These thin wrappers
handle argparse → option dicts, input loading, and format selection.
"""

import random

from bytetable import config
from bytetable._utils import (
    _parse_align,
    _parse_csv_list,
    _parse_hsl,
    _parse_hsl_list,
    _read_json_source,
    _safe_json_parse,
)
from bytetable.client import TableRenderer
from bytetable.formatters import _warn, output


def _renderer(ns):
    """Return the renderer the CLI injected, or a fresh one."""
    renderer = getattr(ns, "renderer", None)
    if renderer is None:
        renderer = TableRenderer()
    return renderer


def _rng(ns):
    seed = getattr(ns, "seed", None)
    if seed is None:
        return None
    return random.Random(seed)


def _table_options(ns):
    """Collect only the table flags the user actually passed."""
    opts = {}
    if getattr(ns, "style", None):
        opts["border_style"] = ns.style
    if getattr(ns, "border_color", None) is not None:
        opts["border_color"] = _parse_hsl(ns.border_color, "border color")
    if getattr(ns, "header_color", None) is not None:
        opts["header_color"] = _parse_hsl(ns.header_color, "header color")
    if getattr(ns, "row_colors", None):
        opts["row_colors"] = _parse_hsl_list(ns.row_colors)
    if getattr(ns, "align", None):
        opts["align"] = _parse_align(ns.align)
    if getattr(ns, "no_row_numbers", False):
        opts["show_row_numbers"] = False
    if getattr(ns, "max_width", None) is not None:
        opts["max_width"] = ns.max_width
    if getattr(ns, "art", None):
        opts["art_style"] = ns.art
    if getattr(ns, "truncate", False):
        opts["truncate"] = True
    return opts


# ---------------------------------------------------------------------------
# Table commands
# ---------------------------------------------------------------------------


def cmd_render(ns):
    data = _read_json_source(ns.data, getattr(ns, "file", None), context="table data")
    properties = _parse_csv_list(ns.columns) or None
    renderer = _renderer(ns)
    overrides = {}
    rng = _rng(ns)
    if rng is not None:
        overrides["alignment_rng"] = rng
    opts = _table_options(ns)
    if ns.format == "table":
        output(renderer.table(data, properties, options=opts, **overrides), fmt=ns.format)
        return
    output(renderer.table_result(data, properties, options=opts, **overrides), fmt=ns.format)


def cmd_bytes(ns):
    values = _read_json_source(ns.values, getattr(ns, "file", None), context="byte values")
    if isinstance(values, dict):
        values = list(values.values())
        _warn("Object input: rendering its values in key order.")
    elif not isinstance(values, list):
        values = [values]
    renderer = _renderer(ns)
    overrides = {}
    rng = _rng(ns)
    if rng is not None:
        overrides["alignment_rng"] = rng
    opts = {"border_style": ns.style} if getattr(ns, "style", None) else None
    text = renderer.byte_table(
        values,
        sort_by=ns.sort_by,
        sort_order=ns.order,
        visual=ns.visual,
        options=opts,
        **overrides,
    )
    if ns.format == "table":
        output(text, fmt=ns.format)
        return
    output(
        {"records": [renderer.pack(v) for v in values], "table": text},
        fmt=ns.format,
    )


# ---------------------------------------------------------------------------
# Inspection commands
# ---------------------------------------------------------------------------


def _format_pack(result):
    lines = [
        f"Value:  {result['value']!r}",
        f"Type:   {result['type_name']} ({result['type_tag']})",
        f"Hex:    {result['hex']}",
        f"Bits:   {result['bits']}",
        f"Shaded: {result['shaded']}",
    ]
    return "\n".join(lines)


def cmd_pack(ns):
    value = _safe_json_parse(ns.value, "value")
    if isinstance(value, (list, dict)):
        _warn("Containers pack as an unknown-type record.")
    output(_renderer(ns).pack(value), _format_pack, ns.format)


def _format_styles(styles):
    width = max((len(s["name"]) for s in styles), default=0)
    return "\n".join(f"{s['name']:<{width}}  {s['preview']}" for s in styles)


def cmd_styles(ns):
    output(_renderer(ns).list_styles(), _format_styles, ns.format)


def _format_color(result):
    return "\n".join(
        [
            f"HSL:      {result['h']:g},{result['s']:g},{result['l']:g}",
            f"Escape:   {result['escape']!r}",
            f"Fallback: {result['fallback_escape']!r}",
            f"Sample:   {result['sample']}",
        ]
    )


def cmd_color(ns):
    truecolor = False if getattr(ns, "fallback", False) else None
    output(_renderer(ns).color(ns.hsl, truecolor=truecolor), _format_color, ns.format)


def cmd_version(ns):
    output({"version": config.VERSION}, lambda d: f"bytetable {d['version']}", ns.format)
