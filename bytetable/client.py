"""
TableRenderer — public Python API for rendering tables and byte records.

Single entry point for programmatic use, the CLI commands and the MCP server.
A renderer is an explicit object handed to whoever needs one; nothing global
is patched. Rendering methods return strings, the rest return flat dicts
suitable for JSON serialization.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping

# TypedDict return types live in bytetable.types for documentation.
# Method signatures use plain dict[str, Any] for mypy compatibility.
from typing import Any

from bytetable import config
from bytetable.exceptions import CliError
from bytetable.formatters import (
    assemble,
    border_line,
    border_style_names,
    byte_table_options,
    colorize,
    config_record_table,
    get_border,
    hsl_to_ansi,
    pack_byte_record,
    performance_matrix,
    plan_table,
    progress_table,
    record_bits,
    record_hex,
    record_shaded,
    render_byte_table,
    render_table,
    total_width,
    tree_table,
    unpack_byte_record,
)
from bytetable.models import ConfigRecord, HslColor, TableOptions

_TYPE_NAMES = {0: "unknown", 1: "number", 2: "string", 3: "boolean"}
_SORT_KEY_CHOICES = config.VALID_SORT_KEYS | {"formattedValue"}


class TableRenderer:
    """Renders tables with a fixed set of default options.

    Per-call ``options`` may be a TableOptions or a plain dict (validated by
    TableOptions.from_dict, so bad values raise CliError); keyword overrides
    are applied last.
    """

    def __init__(self, options: TableOptions | None = None, **overrides):
        self.options = (options or TableOptions()).with_overrides(**overrides)

    # -------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------

    def _resolve(self, options=None, base=None, **overrides) -> TableOptions:
        base = base or self.options
        if isinstance(options, Mapping):
            resolved = TableOptions.from_dict(options, base=base)
        elif options is None:
            resolved = base
        elif isinstance(options, TableOptions):
            resolved = options
        else:
            raise CliError(
                f"[ERROR] Invalid options: expected object, got {type(options).__name__}."
            )
        return resolved.with_overrides(**overrides)

    # -------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------

    def table(self, data, properties=None, *, options=None, **overrides) -> str:
        """Render tabular data (list of dicts or dict of lists) as text."""
        return render_table(data, properties, self._resolve(options, **overrides))

    def table_result(self, data, properties=None, *, options=None, **overrides) -> dict[str, Any]:
        """Render and also report the computed layout.

        Returns:
            dict with keys: table, row_count, columns, total_width, border_style.
        """
        opts = self._resolve(options, **overrides)
        rows, columns = plan_table(data, properties, opts)
        widths = [c.width for c in columns]
        text = assemble([c.name for c in columns], rows, widths, opts)
        return {
            "table": text,
            "row_count": len(rows),
            "columns": [dataclasses.asdict(c) for c in columns],
            "total_width": total_width(widths),
            "border_style": opts.border_style,
        }

    def performance_matrix(self, metrics, *, warning=100, critical=500) -> str:
        return performance_matrix(metrics, warning, critical, options=self.options)

    def tree_table(self, items, *, show_icons=True, indent_size=2, color_by_type=True) -> str:
        return tree_table(items, show_icons, indent_size, color_by_type, options=self.options)

    def progress_table(self, items, *, show_percentage=True, show_bar=True, width=20) -> str:
        return progress_table(items, show_percentage, show_bar, width, options=self.options)

    def config_record(self, record: ConfigRecord | Mapping) -> str:
        """Render a ConfigRecord (or a dict with the same fields)."""
        if isinstance(record, Mapping):
            try:
                record = ConfigRecord(**record)
            except TypeError as e:
                raise CliError(f"[ERROR] Invalid config record: {e}") from None
        return config_record_table(record, options=self.options)

    # -------------------------------------------------------------------
    # Byte records
    # -------------------------------------------------------------------

    def byte_table(
        self,
        values,
        *,
        sort_by: str | None = None,
        sort_order: str = "asc",
        visual: bool = False,
        options=None,
        **overrides,
    ) -> str:
        """Render values as 13-byte records.

        Args:
            sort_by: index, hex, bits, value (alias formattedValue) or bytes.
            sort_order: asc or desc.
            visual: swap the bit column for the shaded glyph column.
        """
        if sort_by is not None and sort_by not in _SORT_KEY_CHOICES:
            raise CliError(
                f"[ERROR] Invalid sort key '{sort_by}'. "
                f"Valid: {', '.join(sorted(config.VALID_SORT_KEYS))}"
            )
        if sort_order not in config.VALID_SORT_ORDERS:
            raise CliError(f"[ERROR] Invalid sort order '{sort_order}'. Use: asc, desc")
        if values is not None and not isinstance(values, (list, tuple)):
            raise CliError("[ERROR] Byte table values must be a list of scalars.")
        opts = self._resolve(options, base=byte_table_options(self.options), **overrides)
        return render_byte_table(
            values, sort_by=sort_by, sort_order=sort_order, visual=visual, options=opts
        )

    def pack(self, value) -> dict[str, Any]:
        """Pack one scalar and return every view of its record.

        Returns:
            dict with keys: value, type_tag, type_name, bytes, hex, bits, shaded.
        """
        record = pack_byte_record(value)
        return {
            "value": value,
            "type_tag": record[0],
            "type_name": _TYPE_NAMES.get(record[0], "unknown"),
            "bytes": list(record),
            "hex": record_hex(record),
            "bits": record_bits(record),
            "shaded": record_shaded(record),
        }

    def unpack(self, hex_record: str):
        """Decode a 26-char hex record (optional 0x prefix) back to its value."""
        raw = (hex_record or "").strip().lower()
        if raw.startswith("0x"):
            raw = raw[2:]
        try:
            record = bytes.fromhex(raw)
        except ValueError:
            raise CliError(f"[ERROR] Invalid hex record '{hex_record}'.") from None
        if len(record) != config.RECORD_SIZE:
            raise CliError(
                f"[ERROR] Hex record must be {config.RECORD_SIZE} bytes "
                f"({config.RECORD_SIZE * 2} hex chars), got {len(record)}."
            )
        return unpack_byte_record(record)

    # -------------------------------------------------------------------
    # Styles and colors
    # -------------------------------------------------------------------

    def list_styles(self) -> list[dict[str, Any]]:
        """List border styles with a one-line preview of each frame."""
        return [
            {"name": name, "preview": border_line(get_border(name), [3, 3], "top")}
            for name in border_style_names()
        ]

    def color(self, color, *, truecolor: bool | None = None) -> dict[str, Any]:
        """Show the escape sequences an HSL color maps to.

        Returns:
            dict with keys: h, s, l, escape, fallback_escape, sample.
        """
        hsl = HslColor.from_value(color)
        if truecolor is None:
            truecolor = self.options.truecolor
        escape = hsl_to_ansi(hsl, truecolor=truecolor)
        return {
            "h": hsl.h,
            "s": hsl.s,
            "l": hsl.l,
            "escape": escape,
            "fallback_escape": hsl_to_ansi(hsl, truecolor=False),
            "sample": colorize("sample", escape),
        }
