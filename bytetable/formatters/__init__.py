"""Rendering package for bytetable.

Re-exports all public names so consumers can do:
    from bytetable.formatters import render_table
"""

from bytetable.formatters._assembler import (
    assemble,
    plan_table,
    render_table,
    summary_art,
)
from bytetable.formatters._borders import (
    BORDER_STYLES,
    BorderGlyphs,
    border_line,
    border_style_names,
    get_border,
)
from bytetable.formatters._bytes import (
    RECORD_SIZE,
    SHADE_RAMP,
    byte_rows,
    byte_table_options,
    compare_byte_rows,
    pack_byte_record,
    record_bits,
    record_hex,
    record_shaded,
    render_byte_table,
    sort_byte_rows,
    unpack_byte_record,
)
from bytetable.formatters._color import RESET, colorize, hsl_to_ansi
from bytetable.formatters._core import _log_render_event, _warn, output, pretty_print
from bytetable.formatters._layout import (
    add_row_numbers,
    apply_byte_alignment,
    compute_widths,
    normalize_tabular,
    total_width,
)
from bytetable.formatters._presets import (
    config_record_table,
    performance_matrix,
    progress_bar,
    progress_table,
    tree_table,
)
from bytetable.formatters._table import (
    _CONTROL_RE,
    _sanitize_str,
    _trunc,
    format_value,
    render_cell,
)
from bytetable.formatters._width import display_width

__all__ = [
    "BORDER_STYLES",
    "RECORD_SIZE",
    "RESET",
    "SHADE_RAMP",
    "BorderGlyphs",
    "_CONTROL_RE",
    "_log_render_event",
    "_sanitize_str",
    "_trunc",
    "_warn",
    "add_row_numbers",
    "apply_byte_alignment",
    "assemble",
    "border_line",
    "border_style_names",
    "byte_rows",
    "byte_table_options",
    "colorize",
    "compare_byte_rows",
    "compute_widths",
    "config_record_table",
    "display_width",
    "format_value",
    "get_border",
    "hsl_to_ansi",
    "normalize_tabular",
    "output",
    "pack_byte_record",
    "performance_matrix",
    "plan_table",
    "pretty_print",
    "progress_bar",
    "progress_table",
    "record_bits",
    "record_hex",
    "record_shaded",
    "render_byte_table",
    "render_cell",
    "render_table",
    "sort_byte_rows",
    "summary_art",
    "total_width",
    "tree_table",
    "unpack_byte_record",
]
