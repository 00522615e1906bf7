"""Table assembly: frame, header, rows and the optional summary art block."""

import threading
from types import MappingProxyType

from bytetable import config
from bytetable.formatters._borders import border_line, get_border
from bytetable.formatters._color import colorize, hsl_to_ansi
from bytetable.formatters._core import _log_render_event
from bytetable.formatters._layout import (
    add_row_numbers,
    cell_text,
    compute_widths,
    normalize_tabular,
    total_width,
)
from bytetable.formatters._table import _sanitize_str, _trunc, render_cell
from bytetable.models import Column, TableOptions

# ---------------------------------------------------------------------------
# Summary art templates (built once, read-only afterwards)
# ---------------------------------------------------------------------------

_ART_TEMPLATES = None
_ART_LOCK = threading.Lock()


def _build_art_templates():
    detailed_rule = "═" * 42
    block_rule = "░" * 27
    return {
        "simple": "\n".join(
            [
                "📊 Table Summary:",
                "┌──────────────┐",
                "│ Rows: {rows:<6} │",
                "│ Cols: {cols:<6} │",
                "└──────────────┘",
            ]
        ),
        "detailed": "\n".join(
            [
                f"╔{detailed_rule}╗",
                "║" + " " * 13 + "📋 TABLE REPORT" + " " * 14 + "║",
                f"╠{detailed_rule}╣",
                "║ Rows: {rows:<12} Columns: {cols:<12} ║",
                "║ Memory: {bytes:<8} bytes (13-byte aligned) ║",
                f"╚{detailed_rule}╝",
            ]
        ),
        "block": "\n".join(
            [
                block_rule,
                "░░  TABLE VISUALIZATION  ░░",
                "░░  Rows: █{row_bar}    ░░",
                "░░  Cols: █{col_bar}    ░░",
                block_rule,
            ]
        ),
    }


def _art_templates():
    """Return the shared template table, building it on first use."""
    global _ART_TEMPLATES
    if _ART_TEMPLATES is None:
        with _ART_LOCK:
            if _ART_TEMPLATES is None:
                _ART_TEMPLATES = MappingProxyType(_build_art_templates())
    return _ART_TEMPLATES


def _meter(count, slots=10):
    filled = min(max(count, 0), slots)
    return "█" * filled + "░" * (slots - filled)


def summary_art(style, rows, cols):
    """Render the decorative summary block; "" for "none" or unknown styles."""
    template = _art_templates().get(style)
    if template is None:
        return ""
    return template.format(
        rows=rows,
        cols=cols,
        bytes=rows * cols * config.RECORD_SIZE,
        row_bar=_meter(rows),
        col_bar=_meter(cols),
    )


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _resolve_options(options, overrides):
    if options is None:
        options = TableOptions()
    return options.with_overrides(**overrides)


def _row_escape(options, row_index):
    try:
        color = options.row_color_for(row_index)
    except Exception as e:
        # row_colors may be a caller-supplied callable
        _log_render_event(event="row_color_error", row=row_index, error=str(e))
        return ""
    return hsl_to_ansi(color, truecolor=options.truecolor)


def _content_line(texts, widths, aligns, vertical, border_escape, cell_escape, truncate):
    sep = colorize(vertical, border_escape)
    parts = [sep, " "]
    for text, width, align in zip(texts, widths, aligns):
        inner = width - config.CELL_PADDING
        if truncate:
            text = _trunc(text, inner)
        parts.append(colorize(render_cell(text, inner, align), cell_escape))
        parts.append(" ")
        parts.append(sep)
        parts.append(" ")
    return "".join(parts).rstrip()


def assemble(columns, rows, widths, options):
    """Compose the full table text for already-laid-out columns.

    columns: ordered column names.
    rows: list of row mappings (missing keys render empty).
    widths: one display width per column, padding included.
    """
    glyphs = get_border(options.border_style)
    if options.colors:
        border_escape = hsl_to_ansi(options.border_color, truecolor=options.truecolor)
        header_escape = hsl_to_ansi(options.header_color, truecolor=options.truecolor)
    else:
        border_escape = header_escape = ""
    aligns = [options.alignment_for(name) for name in columns]

    lines = [colorize(border_line(glyphs, widths, "top"), border_escape)]
    headers = [_sanitize_str(name) for name in columns]
    lines.append(
        _content_line(
            headers,
            widths,
            aligns,
            glyphs.vertical,
            border_escape,
            header_escape,
            options.truncate,
        )
    )
    lines.append(colorize(border_line(glyphs, widths, "middle"), border_escape))
    for i, row in enumerate(rows):
        row_escape = _row_escape(options, i) if options.colors else ""
        texts = [cell_text(row, name) for name in columns]
        lines.append(
            _content_line(
                texts,
                widths,
                aligns,
                glyphs.vertical,
                border_escape,
                row_escape,
                options.truncate,
            )
        )
    lines.append(colorize(border_line(glyphs, widths, "bottom"), border_escape))

    art = summary_art(options.art_style, len(rows), len(columns))
    if art:
        lines.append(art)
    return "\n".join(lines)


def plan_table(data, properties=None, options=None):
    """Normalize input and lay out columns.

    Returns (rows, columns) where columns is a list of Column with final
    widths and alignments.
    """
    options = options or TableOptions()
    rows, names = normalize_tabular(data, properties)
    if options.show_row_numbers:
        rows, names = add_row_numbers(rows, names)
    widths = compute_widths(
        names,
        rows,
        options.max_width,
        byte_alignment=options.byte_alignment,
        rng=options.alignment_rng,
    )
    columns = [
        Column(name=name, width=width, align=options.alignment_for(name))
        for name, width in zip(names, widths)
    ]
    return rows, columns


def render_table(data, properties=None, options=None, **overrides):
    """Render tabular *data* as one boxed, optionally colored text block.

    data: list of row dicts, dict of column lists, or None.
    properties: optional explicit ordered column list.
    options: TableOptions; keyword overrides replace individual fields.
    """
    options = _resolve_options(options, overrides)
    rows, columns = plan_table(data, properties, options)
    widths = [c.width for c in columns]
    text = assemble([c.name for c in columns], rows, widths, options)
    _log_render_event(
        event="render",
        rows=len(rows),
        columns=len(columns),
        style=options.border_style,
        width=total_width(widths),
    )
    return text
