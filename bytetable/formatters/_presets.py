"""Ready-made tables built on render_table: metrics, trees, progress, config records."""

import re

from bytetable.formatters._assembler import render_table
from bytetable.models import HslColor, TableOptions

GREEN = HslColor(120, 80, 50)
YELLOW = HslColor(45, 80, 55)
RED = HslColor(0, 80, 50)
BLUE = HslColor(210, 40, 50)

_NUMBER_RE = re.compile(r"[^0-9.]")

PROGRESS_BLOCKS = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")

STATUS_ICONS = {
    "completed": "✅",
    "running": "⏳",
    "failed": "❌",
}
PAUSED_ICON = "⏸️"

TREE_ICONS = {
    "folder": "📁 ",
    "file": "📄 ",
    "config": "⚙️ ",
}
DEFAULT_TREE_ICON = "📌 "

TYPE_COLORS = {
    "folder": HslColor(45, 80, 55),
    "file": HslColor(200, 70, 50),
    "config": HslColor(280, 60, 45),
}
DEFAULT_TYPE_COLOR = HslColor(120, 40, 50)


def _base(options):
    return options or TableOptions()


# ---------------------------------------------------------------------------
# Performance matrix
# ---------------------------------------------------------------------------


def _parse_ms(raw):
    """Pull a millisecond figure out of strings like "12.5ms"; 0.0 when absent."""
    digits = _NUMBER_RE.sub("", str(raw or ""))
    try:
        return float(digits)
    except ValueError:
        return 0.0


def _time_color(ms, warning, critical):
    if ms > critical:
        return RED
    if ms > warning:
        return YELLOW
    return GREEN


def performance_matrix(metrics, warning=100, critical=500, options=None):
    """Color-coded operation timings.

    metrics: dicts with operation, time, ops, status.
    Rows are green/yellow/red by their time against the two thresholds.
    """
    metrics = list(metrics or [])
    row_colors = [_time_color(_parse_ms(m.get("time")), warning, critical) for m in metrics]
    opts = _base(options).with_overrides(
        border_style="rounded",
        header_color=HslColor(210, 70, 45),
        row_colors=tuple(row_colors),
        align={"operation": "left", "time": "right", "ops": "right", "status": "center"},
        art_style="detailed",
    )
    return render_table(metrics, ["operation", "time", "ops", "status"], opts)


# ---------------------------------------------------------------------------
# Tree table
# ---------------------------------------------------------------------------


def _flatten_tree(nodes, level, indent_size, show_icons):
    flat = []
    for node in nodes or []:
        node_type = node.get("type", "")
        icon = TREE_ICONS.get(node_type, DEFAULT_TREE_ICON) if show_icons else ""
        flat.append(
            {
                "Name": " " * (level * indent_size) + icon + str(node.get("name", "")),
                "Type": node_type,
                "Size": node.get("size") or "-",
            }
        )
        children = node.get("children")
        if children:
            flat.extend(_flatten_tree(children, level + 1, indent_size, show_icons))
    return flat


def tree_table(items, show_icons=True, indent_size=2, color_by_type=True, options=None):
    """Flatten nested name/type/size/children dicts into an indented table."""
    flat = _flatten_tree(items, 0, indent_size, show_icons)
    row_colors = None
    if color_by_type:
        row_colors = tuple(TYPE_COLORS.get(r["Type"], DEFAULT_TYPE_COLOR) for r in flat)
    opts = _base(options).with_overrides(
        border_style="minimal",
        header_color=HslColor(210, 20, 50),
        row_colors=row_colors,
        align={"Name": "left", "Type": "center", "Size": "right"},
        show_row_numbers=False,
    )
    return render_table(flat, ["Name", "Type", "Size"], opts)


# ---------------------------------------------------------------------------
# Progress table
# ---------------------------------------------------------------------------


def progress_bar(percentage, width=20):
    """A bar of exactly *width* cells using eighth-block glyphs for the partial cell."""
    if width <= 0:
        return ""
    pct = min(max(float(percentage), 0.0), 100.0)
    exact = pct / 100.0 * width
    full = int(exact)
    if full >= width:
        return "█" * width
    partial = int((exact - full) * (len(PROGRESS_BLOCKS) - 1))
    return "█" * full + PROGRESS_BLOCKS[partial] + "░" * (width - full - 1)


def _status_color(icon):
    if icon == STATUS_ICONS["completed"]:
        return GREEN
    if icon == STATUS_ICONS["failed"]:
        return RED
    if icon == STATUS_ICONS["running"]:
        return YELLOW
    return BLUE


def progress_table(items, show_percentage=True, show_bar=True, width=20, options=None):
    """One row per item with bar, counts, percentage and a status icon.

    items: dicts with name, current, total and an optional status of
    pending/running/completed/failed.
    """
    rows = []
    for item in items or []:
        current = item.get("current", 0) or 0
        total = item.get("total", 0) or 0
        percentage = (current / total) * 100 if total > 0 else 0.0
        rows.append(
            {
                "Name": item.get("name", ""),
                "Progress": progress_bar(percentage, width) if show_bar else "",
                "Current": current,
                "Total": total,
                "Percentage": f"{percentage:.1f}%" if show_percentage else "",
                "Status": STATUS_ICONS.get(item.get("status"), PAUSED_ICON),
            }
        )
    opts = _base(options).with_overrides(
        border_style="single",
        header_color=HslColor(200, 70, 45),
        row_colors=tuple(_status_color(r["Status"]) for r in rows),
        align={
            "Name": "left",
            "Progress": "left",
            "Current": "right",
            "Total": "right",
            "Percentage": "right",
            "Status": "center",
        },
    )
    return render_table(
        rows, ["Name", "Progress", "Current", "Total", "Percentage", "Status"], opts
    )


# ---------------------------------------------------------------------------
# Config record
# ---------------------------------------------------------------------------


def _hex(value, digits):
    return f"0x{value:0{digits}x}"


def _bits(value, digits):
    return f"{value:0{digits}b}"


def config_record_table(record, options=None):
    """Field/Value/Hex/Bits breakdown of a ConfigRecord."""
    rows = [
        {
            "Field": "Version",
            "Value": f"v{record.version}",
            "Hex": _hex(record.version, 2),
            "Bits": _bits(record.version, 8),
        },
        {
            "Field": "Registry Hash",
            "Value": str(record.registry_hash),
            "Hex": _hex(record.registry_hash, 8),
            "Bits": _bits(record.registry_hash, 32),
        },
        {
            "Field": "Feature Flags",
            "Value": str(record.feature_flags),
            "Hex": _hex(record.feature_flags, 2),
            "Bits": _bits(record.feature_flags, 8),
        },
        {
            "Field": "Terminal Mode",
            "Value": f"Mode {record.terminal_mode}",
            "Hex": _hex(record.terminal_mode, 2),
            "Bits": _bits(record.terminal_mode, 8),
        },
        {
            "Field": "Display",
            "Value": f"{record.rows}×{record.cols}",
            "Hex": f"0x{record.rows:02x}{record.cols:04x}",
            "Bits": f"{_bits(record.rows, 8)} {_bits(record.cols, 16)}",
        },
    ]
    opts = _base(options).with_overrides(
        border_style="double",
        border_color=HslColor(120, 70, 45),
        header_color=HslColor(210, 70, 45),
        align={"Field": "left", "Value": "center", "Hex": "center", "Bits": "left"},
        show_row_numbers=False,
        art_style="detailed",
    )
    return render_table(rows, None, opts)
