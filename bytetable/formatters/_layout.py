"""Column layout: tabular input normalization and width computation."""

from collections.abc import Iterable, Mapping

from bytetable import config
from bytetable.formatters._table import _sanitize_str, format_value
from bytetable.formatters._width import display_width

ROW_NUMBER_COLUMN = "#"
SCALAR_COLUMN = "Values"

_MISSING = object()


def _tabular_kind(data):
    """Classify tabular input: "empty", "columns" (dict of lists) or "rows"."""
    if data is None:
        return "empty"
    if isinstance(data, Mapping):
        return "columns"
    return "rows"


def _as_column(values):
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


def _rows_from_columns(data):
    columns = {str(k): _as_column(v) for k, v in data.items()}
    length = max((len(v) for v in columns.values()), default=0)
    rows = []
    for i in range(length):
        rows.append({k: v[i] for k, v in columns.items() if i < len(v)})
    return rows, list(columns)


def _rows_from_sequence(data):
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        data = [data]
    rows = []
    for item in data:
        if isinstance(item, Mapping):
            rows.append({str(k): v for k, v in item.items()})
        else:
            rows.append({SCALAR_COLUMN: item})
    return rows


def resolve_columns(rows, properties=None):
    """Ordered column names: the explicit list, else first-seen key order."""
    if properties:
        return [str(p) for p in properties]
    seen = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def normalize_tabular(data, properties=None):
    """Resolve any supported tabular input into (rows, columns).

    Accepts a sequence of mappings (scalars become a "Values" column), a
    mapping of column → sequence, or None. Rows are plain dicts.
    """
    kind = _tabular_kind(data)
    if kind == "empty":
        return [], resolve_columns([], properties)
    if kind == "columns":
        rows, keys = _rows_from_columns(data)
        return rows, [str(p) for p in properties] if properties else keys
    rows = _rows_from_sequence(data)
    return rows, resolve_columns(rows, properties)


def add_row_numbers(rows, columns):
    """Prepend a zero-based "#" column. A row's own "#" value wins."""
    numbered = [{ROW_NUMBER_COLUMN: i, **row} for i, row in enumerate(rows)]
    return numbered, [ROW_NUMBER_COLUMN, *columns]


def cell_text(row, column):
    value = row.get(column, _MISSING) if isinstance(row, Mapping) else _MISSING
    return format_value(value, missing=value is _MISSING)


def column_cap(max_width, column_count):
    """Widest any single column may grow to, or None when uncapped."""
    if not max_width or max_width <= 0 or column_count <= 0:
        return None
    return (max_width - config.BORDER_OVERHEAD) // column_count


def initial_width(name):
    return max(config.MIN_COLUMN_WIDTH, display_width(_sanitize_str(name)) + config.CELL_PADDING)


def measure_widths(columns, rows, max_width):
    """Header-derived widths grown to fit cells, up to the per-column cap."""
    widths = [initial_width(name) for name in columns]
    cap = column_cap(max_width, len(columns))
    for row in rows:
        for i, name in enumerate(columns):
            needed = display_width(cell_text(row, name)) + config.CELL_PADDING
            if needed > widths[i]:
                grown = needed if cap is None else min(needed, cap)
                widths[i] = max(widths[i], grown)
    return widths


def total_width(widths):
    """Rendered line width: every column plus one border glyph per column, plus one."""
    return sum(widths) + len(widths) + 1


def apply_byte_alignment(widths, unit=config.BYTE_ALIGNMENT, rng=None):
    """Pad one column so the total line width is a multiple of *unit*.

    The last column takes the padding unless *rng* is given, in which case
    ``rng.randrange`` picks the column.
    """
    widths = list(widths)
    if not widths or not unit or unit <= 0:
        return widths
    remainder = total_width(widths) % unit
    if remainder:
        index = rng.randrange(len(widths)) if rng is not None else len(widths) - 1
        widths[index] += unit - remainder
    return widths


def compute_widths(columns, rows, max_width, *, byte_alignment=config.BYTE_ALIGNMENT, rng=None):
    """Full layout pass: measure, cap, then align to the byte unit."""
    widths = measure_widths(columns, rows, max_width)
    return apply_byte_alignment(widths, byte_alignment, rng)
