"""13-byte scalar records and the byte-visualization table.

Record layout (big-endian, always RECORD_SIZE bytes, unused bytes zero):

    byte 0      type tag: 0 unknown, 1 number, 2 string, 3 boolean
    bytes 1-8   number: IEEE-754 double
    bytes 1-12  string: UTF-8, cut at a character boundary
    byte 1      boolean: 1 or 0

Anything that is not a bool, real number or str packs as tag 0 with an
all-zero payload. That loses the value on purpose; nothing raises.
"""

import struct
from functools import cmp_to_key
from numbers import Real

from bytetable import config
from bytetable.formatters._assembler import render_table
from bytetable.formatters._core import _log_render_event
from bytetable.formatters._table import format_value
from bytetable.models import HslColor, TableOptions

RECORD_SIZE = config.RECORD_SIZE
TEXT_CAPACITY = RECORD_SIZE - 1

TYPE_UNKNOWN = 0
TYPE_NUMBER = 1
TYPE_STRING = 2
TYPE_BOOLEAN = 3

# lightest → darkest
SHADE_RAMP = ("░", "▒", "▓", "▇", "█")

VALUE_PREVIEW_LEN = 20

BYTE_COLUMNS = ("Index", "Value", "Hex", "Bits")
BYTE_VISUAL_COLUMNS = ("Index", "Value", "Visual", "Hex")

_SORT_KEY_ALIASES = {"formattedValue": "value", "formatted_value": "value"}
_SORT_FIELDS = {"index": "Index", "hex": "Hex", "bits": "Bits", "value": "Value"}


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


def _encode_text(text):
    data = text.encode("utf-8", "replace")
    if len(data) <= TEXT_CAPACITY:
        return data
    cut = TEXT_CAPACITY
    # back off to the start of a multi-byte sequence
    while cut > 0 and (data[cut] & 0xC0) == 0x80:
        cut -= 1
    return data[:cut]


def pack_byte_record(value):
    """Pack a scalar into a 13-byte record (see module docstring)."""
    record = bytearray(RECORD_SIZE)
    if isinstance(value, bool):
        record[0] = TYPE_BOOLEAN
        record[1] = 1 if value else 0
    elif isinstance(value, Real):
        try:
            payload = struct.pack(">d", float(value))
        except (OverflowError, ValueError):
            return bytes(record)
        record[0] = TYPE_NUMBER
        record[1:9] = payload
    elif isinstance(value, str):
        encoded = _encode_text(value)
        record[0] = TYPE_STRING
        record[1 : 1 + len(encoded)] = encoded
    return bytes(record)


def unpack_byte_record(record):
    """Decode a record back to a Python scalar; None for tag 0 or bad input."""
    if not isinstance(record, (bytes, bytearray)) or len(record) != RECORD_SIZE:
        return None
    tag = record[0]
    if tag == TYPE_NUMBER:
        return struct.unpack(">d", bytes(record[1:9]))[0]
    if tag == TYPE_STRING:
        return bytes(record[1:]).rstrip(b"\x00").decode("utf-8", "replace")
    if tag == TYPE_BOOLEAN:
        return record[1] != 0
    return None


def record_hex(record):
    return bytes(record).hex()


def record_bits(record):
    """Eight binary digits per byte, bytes separated by a space."""
    return " ".join(f"{b:08b}" for b in record)


def _shade(byte):
    if byte == 0:
        return SHADE_RAMP[0]
    if byte < 64:
        return SHADE_RAMP[1]
    if byte < 128:
        return SHADE_RAMP[2]
    if byte < 192:
        return SHADE_RAMP[3]
    return SHADE_RAMP[4]


def record_shaded(record):
    """One shading glyph per byte, darker for larger byte values."""
    return "".join(_shade(b) for b in record)


# ---------------------------------------------------------------------------
# Rows and ordering
# ---------------------------------------------------------------------------


def byte_rows(values):
    """Turn raw values into table rows carrying every textual view."""
    rows = []
    for i, value in enumerate(values or []):
        record = pack_byte_record(value)
        rows.append(
            {
                "Index": i,
                "Value": format_value(value)[:VALUE_PREVIEW_LEN],
                "Hex": "0x" + record_hex(record),
                "Bits": record_bits(record),
                "Visual": record_shaded(record),
                "Bytes": record,
                "OriginalValue": value,
            }
        )
    return rows


def _cmp(a, b):
    return (a > b) - (a < b)


def compare_byte_rows(a, b, key):
    """Three-way compare two byte rows by *key*; unknown keys compare equal.

    The "bytes" key walks all 13 bytes and stops at the first difference,
    which orders rows exactly like the "hex" key does.
    """
    key = _SORT_KEY_ALIASES.get(key, key)
    if key == "bytes":
        for x, y in zip(a["Bytes"], b["Bytes"]):
            if x != y:
                return -1 if x < y else 1
        return 0
    field = _SORT_FIELDS.get(key)
    if field is None:
        return 0
    return _cmp(a[field], b[field])


def sort_byte_rows(rows, key, order="asc"):
    """Stable sort; "desc" negates the comparator."""
    sign = -1 if order == "desc" else 1
    return sorted(rows, key=cmp_to_key(lambda a, b: sign * compare_byte_rows(a, b, key)))


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


def byte_table_options(base=None):
    """Default look of the byte table: double border, purple frame, green header."""
    base = base or TableOptions()
    return base.with_overrides(
        border_style="double",
        border_color=HslColor(280, 60, 45),
        header_color=HslColor(120, 70, 45),
        art_style="simple",
    )


def render_byte_table(
    values, *, sort_by=None, sort_order="asc", visual=False, options=None, **overrides
):
    """Render *values* as a byte-record table.

    sort_by: one of index, hex, bits, value, bytes (None keeps input order).
    visual: show the shaded glyph column instead of the bit column.
    options: TableOptions to start from instead of byte_table_options().
    """
    rows = byte_rows(values)
    if sort_by:
        rows = sort_byte_rows(rows, sort_by, sort_order)
    options = (options or byte_table_options()).with_overrides(**overrides)
    properties = BYTE_VISUAL_COLUMNS if visual else BYTE_COLUMNS
    _log_render_event(event="byte_table", values=len(rows), sort_by=sort_by, order=sort_order)
    return render_table(rows, properties, options)
