"""bytetable — terminal tables and 13-byte record visualization."""

from bytetable.client import TableRenderer
from bytetable.config import VERSION
from bytetable.exceptions import CliError
from bytetable.formatters import pack_byte_record, render_table
from bytetable.models import ConfigRecord, HslColor, TableOptions
from bytetable.types import (
    ByteRow,
    ColorResult,
    ColumnLayout,
    PackResult,
    RenderResult,
    StyleRow,
)

__all__ = [
    "VERSION",
    "TableRenderer",
    "CliError",
    "ConfigRecord",
    "HslColor",
    "TableOptions",
    "pack_byte_record",
    "render_table",
    "ByteRow",
    "ColorResult",
    "ColumnLayout",
    "PackResult",
    "RenderResult",
    "StyleRow",
]
