"""Typed response definitions for TableRenderer methods.

These TypedDicts document the shape of dicts returned by public API methods.
They are optional — runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Byte records
# ---------------------------------------------------------------------------


class ByteRow(TypedDict):
    """One row of the byte-visualization table."""

    Index: int
    Value: str
    Hex: str
    Bits: str
    Visual: str
    Bytes: bytes
    OriginalValue: Any


class PackResult(TypedDict):
    """Return type of TableRenderer.pack()."""

    value: Any
    type_tag: int
    type_name: str
    bytes: list[int]
    hex: str
    bits: str
    shaded: str


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class ColumnLayout(TypedDict):
    name: str
    width: int
    align: str


class RenderResult(TypedDict):
    """Return type of TableRenderer.table_result()."""

    table: str
    row_count: int
    columns: list[ColumnLayout]
    total_width: int
    border_style: str


class StyleRow(TypedDict):
    name: str
    preview: str


class ColorResult(TypedDict):
    """Return type of TableRenderer.color()."""

    h: float
    s: float
    l: float  # noqa: E741
    escape: str
    fallback_escape: str
    sample: str
