"""
Typed models for render options, colors, and columns.
"""

from __future__ import annotations

import dataclasses
import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from bytetable import config
from bytetable.exceptions import CliError


@dataclass(frozen=True)
class HslColor:
    """Hue 0..360, saturation 0..100, lightness 0..100."""

    h: float
    s: float
    l: float  # noqa: E741

    @classmethod
    def from_value(cls, value, context="color"):
        """Parse an HslColor from a dict, a 3-sequence or an "h,s,l" string."""
        if isinstance(value, HslColor):
            return value
        if isinstance(value, str):
            parts = [p.strip() for p in value.split(",")]
        elif isinstance(value, Mapping):
            try:
                parts = [value["h"], value["s"], value["l"]]
            except KeyError as e:
                raise CliError(f"[ERROR] Invalid {context}: missing key {e}.") from None
        elif isinstance(value, Sequence):
            parts = list(value)
        else:
            raise CliError(
                f"[ERROR] Invalid {context}: expected h,s,l, got {type(value).__name__}."
            )
        if len(parts) != 3:
            raise CliError(f"[ERROR] Invalid {context} {value!r}. Use h,s,l (e.g. 210,70,45).")
        try:
            h, s, lum = (float(p) for p in parts)
        except (TypeError, ValueError, OverflowError):
            raise CliError(
                f"[ERROR] Invalid {context} {value!r}: components must be numbers."
            ) from None
        if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= lum <= 100):
            raise CliError(
                f"[ERROR] Invalid {context} {value!r}: need 0<=h<=360, 0<=s<=100, 0<=l<=100."
            )
        return cls(h, s, lum)

    def to_dict(self):
        return {"h": self.h, "s": self.s, "l": self.l}


DEFAULT_BORDER_COLOR = HslColor(210, 15, 50)
DEFAULT_HEADER_COLOR = HslColor(200, 70, 45)

# Keys accepted by TableOptions.from_dict, camelCase spelling → field name
_OPTION_ALIASES = {
    "borderStyle": "border_style",
    "borderColor": "border_color",
    "headerColor": "header_color",
    "rowColors": "row_colors",
    "showRowNumbers": "show_row_numbers",
    "maxWidth": "max_width",
    "artStyle": "art_style",
    "byteAlignment": "byte_alignment",
}


@dataclass(frozen=True)
class TableOptions:
    """Everything a single render call can be configured with.

    Defaults come from config, so a bare ``TableOptions()`` reflects the
    environment. Invalid alignments and unknown border styles are tolerated
    here and resolved at render time; from_dict() is the strict path.
    """

    border_style: str = field(default_factory=lambda: config.DEFAULT_BORDER_STYLE)
    border_color: HslColor | None = DEFAULT_BORDER_COLOR
    header_color: HslColor | None = DEFAULT_HEADER_COLOR
    row_colors: Sequence[HslColor] | Callable[[int], HslColor] | None = None
    align: str | Mapping[str, str] = "left"
    show_row_numbers: bool = True
    max_width: int = field(default_factory=lambda: config.DEFAULT_MAX_WIDTH)
    art_style: str = "none"
    colors: bool = field(default_factory=lambda: config.COLORS_ENABLED)
    truecolor: bool = field(default_factory=lambda: config.TRUECOLOR)
    byte_alignment: int = config.BYTE_ALIGNMENT
    alignment_rng: random.Random | None = None
    truncate: bool = False

    def alignment_for(self, column):
        """Resolve the alignment of *column*; anything unrecognized is left."""
        if isinstance(self.align, Mapping):
            value = self.align.get(column, "left")
        else:
            value = self.align
        if isinstance(value, str) and value in config.VALID_ALIGNMENTS:
            return value
        return "left"

    def row_color_for(self, row_index):
        """Return the HslColor for a data row, or None for an uncolored row.

        A callable is invoked with the zero-based row index; a sequence is
        cycled.
        """
        colors = self.row_colors
        if not colors:
            return None
        if callable(colors):
            return colors(row_index)
        if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence):
            return None
        return colors[row_index % len(colors)]

    def with_overrides(self, **overrides):
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_dict(cls, data, base=None):
        """Build options from a plain dict (snake_case or camelCase keys).

        Raises CliError on unknown keys or invalid enumeration values.
        """
        if data is None:
            return base or cls()
        if not isinstance(data, Mapping):
            raise CliError(
                f"[ERROR] Invalid options: expected object, got {type(data).__name__}."
            )
        valid_fields = {f.name for f in dataclasses.fields(cls)} - {"alignment_rng"}
        kwargs = {}
        for raw_key, value in data.items():
            key = _OPTION_ALIASES.get(raw_key, raw_key)
            if key not in valid_fields:
                raise CliError(f"[ERROR] Unknown table option '{raw_key}'.")
            kwargs[key] = value

        for key in ("border_color", "header_color"):
            if kwargs.get(key) is not None:
                kwargs[key] = HslColor.from_value(kwargs[key], key)
        if kwargs.get("row_colors") is not None:
            raw = kwargs["row_colors"]
            if isinstance(raw, (str, Mapping)) or not isinstance(raw, Sequence):
                raise CliError("[ERROR] Invalid row_colors: expected a list of h,s,l colors.")
            kwargs["row_colors"] = tuple(HslColor.from_value(c, "row color") for c in raw)
        if "border_style" in kwargs:
            style = kwargs["border_style"]
            from bytetable.formatters._borders import BORDER_STYLES

            if style not in BORDER_STYLES:
                raise CliError(
                    f"[ERROR] Invalid border style '{style}'. "
                    f"Valid: {', '.join(sorted(BORDER_STYLES))}"
                )
        if "align" in kwargs:
            kwargs["align"] = _validate_align(kwargs["align"])
        if "art_style" in kwargs and kwargs["art_style"] not in config.VALID_ART_STYLES:
            raise CliError(
                f"[ERROR] Invalid art style '{kwargs['art_style']}'. "
                f"Valid: {', '.join(sorted(config.VALID_ART_STYLES))}"
            )
        for key in ("max_width", "byte_alignment"):
            if key in kwargs:
                value = kwargs[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise CliError(f"[ERROR] Invalid {key}: must be a non-negative integer.")
        for key in ("show_row_numbers", "colors", "truecolor", "truncate"):
            if key in kwargs and not isinstance(kwargs[key], bool):
                raise CliError(f"[ERROR] Invalid {key}: must be true or false.")

        base = base or cls()
        return dataclasses.replace(base, **kwargs)


def _validate_align(value):
    valid = config.VALID_ALIGNMENTS
    if isinstance(value, str):
        if value not in valid:
            raise CliError(
                f"[ERROR] Invalid alignment '{value}'. Valid: {', '.join(sorted(valid))}"
            )
        return value
    if isinstance(value, Mapping):
        for col, align in value.items():
            if align not in valid:
                raise CliError(
                    f"[ERROR] Invalid alignment '{align}' for column '{col}'. "
                    f"Valid: {', '.join(sorted(valid))}"
                )
        return dict(value)
    raise CliError("[ERROR] Invalid align: expected a string or an object of column → alignment.")


@dataclass
class Column:
    """One table column. Width is mutated during layout."""

    name: str
    width: int
    align: str = "left"


@dataclass(frozen=True)
class ConfigRecord:
    """A packed terminal/registry configuration shown as a byte table."""

    version: int
    registry_hash: int
    feature_flags: int
    terminal_mode: int
    rows: int
    cols: int
