"""Border glyph registry — single source of truth for table frame styles.

Adding a new style means appending one BorderGlyphs entry to BORDER_STYLES.
"""

from dataclasses import dataclass

DEFAULT_STYLE = "single"


@dataclass(frozen=True)
class BorderGlyphs:
    """The 11 glyphs needed to draw one table frame."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    top_middle: str
    bottom_middle: str
    middle_left: str
    middle_right: str
    cross: str


BORDER_STYLES: dict[str, BorderGlyphs] = {
    "single": BorderGlyphs(
        top_left="┌",
        top_right="┐",
        bottom_left="└",
        bottom_right="┘",
        horizontal="─",
        vertical="│",
        top_middle="┬",
        bottom_middle="┴",
        middle_left="├",
        middle_right="┤",
        cross="┼",
    ),
    "double": BorderGlyphs(
        top_left="╔",
        top_right="╗",
        bottom_left="╚",
        bottom_right="╝",
        horizontal="═",
        vertical="║",
        top_middle="╦",
        bottom_middle="╩",
        middle_left="╠",
        middle_right="╣",
        cross="╬",
    ),
    "rounded": BorderGlyphs(
        top_left="╭",
        top_right="╮",
        bottom_left="╰",
        bottom_right="╯",
        horizontal="─",
        vertical="│",
        top_middle="┬",
        bottom_middle="┴",
        middle_left="├",
        middle_right="┤",
        cross="┼",
    ),
    "bold": BorderGlyphs(
        top_left="┏",
        top_right="┓",
        bottom_left="┗",
        bottom_right="┛",
        horizontal="━",
        vertical="┃",
        top_middle="┳",
        bottom_middle="┻",
        middle_left="┣",
        middle_right="┫",
        cross="╋",
    ),
    # Frame is blank; only the column separators are drawn.
    "minimal": BorderGlyphs(
        top_left=" ",
        top_right=" ",
        bottom_left=" ",
        bottom_right=" ",
        horizontal=" ",
        vertical="│",
        top_middle=" ",
        bottom_middle=" ",
        middle_left=" ",
        middle_right=" ",
        cross=" ",
    ),
    "ascii": BorderGlyphs(
        top_left="+",
        top_right="+",
        bottom_left="+",
        bottom_right="+",
        horizontal="-",
        vertical="|",
        top_middle="+",
        bottom_middle="+",
        middle_left="+",
        middle_right="+",
        cross="+",
    ),
}


def get_border(style):
    """Return the glyph set for *style*; unknown names get the default style."""
    if isinstance(style, str):
        glyphs = BORDER_STYLES.get(style.strip().lower())
        if glyphs is not None:
            return glyphs
    return BORDER_STYLES[DEFAULT_STYLE]


def border_style_names():
    return list(BORDER_STYLES)


def border_line(glyphs, widths, position):
    """Build a horizontal frame line ("top", "middle" or "bottom") for *widths*."""
    if position == "top":
        left, joint, right = glyphs.top_left, glyphs.top_middle, glyphs.top_right
    elif position == "bottom":
        left, joint, right = glyphs.bottom_left, glyphs.bottom_middle, glyphs.bottom_right
    else:
        left, joint, right = glyphs.middle_left, glyphs.cross, glyphs.middle_right
    return left + joint.join(glyphs.horizontal * w for w in widths) + right
