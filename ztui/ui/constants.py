"""
Screen geometry and border glyph constants.

This module contains shared constants used across the UI layer.
Separated from the renderers to avoid circular imports.
"""

from dataclasses import dataclass

# Minimum terminal size accepted by the screen surface
MIN_ROWS = 3
MIN_COLS = 40

# Menu bar row and the first content row/column inside the main border
TOP_BORDER_ROW = 0
CONTENT_TOP = 1
CONTENT_LEFT = 1

# Room kept free for the title when packing menu segments
TITLE_RESERVE = 5

# Smallest popup: both borders plus one item row
MIN_POPUP_HEIGHT = 3


@dataclass(frozen=True)
class BorderGlyphs:
    horizontal: str
    vertical: str
    upper_left: str
    upper_right: str
    lower_left: str
    lower_right: str


UNICODE_GLYPHS = BorderGlyphs("─", "│", "┌", "┐", "└", "┘")
ASCII_GLYPHS = BorderGlyphs("-", "|", "+", "+", "+", "+")


def glyphs_for(ascii_borders: bool) -> BorderGlyphs:
    return ASCII_GLYPHS if ascii_borders else UNICODE_GLYPHS


__all__ = [
    "ASCII_GLYPHS",
    "BorderGlyphs",
    "CONTENT_LEFT",
    "CONTENT_TOP",
    "MIN_COLS",
    "MIN_POPUP_HEIGHT",
    "MIN_ROWS",
    "TITLE_RESERVE",
    "TOP_BORDER_ROW",
    "UNICODE_GLYPHS",
    "glyphs_for",
]
