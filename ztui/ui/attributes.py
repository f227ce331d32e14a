"""Translate ``"foreground/background"`` attribute specs into curses attributes."""

from __future__ import annotations

import curses
from typing import Dict, Tuple

from ztui.logging import LoggerFactory

log = LoggerFactory.for_screen()

DEFAULT_COLOR = -1

NAMED_COLORS = {
    "default": DEFAULT_COLOR,
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


def parse_attr_spec(spec: str) -> Tuple[int, int]:
    """Return (foreground, background) color numbers for ``spec``.

    >>> parse_attr_spec("white/blue") == (curses.COLOR_WHITE, curses.COLOR_BLUE)
    True
    """
    parts = spec.strip().lower().split("/")
    if len(parts) != 2:
        raise ValueError(f"Attribute spec must look like 'fg/bg', got {spec!r}")
    colors = []
    for name in parts:
        if name not in NAMED_COLORS:
            raise ValueError(f"Unknown color name {name!r} in attribute spec {spec!r}")
        colors.append(NAMED_COLORS[name])
    return colors[0], colors[1]


class ColorPairCache:
    """Allocate curses color pairs lazily, one per distinct spec."""

    def __init__(self, colors_enabled: bool = True) -> None:
        self.colors_enabled = colors_enabled
        self._pairs: Dict[Tuple[int, int], int] = {}
        self._attrs: Dict[str, int] = {}

    def attr_for(self, spec: str) -> int:
        cached = self._attrs.get(spec)
        if cached is not None:
            return cached
        try:
            colors = parse_attr_spec(spec)
        except ValueError as error:
            log.warning(f"{error}. Using the normal attribute.")
            attr = curses.A_NORMAL
        else:
            attr = self._attr_for_colors(colors)
        self._attrs[spec] = attr
        return attr

    def _attr_for_colors(self, colors: Tuple[int, int]) -> int:
        if colors == (DEFAULT_COLOR, DEFAULT_COLOR):
            return curses.A_NORMAL
        if not self.colors_enabled:
            # Monochrome terminals still need the highlight to stand out.
            return curses.A_REVERSE
        pair = self._pairs.get(colors)
        if pair is None:
            pair = len(self._pairs) + 1
            try:
                curses.init_pair(pair, *colors)
            except curses.error:
                log.warning(f"init_pair failed for colors {colors}. Falling back to reverse video.")
                return curses.A_REVERSE
            self._pairs[colors] = pair
        return curses.color_pair(pair)
