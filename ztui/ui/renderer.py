"""Top border rendering: corners, inline menu bar and centred title.

The whole menu bar lives inside row 0 of the main border::

    ┌─[File]──Edit──View──Help────────── Title ──────────┐

``build_top_border`` does all coordinate math and returns a layout, and
``draw_top_border`` writes that layout to a screen surface. The layout also
carries the anchor column of the active label, which the popup renderer
uses to line the submenu up under it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ztui.config.settings import DEFAULT_ATTR_ACTIVE, DEFAULT_ATTR_NORMAL
from ztui.logging import LoggerFactory
from ztui.ui.constants import (
    TITLE_RESERVE,
    TOP_BORDER_ROW,
    UNICODE_GLYPHS,
    BorderGlyphs,
)

log = LoggerFactory.for_screen()


@dataclass(frozen=True)
class Segment:
    col: int
    text: str
    active: bool = False


@dataclass
class TopBorderLayout:
    segments: List[Segment] = field(default_factory=list)
    anchor_column: Optional[int] = None
    items_drawn: int = 0
    title_col: Optional[int] = None

    def render_text(self) -> str:
        """Flatten the segments into the row text (for logging and tests)."""
        return "".join(segment.text for segment in self.segments)


def build_top_border(
    cols: int,
    title: str,
    labels: Sequence[str],
    active_index: int,
    submenu_open: bool,
    glyphs: BorderGlyphs = UNICODE_GLYPHS,
) -> TopBorderLayout:
    layout = TopBorderLayout()
    horizontal = glyphs.horizontal
    effective_width = cols - 1
    available_inner_width = effective_width - 2
    min_space_for_title = len(title) + TITLE_RESERVE

    layout.segments.append(Segment(0, glyphs.upper_left))
    current_x = 1

    for index, label in enumerate(labels):
        is_active = index == active_index and not submenu_open
        if is_active:
            text = f"[{label}]"
            layout.anchor_column = current_x + len(horizontal)
        else:
            text = label
        segment_text = f"{horizontal}{text}{horizontal}"
        if current_x + len(segment_text) > available_inner_width - min_space_for_title:
            log.debug(
                f"Menu item '{label}' (segment len {len(segment_text)}) won't fit "
                f"with title. Stopping menu draw at x={current_x}."
            )
            break
        layout.segments.append(Segment(current_x, segment_text, active=is_active))
        current_x += len(segment_text)
        layout.items_drawn += 1

    end_x = effective_width - 1
    space = end_x - current_x
    if title and space > len(title):
        title_x = current_x + (space - len(title) + 1) // 2
        if title_x > current_x:
            layout.segments.append(Segment(current_x, horizontal * (title_x - current_x)))
        layout.segments.append(Segment(title_x, title))
        layout.title_col = title_x
        current_x = title_x + len(title)
    elif title:
        log.warning(
            f"Not enough space to draw title '{title}' "
            f"(space {space}, title length {len(title)}). Filling with dashes."
        )
    if current_x < end_x:
        layout.segments.append(Segment(current_x, horizontal * (end_x - current_x)))
    layout.segments.append(Segment(end_x, glyphs.upper_right))
    return layout


def draw_top_border(
    surface,
    title: str,
    labels: Sequence[str],
    active_index: int,
    submenu_open: bool,
    *,
    glyphs: BorderGlyphs = UNICODE_GLYPHS,
    attr_normal: str = DEFAULT_ATTR_NORMAL,
    attr_active: str = DEFAULT_ATTR_ACTIVE,
) -> TopBorderLayout:
    _rows, cols = surface.dimensions()
    layout = build_top_border(cols, title, labels, active_index, submenu_open, glyphs)
    for segment in layout.segments:
        surface.set_attribute(attr_active if segment.active else attr_normal)
        surface.move(TOP_BORDER_ROW, segment.col)
        surface.write(segment.text)
    surface.set_attribute(attr_normal)
    log.debug(
        f"Top border drawn: {layout.items_drawn}/{len(labels)} menu items, "
        f"anchor={layout.anchor_column}"
    )
    return layout
