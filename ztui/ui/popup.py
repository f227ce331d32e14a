from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ztui.config.settings import DEFAULT_ATTR_ACTIVE, DEFAULT_ATTR_NORMAL
from ztui.exceptions import GeometryInfeasibleError
from ztui.logging import LoggerFactory
from ztui.ui.constants import CONTENT_LEFT, CONTENT_TOP, MIN_POPUP_HEIGHT

log = LoggerFactory.for_screen()


@dataclass(frozen=True)
class PopupGeometry:
    y: int
    x: int
    height: int
    width: int
    requested_height: int

    @property
    def visible_rows(self) -> int:
        return self.height - 2

    @property
    def truncated(self) -> bool:
        return self.height < self.requested_height


def compute_popup_geometry(
    items: Sequence[str],
    anchor_column: Optional[int],
    rows: int,
    cols: int,
) -> PopupGeometry:
    """Place a submenu box under its menu label, inside the content area.

    The box is shifted left when it would cross the right border and clipped
    when it would cross the bottom border. Raises GeometryInfeasibleError
    when fewer than one item row would remain.
    """
    max_item_width = max((len(item) for item in items), default=0)
    box_width = max_item_width + 4
    box_height = len(items) + 2

    y = CONTENT_TOP
    x = max(CONTENT_LEFT, anchor_column or 0)

    max_content_x = cols - 3
    max_content_y = rows - 3

    if x + box_width - 1 > max_content_x:
        x = max(CONTENT_LEFT, max_content_x - box_width + 1)

    height = box_height
    if y + box_height - 1 > max_content_y:
        height = max_content_y - y + 1
        if height < MIN_POPUP_HEIGHT:
            raise GeometryInfeasibleError(height, MIN_POPUP_HEIGHT)
        log.warning(f"Submenu height truncated from {box_height} to {height} to fit screen.")

    return PopupGeometry(y=y, x=x, height=height, width=box_width, requested_height=box_height)


def draw_submenu(
    surface,
    menubar,
    anchor_column: Optional[int],
    *,
    attr_normal: str = DEFAULT_ATTR_NORMAL,
    attr_active: str = DEFAULT_ATTR_ACTIVE,
) -> Optional[PopupGeometry]:
    submenu = menubar.submenu
    if not submenu.is_open or not submenu.items:
        return None

    rows, cols = surface.dimensions()
    try:
        geometry = compute_popup_geometry(submenu.items, anchor_column, rows, cols)
    except GeometryInfeasibleError as error:
        log.error(str(error))
        menubar.close_submenu()
        return None

    surface.set_attribute(attr_normal)
    surface.draw_box(geometry.y, geometry.x, geometry.height, geometry.width)

    inner_width = geometry.width - 2
    for index, item in enumerate(submenu.items):
        if index >= geometry.visible_rows:
            log.debug("Submenu item drawing stopped due to box height limit.")
            break
        surface.move(geometry.y + 1 + index, geometry.x + 1)
        if index == submenu.selected_index:
            surface.set_attribute(attr_active)
        else:
            surface.set_attribute(attr_normal)
        surface.write(f" {item} ".ljust(inner_width))
    surface.set_attribute(attr_normal)
    log.debug(f"Submenu drawn at screen (y,x): {geometry.y}, {geometry.x}.")
    return geometry
