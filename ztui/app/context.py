from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ztui.config.settings import DEFAULT_ATTR_ACTIVE, DEFAULT_ATTR_NORMAL
from ztui.menu.navigator import MenuBar
from ztui.ui.constants import UNICODE_GLYPHS, BorderGlyphs


@dataclass
class AppContext:
    menubar: MenuBar
    title: str = ""
    glyphs: BorderGlyphs = UNICODE_GLYPHS
    attr_normal: str = DEFAULT_ATTR_NORMAL
    attr_active: str = DEFAULT_ATTR_ACTIVE
    # Last anchor reported by the top border renderer. While a submenu is
    # open the active label is not bracketed and no new anchor is reported.
    anchor_column: Optional[int] = None
    running: bool = True

    def update_anchor(self, anchor_column: Optional[int]) -> None:
        if anchor_column is not None:
            self.anchor_column = anchor_column
