"""Built-in menu definition.

Edit this file to adjust the default menu labels, or override the whole
menu with the ``menu`` key in the settings file.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ztui.menu.model import MenuModel

MAIN_MENU_ITEMS = {
    "File": ["New", "Open", "Save", "---", "Quit"],
    "Edit": ["Cut", "Copy", "Paste", "Find"],
    "View": ["Statusbar", "Toolbar", "Zoom"],
    "Help": ["About", "Index", "Manual"],
}

MAIN_MENU = MenuModel.from_mapping(MAIN_MENU_ITEMS)


def build_menu(configured: Optional[Mapping[str, Any]] = None) -> MenuModel:
    if configured is None:
        return MAIN_MENU
    return MenuModel.from_mapping(configured)
