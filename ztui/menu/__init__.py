from ztui.menu.definitions import MAIN_MENU, build_menu
from ztui.menu.model import QUIT_LABEL, MenuModel
from ztui.menu.navigator import LEFT, RIGHT, MenuBar, MenuMode, SubmenuState

__all__ = [
    "LEFT",
    "MAIN_MENU",
    "QUIT_LABEL",
    "RIGHT",
    "MenuBar",
    "MenuMode",
    "MenuModel",
    "SubmenuState",
    "build_menu",
]
