from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ztui.logging import LoggerFactory
from ztui.menu.model import QUIT_LABEL, MenuModel
from ztui.ui.input import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
)

log = LoggerFactory.for_menu()

LEFT = "LEFT"
RIGHT = "RIGHT"


class MenuMode(Enum):
    BROWSING = "browsing"
    SUBMENU_OPEN = "submenu_open"


@dataclass
class SubmenuState:
    is_open: bool = False
    items: List[str] = field(default_factory=list)
    selected_index: int = 0

    def selected_item(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.items):
            return self.items[self.selected_index]
        return None


class MenuBar:
    """State machine for the top-level menu bar and its pop-up submenu.

    The menu bar is either browsing top-level labels or showing one
    submenu. All mutation happens through the methods below, which the
    main loop drives from ``handle_key``.
    """

    def __init__(
        self,
        model: MenuModel,
        *,
        quit_key: str = "q",
        quit_label: str = QUIT_LABEL,
    ) -> None:
        self.model = model
        self.quit_key = quit_key
        self.quit_label = quit_label
        self.active_index = 0
        self.submenu = SubmenuState()
        self._clear_requested = False

    @property
    def mode(self) -> MenuMode:
        if self.submenu.is_open:
            return MenuMode.SUBMENU_OPEN
        return MenuMode.BROWSING

    def active_label(self) -> Optional[str]:
        if not self.model.labels:
            return None
        return self.model.labels[self.active_index]

    def consume_clear_request(self) -> bool:
        requested = self._clear_requested
        self._clear_requested = False
        return requested

    def navigate(self, direction: str) -> None:
        if self.submenu.is_open:
            log.debug(f"Navigate {direction} ignored: submenu open")
            return
        num_items = len(self.model.labels)
        if num_items == 0:
            log.warning("navigate: No menu items to navigate.")
            return
        if direction == LEFT:
            self.active_index = (self.active_index - 1) % num_items
        elif direction == RIGHT:
            self.active_index = (self.active_index + 1) % num_items
        else:
            raise ValueError(f"Unknown direction: {direction}")
        log.debug(f"Menubar active index changed to: {self.active_index}")

    def open_submenu(self) -> bool:
        if self.submenu.is_open:
            return True
        label = self.active_label()
        if label is None:
            log.warning("open_submenu: No menu items defined.")
            return False
        children = self.model.children_of(label)
        if not children:
            log.info(f"No submenu items defined for menu item '{label}'.")
            return False
        self.submenu.items = list(children)
        self.submenu.selected_index = 0
        self.submenu.is_open = True
        log.info(f"Opening submenu for '{label}'. Items: {', '.join(children)}")
        return True

    def close_submenu(self) -> None:
        if not self.submenu.is_open:
            return
        self.submenu.is_open = False
        self.submenu.items = []
        self.submenu.selected_index = 0
        # The popup area can only be restored by a full repaint.
        self._clear_requested = True
        log.info("Submenu closed.")

    def activate_selected(self) -> bool:
        """Close the submenu and return True if the selection quits the app."""
        if not self.submenu.is_open:
            return False
        selected = self.submenu.selected_item()
        log.info(f"Submenu item selected: '{selected}'")
        self.close_submenu()
        if selected == self.quit_label:
            log.info(f"'{self.quit_label}' selected from submenu. Exiting application.")
            return True
        return False

    def handle_key(self, key: str) -> bool:
        """Dispatch one logical key. Returns False when the app must stop."""
        if self.submenu.is_open:
            return self._handle_submenu_key(key)
        return self._handle_main_key(key)

    def _handle_submenu_key(self, key: str) -> bool:
        if key == KEY_ESC:
            self.close_submenu()
        elif key == KEY_ENTER:
            return not self.activate_selected()
        elif key == KEY_UP:
            log.debug("Submenu: UP pressed (navigation not implemented)")
        elif key == KEY_DOWN:
            log.debug("Submenu: DOWN pressed (navigation not implemented)")
        else:
            log.debug(f"Key '{key}' ignored in submenu context.")
        return True

    def _handle_main_key(self, key: str) -> bool:
        if key == self.quit_key:
            log.info(f"'{key}' pressed in main context, exiting main loop.")
            return False
        if key == KEY_LEFT:
            self.navigate(LEFT)
        elif key == KEY_RIGHT:
            self.navigate(RIGHT)
        elif key in (KEY_ENTER, KEY_DOWN):
            self.open_submenu()
        elif key == KEY_ESC:
            log.debug("ESC pressed on main screen (no action defined).")
        else:
            log.debug(f"Key '{key}' ignored in main context.")
        return True
