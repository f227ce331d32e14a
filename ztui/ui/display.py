"""Screen surface: a thin curses wrapper used by every renderer.

This module provides the character-cell drawing layer, handling:
- Terminal initialization, size checks and teardown
- Attribute-tagged string writes (``"fg/bg"`` specs, see ui.attributes)
- Box drawing for the main frame and for pop-up submenus
- Refresh with a single fallback flush

Screen Layout:
    Row 0 is the top border with the inline menu bar and title (drawn by
    ui.renderer). The left border is column 0, the right border is column
    ``cols - 2`` and the bottom border is row ``rows - 2``. Everything in
    between is content area.

Error Handling:
    - Initialization failures raise InitializationError (fatal)
    - Terminals smaller than MIN_ROWS x MIN_COLS raise ScreenTooSmallError
    - Writes that curses rejects (typically the bottom-right cell) are
      logged at TRACE and skipped
    - Refresh failures are logged and retried once with curses.doupdate()

Thread Safety:
    This module is NOT thread-safe. All drawing must happen on the thread
    that runs the main loop.
"""

from __future__ import annotations

import curses
import locale
import os
from typing import Optional, Tuple

from ztui.exceptions import InitializationError, ScreenTooSmallError
from ztui.logging import LoggerFactory
from ztui.ui.attributes import ColorPairCache
from ztui.ui.constants import MIN_COLS, MIN_ROWS, UNICODE_GLYPHS, BorderGlyphs
from ztui.ui.input import read_key

log = LoggerFactory.for_screen()

ESC_DELAY_MS = "25"


class ScreenSurface:
    def __init__(
        self,
        glyphs: BorderGlyphs = UNICODE_GLYPHS,
        *,
        min_rows: int = MIN_ROWS,
        min_cols: int = MIN_COLS,
    ) -> None:
        self.glyphs = glyphs
        self.min_rows = min_rows
        self.min_cols = min_cols
        self.window = None
        self.rows = 0
        self.cols = 0
        self._colors: Optional[ColorPairCache] = None

    def init(self) -> None:
        log.debug("Initializing screen...")
        # Bare ESC presses are otherwise held back for a full second.
        os.environ.setdefault("ESCDELAY", ESC_DELAY_MS)
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error as error:
            log.warning(f"Could not apply the environment locale: {error}")
        try:
            self.window = curses.initscr()
        except curses.error as error:
            log.error(f"curses initscr failed: {error}")
            raise InitializationError(f"curses initialization failed: {error}") from error
        curses.noecho()
        curses.cbreak()
        self.window.keypad(True)
        log.info("curses initialized.")

        colors_enabled = curses.has_colors()
        if colors_enabled:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                log.warning("use_default_colors failed. 'default' colors may not render.")
        self._colors = ColorPairCache(colors_enabled=colors_enabled)

        try:
            curses.curs_set(0)
        except curses.error:
            log.warning("curs_set(0) failed. Cursor might remain visible.")

        self.rows, self.cols = self.window.getmaxyx()
        if self.rows < self.min_rows or self.cols < self.min_cols:
            error = ScreenTooSmallError(self.rows, self.cols, self.min_rows, self.min_cols)
            log.error(str(error))
            self.end()
            raise error
        log.info(f"Screen dimensions: LINES={self.rows}, COLS={self.cols}")

        self.clear(redraw=True)
        self.draw_frame()
        log.debug("Screen initialized (sides/bottom border drawn).")

    def end(self) -> None:
        if self.window is None:
            log.warning("Screen end requested before init.")
            return
        log.debug("Ending screen session...")
        try:
            curses.curs_set(1)
        except curses.error:
            log.warning("curs_set(1) failed to restore cursor.")
        self.window.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.window = None
        log.info("curses ended.")

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def clear(self, redraw: bool = False) -> None:
        if redraw:
            # clear() also repaints the whole terminal on the next refresh.
            self.window.clear()
        else:
            self.window.erase()

    def move(self, row: int, col: int) -> None:
        try:
            self.window.move(row, col)
        except curses.error:
            log.trace(f"move({row}, {col}) rejected by curses")

    def write(self, text: str) -> None:
        try:
            self.window.addstr(text)
        except curses.error:
            # Writing the last cell of the screen advances the cursor past
            # the edge, which curses reports even though the text is drawn.
            log.trace(f"addstr rejected by curses: {text!r}")

    def set_attribute(self, spec: str) -> None:
        self.window.attrset(self._colors.attr_for(spec))

    def refresh(self) -> bool:
        try:
            self.window.refresh()
            return True
        except curses.error:
            log.warning("window refresh failed. Trying curses.doupdate().")
        try:
            curses.doupdate()
            return True
        except curses.error:
            log.error("curses.doupdate() also failed.")
            return False

    def read_key(self) -> str:
        return read_key(self.window)

    def draw_box(self, y: int, x: int, height: int, width: int) -> None:
        glyphs = self.glyphs
        inner = glyphs.horizontal * max(width - 2, 0)
        self.move(y, x)
        self.write(f"{glyphs.upper_left}{inner}{glyphs.upper_right}")
        for row in range(y + 1, y + height - 1):
            self.move(row, x)
            self.write(glyphs.vertical)
            self.move(row, x + width - 1)
            self.write(glyphs.vertical)
        self.move(y + height - 1, x)
        self.write(f"{glyphs.lower_left}{inner}{glyphs.lower_right}")

    def draw_frame(self) -> None:
        """Draw the sides and bottom of the main border.

        The top row belongs to the menu bar renderer.
        """
        glyphs = self.glyphs
        right = self.cols - 2
        bottom = self.rows - 2
        for row in range(1, bottom):
            self.move(row, 0)
            self.write(glyphs.vertical)
            self.move(row, right)
            self.write(glyphs.vertical)
        self.move(bottom, 0)
        self.write(f"{glyphs.lower_left}{glyphs.horizontal * (right - 1)}{glyphs.lower_right}")
