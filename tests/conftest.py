"""
Pytest configuration and shared fixtures for ztui tests.

This module provides a recording screen surface, a log capture sink and
common menu fixtures used across all test modules.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, List

import pytest

# Keep the user's settings file out of the test run. This must happen before
# ztui.config.settings is imported, because it loads settings at import time.
os.environ["ZTUI_SETTINGS_PATH"] = str(
    Path(tempfile.gettempdir()) / "ztui-tests" / "missing-settings.json"
)

from ztui import logging as logging_module  # noqa: E402
from ztui.menu.model import MenuModel  # noqa: E402
from ztui.menu.navigator import MenuBar  # noqa: E402
from ztui.ui.display import ScreenSurface  # noqa: E402


# ==============================================================================
# Screen Surface Fixtures
# ==============================================================================


class FakeSurface(ScreenSurface):
    """ScreenSurface that draws into an in-memory grid instead of curses.

    Box and frame drawing are inherited, so they are exercised for real.
    """

    def __init__(self, rows: int = 24, cols: int = 80, **kwargs) -> None:
        super().__init__(**kwargs)
        self.rows = rows
        self.cols = cols
        self.attribute = "default/default"
        self.cursor = (0, 0)
        self.clear_calls: List[bool] = []
        self.refresh_count = 0
        self.box_calls: List[tuple] = []
        self._reset_grid()

    def _reset_grid(self) -> None:
        self.cells = [[" "] * self.cols for _ in range(self.rows)]
        self.attrs = [[None] * self.cols for _ in range(self.rows)]

    def clear(self, redraw: bool = False) -> None:
        self.clear_calls.append(redraw)
        self._reset_grid()

    def move(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def write(self, text: str) -> None:
        row, col = self.cursor
        for char in text:
            if 0 <= row < self.rows and 0 <= col < self.cols:
                self.cells[row][col] = char
                self.attrs[row][col] = self.attribute
            col += 1
        self.cursor = (row, col)

    def set_attribute(self, spec: str) -> None:
        self.attribute = spec

    def refresh(self) -> bool:
        self.refresh_count += 1
        return True

    def draw_box(self, y: int, x: int, height: int, width: int) -> None:
        self.box_calls.append((y, x, height, width))
        super().draw_box(y, x, height, width)

    def row_text(self, row: int) -> str:
        return "".join(self.cells[row])

    def attr_at(self, row: int, col: int):
        return self.attrs[row][col]


@pytest.fixture
def fake_surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def surface_factory():
    def _make(rows: int = 24, cols: int = 80, **kwargs) -> FakeSurface:
        return FakeSurface(rows=rows, cols=cols, **kwargs)

    return _make


# ==============================================================================
# Menu Fixtures
# ==============================================================================


@pytest.fixture
def file_menu_mapping() -> Dict[str, str]:
    return {"File": "New Open Save --- Quit"}


@pytest.fixture
def full_menu() -> MenuModel:
    return MenuModel.from_mapping(
        {
            "File": "New Open Save --- Quit",
            "Edit": "Cut Copy Paste Find",
            "View": "Statusbar Toolbar Zoom",
            "Help": "About Index Manual",
            "Tools": "",
        }
    )


@pytest.fixture
def menubar(full_menu) -> MenuBar:
    return MenuBar(full_menu)


@pytest.fixture
def empty_menubar() -> MenuBar:
    return MenuBar(MenuModel())


# ==============================================================================
# Logging Fixtures
# ==============================================================================


@pytest.fixture
def captured_logs():
    """Route every log record into a list for the duration of a test."""
    logging_module.logger.remove()
    records: List[dict] = []

    def sink(message):
        records.append(message.record)

    handler_id = logging_module.logger.add(sink, level="TRACE", enqueue=False)
    yield records
    logging_module.logger.remove(handler_id)


@pytest.fixture
def messages_at(captured_logs):
    """Return the captured messages logged at one level."""

    def _messages(level: str) -> List[str]:
        return [r["message"] for r in captured_logs if r["level"].name == level]

    return _messages
