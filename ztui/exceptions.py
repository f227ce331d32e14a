"""Custom exceptions for the terminal UI.

Exception Hierarchy:
    ZtuiError (base)
        ├── InitializationError
        │   └── ScreenTooSmallError
        ├── MenuConfigError
        └── GeometryInfeasibleError

Only initialization failures are fatal. Geometry problems are recovered by
the popup renderer, which closes the submenu and keeps the loop running.

Usage:
    from ztui.exceptions import ScreenTooSmallError

    if rows < MIN_ROWS or cols < MIN_COLS:
        raise ScreenTooSmallError(rows, cols, MIN_ROWS, MIN_COLS)
"""


class ZtuiError(Exception):
    """Base exception for all terminal UI errors."""



class InitializationError(ZtuiError):
    """The screen surface could not be initialized."""



class ScreenTooSmallError(InitializationError):
    """Terminal dimensions are below the supported minimum."""

    def __init__(self, rows: int, cols: int, min_rows: int, min_cols: int):
        self.rows = rows
        self.cols = cols
        self.min_rows = min_rows
        self.min_cols = min_cols
        super().__init__(
            f"Invalid/Too small screen dimensions (LINES: {rows}, COLS: {cols}). "
            f"Min {min_rows}x{min_cols} required."
        )


class MenuConfigError(ZtuiError):
    """Menu configuration is malformed."""

    def __init__(self, message: str, label: str = None):
        self.label = label
        super().__init__(message)


class GeometryInfeasibleError(ZtuiError):
    """A popup has no room to render at least one item row."""

    def __init__(self, height: int, required: int = 3):
        self.height = height
        self.required = required
        super().__init__(
            f"Submenu cannot be drawn, not enough vertical space. "
            f"Calculated height {height} (minimum {required})"
        )
