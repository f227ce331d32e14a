from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "ZTUI_LOG_DIR",
        Path.home() / ".local" / "state" / "ztui" / "logs",
    )
)

DEFAULT_LEVEL = "INFO"

# Level names accepted on the command line, mapped to loguru's names.
LEVEL_ALIASES = {
    "TRACE": "TRACE",
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "FATAL": "CRITICAL",
    "CRITICAL": "CRITICAL",
}

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{extra[source]: <10} | "
    "{message}"
)


def normalize_level(level: str | None) -> str:
    """Map a user supplied level name onto a loguru level name.

    Unknown names fall back to INFO. The warning goes to stderr because the
    file sink may not exist yet.
    """
    if not level:
        return DEFAULT_LEVEL
    resolved = LEVEL_ALIASES.get(level.strip().upper())
    if resolved is None:
        print(
            f"Warning: unknown log level '{level}', using {DEFAULT_LEVEL}.",
            file=sys.stderr,
        )
        return DEFAULT_LEVEL
    return resolved


def resolve_log_file(log_file: str | Path, log_dir: Path | None = None) -> Path:
    """Place bare file names inside the log directory.

    Absolute paths and relative paths with directory components are used
    as given.
    """
    path = Path(log_file)
    if path.is_absolute() or len(path.parts) > 1:
        return path
    return (log_dir or DEFAULT_LOG_DIR) / path


def setup_logging(
    log_file: str | Path | None = None,
    *,
    level: str | None = None,
    log_dir: Path | None = None,
) -> Logger:
    """
    Configure the single file sink used by the UI.

    curses owns the terminal for the lifetime of the application, so there
    is no console sink. Without a log file every message is dropped.

    Args:
        log_file: Target file. Bare names land in ``log_dir``.
        level: Minimum level (DEBUG, INFO, WARN, ERROR, FATAL or TRACE)
        log_dir: Directory for bare file names (defaults to DEFAULT_LOG_DIR)

    Returns:
        The configured logger
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "APP"})

    if log_file is None:
        return logger

    target = resolve_log_file(log_file, log_dir)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        target,
        level=normalize_level(level),
        rotation="5 MB",
        retention="7 days",
        enqueue=False,
        backtrace=False,
        diagnose=False,
        format=LOG_FORMAT,
    )
    return logger


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["ui", "menu"])
        source: Source component (e.g., "menu", "screen")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating component loggers with automatic context.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for menu bar state changes and submenu handling."""
        return logger.bind(source="menu", tags=["ui", "menu"])

    @staticmethod
    def for_screen() -> Logger:
        """Logger for the screen surface and renderers."""
        return logger.bind(source="screen", tags=["ui", "screen"])

    @staticmethod
    def for_input() -> Logger:
        """Logger for key reads and classification."""
        return logger.bind(source="input", tags=["input"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for system operations (startup, shutdown, config)."""
        return logger.bind(source="system", tags=["system"])
