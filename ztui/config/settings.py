"""Settings storage for application configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ztui.logging import LoggerFactory

log = LoggerFactory.for_system()

SETTINGS_PATH = Path(
    os.environ.get(
        "ZTUI_SETTINGS_PATH",
        Path.home() / ".config" / "ztui" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_TITLE = "Zsh TUI Framework v0.3"
DEFAULT_ATTR_NORMAL = "default/default"
DEFAULT_ATTR_ACTIVE = "white/blue"
DEFAULT_QUIT_KEY = "q"
DEFAULT_QUIT_LABEL = "Quit"

DEFAULT_SETTINGS: dict[str, Any] = {
    "title": DEFAULT_TITLE,
    "attr_normal": DEFAULT_ATTR_NORMAL,
    "attr_active": DEFAULT_ATTR_ACTIVE,
    "quit_key": DEFAULT_QUIT_KEY,
    "quit_label": DEFAULT_QUIT_LABEL,
    "ascii_borders": False,
    # None selects the built-in menu from ztui.menu.definitions
    "menu": None,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        log.warning(f"Could not read settings from {SETTINGS_PATH}: {error}. Using defaults.")
        return
    if not isinstance(data, dict):
        log.warning(f"Settings file {SETTINGS_PATH} does not hold a JSON object. Using defaults.")
        return
    settings_store.values.update(data)


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(settings_store.values, indent=2),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value
    save_settings()


def get_bool(key: str, default: bool = False) -> bool:
    return bool(get_setting(key, default))


load_settings()
