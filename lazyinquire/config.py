"""Persistent JSON config helpers.

Stores user defaults for prompts: UI theme, vim keybindings, hidden-file
visibility and page size. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyinquire"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool | None:
    value = load_config().get(key)
    return value if isinstance(value, bool) else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_vim_mode() -> bool:
    """Return persisted vim-keybinding preference (``False`` when unset)."""
    return bool(_load_bool("vim_mode"))


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility (``True`` when unset)."""
    value = _load_bool("show_hidden")
    return True if value is None else value


def load_page_size() -> int | None:
    """Return persisted page size; booleans and non-positive values are ignored."""
    value = load_config().get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_vim_mode",
    "load_show_hidden",
    "load_page_size",
]
