"""Read-only JSON config helpers.

Stores the dictionary directory, dictionary file extension, theme name, and
page step. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .store import DEFAULT_EXTENSION

APP_NAME = "lazydict"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_DICTIONARY_DIR = Path("dics")
DEFAULT_PAGE_STEP = 10


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_nonempty_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_dictionary_dir() -> Path:
    """Return configured dictionary directory, defaulting to ``./dics``."""
    value = _load_nonempty_str("dictionary_dir")
    if value is None:
        return DEFAULT_DICTIONARY_DIR
    return Path(value).expanduser()


def load_dictionary_extension() -> str:
    """Return configured dictionary file extension including its leading dot."""
    value = _load_nonempty_str("dictionary_extension")
    if value is None:
        return DEFAULT_EXTENSION
    return value if value.startswith(".") else f".{value}"


def load_theme_name() -> str | None:
    """Load UI theme name, returning ``None`` when unset/invalid."""
    return _load_nonempty_str("theme")


def load_page_step() -> int:
    """Return rows moved by page-up/page-down.

    Booleans, non-integers, and values below one fall back to the default.
    """
    value = load_config().get("page_step")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_PAGE_STEP
    return value
