"""Persistent JSON config helpers.

Reads the default prompt, UI theme, and selection indicator.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazylaunch"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_PROMPT = "> "
DEFAULT_THEME_NAME = "default"
DEFAULT_HIGHLIGHT_SYMBOL = ">> "


@dataclass(frozen=True)
class LauncherConfig:
    prompt: str = DEFAULT_PROMPT
    theme: str = DEFAULT_THEME_NAME
    highlight_symbol: str = DEFAULT_HIGHLIGHT_SYMBOL


def load_config_data() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _string_value(data: dict[str, object], key: str, default: str, *, allow_empty: bool) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    if not allow_empty and not value.strip():
        return default
    if "\n" in value or "\r" in value:
        return default
    return value


def load_config() -> LauncherConfig:
    """Return persisted launcher settings with invalid entries replaced by defaults."""
    data = load_config_data()
    return LauncherConfig(
        prompt=_string_value(data, "prompt", DEFAULT_PROMPT, allow_empty=True),
        theme=_string_value(data, "theme", DEFAULT_THEME_NAME, allow_empty=False),
        highlight_symbol=_string_value(data, "highlight_symbol", DEFAULT_HIGHLIGHT_SYMBOL, allow_empty=True),
    )
