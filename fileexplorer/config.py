"""JSON config file helpers.

Reads preview style, color preference, and the prompt string.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .preview.syntax import DEFAULT_STYLE

APP_NAME = "fileexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_PROMPT = "> "


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


def load_style_name() -> str:
    """Load the Pygments style used for previews, defaulting to ``monokai``."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE


def load_color() -> bool | None:
    """Return the persisted color preference, or ``None`` to auto-detect.

    Only explicit booleans are honored.
    """
    value = load_config().get("color")
    return value if isinstance(value, bool) else None


def load_prompt() -> str:
    """Load the REPL prompt string; non-string values fall back to ``"> "``."""
    value = load_config().get("prompt")
    return value if isinstance(value, str) else DEFAULT_PROMPT


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_PROMPT",
    "DEFAULT_STYLE",
    "load_config",
    "load_style_name",
    "load_color",
    "load_prompt",
]
