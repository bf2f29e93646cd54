"""Helpers for loading the user configuration file (~/.apkscope/config.json)."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

CONFIG_DIR = Path.home() / ".apkscope"
CONFIG_FILE = CONFIG_DIR / "config.json"

TOOL_TIMEOUT_KEY: Final[str] = "tool_timeout"
DEFAULT_TOOL_TIMEOUT: Final[float] = 60.0


@lru_cache(maxsize=1)
def load_config() -> dict[str, Any]:
    """Load configuration data from disk (cached).

    A missing, unreadable or malformed file yields an empty configuration.
    """
    try:
        data = json.loads(CONFIG_FILE.read_text())
    except (OSError, ValueError):
        return {}

    return data if isinstance(data, dict) else {}


def get_config_value(key: str, default: Any | None = None) -> Any | None:
    """Fetch a configuration value by key."""
    return load_config().get(key, default)


def get_tool_timeout() -> float:
    """Timeout in seconds applied to external tool runs."""
    value = get_config_value(TOOL_TIMEOUT_KEY)
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return float(value)
    return DEFAULT_TOOL_TIMEOUT


def reload_config() -> None:
    """Force the cached configuration to be reloaded on next access."""
    load_config.cache_clear()
