from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".hourglass_config.yaml"

DEFAULT_THEME = "dark-olive"
DEFAULT_TICK_MS = 250
MIN_TICK_MS = 50
DEFAULT_TTIMEOUTLEN = 0.05
DEFAULT_LOG_LEVEL = "INFO"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_user_theme() -> str:
    value = _load_config().get("theme", "")
    return str(value).strip() or DEFAULT_THEME


def get_tick_ms() -> int:
    raw = _load_config().get("tick_ms", DEFAULT_TICK_MS)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_TICK_MS
    return max(MIN_TICK_MS, value)


def get_log_file() -> str:
    return str(_load_config().get("log_file", "") or "").strip()


def get_log_level() -> str:
    return str(_load_config().get("log_level", "") or DEFAULT_LOG_LEVEL).strip().upper()


def get_ttimeoutlen() -> float:
    """Escape disambiguation delay; HOURGLASS_TTIMEOUTLEN overrides for slow terminals/SSH."""
    try:
        return max(0.0, float(os.getenv("HOURGLASS_TTIMEOUTLEN", str(DEFAULT_TTIMEOUTLEN))))
    except ValueError:
        return DEFAULT_TTIMEOUTLEN
