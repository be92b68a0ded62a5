"""
Configuration management for SnapDrag.

Handles the snap thresholds and page size:
- Defaults from snapdrag.drag.constants
- Persistent values in the "snap" section of config.json
- Environment overrides (SNAPDRAG_*), which a .env file can provide

Config is stored in config.json next to the executable/project root.
"""

import json
import logging
import os
from dataclasses import asdict
from typing import Any, Dict, Optional

from snapdrag.drag.constants import SnapConfig
from snapdrag.paths import get_config_path

logger = logging.getLogger(__name__)

# Option name -> environment variable
ENV_VARS = {
    "proximity_threshold": "SNAPDRAG_PROXIMITY_THRESHOLD",
    "edge_threshold": "SNAPDRAG_EDGE_THRESHOLD",
    "page_width": "SNAPDRAG_PAGE_WIDTH",
    "page_height": "SNAPDRAG_PAGE_HEIGHT",
}

SNAP_SECTION = "snap"


def load_config() -> dict:
    """
    Read the whole config.json as a dict.

    A missing file means "all defaults"; an unreadable or corrupt one is
    logged and treated the same way so the canvas still starts.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable {config_path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Overwrite config.json. Callers merge sections first (see save_snap_config)."""
    config_path = get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _to_number(name: str, value: Any, source: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name}={value!r} from {source}")
        return None


def get_snap_config(overrides: Optional[Dict[str, Any]] = None) -> SnapConfig:
    """
    Resolve the SnapConfig for this run.

    Priority per option:
    1. Explicit overrides (tests, callers)
    2. Environment variable SNAPDRAG_<OPTION>
    3. "snap" section of config.json
    4. Built-in default
    """
    overrides = overrides or {}
    stored = load_config().get(SNAP_SECTION) or {}
    defaults = SnapConfig()
    values = {}

    for name, env_var in ENV_VARS.items():
        candidates = (
            (overrides.get(name), "overrides"),
            (os.environ.get(env_var), env_var),
            (stored.get(name), "config.json"),
        )
        for raw, source in candidates:
            if raw is None or raw == "":
                continue
            number = _to_number(name, raw, source)
            if number is not None:
                values[name] = number
                break

    try:
        return SnapConfig(**values)
    except ValueError as e:
        logger.warning(f"Invalid snap configuration {values}: {e}; using defaults")
        return defaults


def save_snap_config(snap_config: SnapConfig) -> None:
    """Persist snap settings to config.json, keeping other sections."""
    config = load_config()
    config[SNAP_SECTION] = asdict(snap_config)
    save_config(config)
