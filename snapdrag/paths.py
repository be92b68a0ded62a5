"""
Where SnapDrag keeps its files on disk.

The only persistent file is config.json (snap thresholds and page size).
It sits in the project root when running from a checkout, or next to the
executable in a frozen build, so a packaged app can be reconfigured by
editing a file beside it.
"""

import sys
from pathlib import Path


def get_app_dir() -> Path:
    """Project root (parent of snapdrag/), or the executable's directory when frozen."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """config.json holding the "snap" section read by snapdrag.config."""
    return get_app_dir() / "config.json"
