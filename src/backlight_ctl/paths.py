from __future__ import annotations

import os
from pathlib import Path

SYSFS_BACKLIGHT_ROOT = Path("/sys/class/backlight")
DEFAULT_DEVICE = "intel_backlight"


def default_config_file(app_name: str = "backlight-ctl") -> Path:
    """Return the per-user defaults file location.

    Uses XDG_CONFIG_HOME when available, else ~/.config. The file is optional.
    """

    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".config"
    return root / app_name / "config.yaml"
