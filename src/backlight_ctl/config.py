from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from backlight_ctl.errors import BacklightError, ErrorKind
from backlight_ctl.paths import DEFAULT_DEVICE, SYSFS_BACKLIGHT_ROOT, default_config_file

_KEYS: dict[str, type] = {
    "device": str,
    "sysfs_root": str,
    "log_level": str,
}


class ConfigError(BacklightError, ValueError):
    def __init__(self, message: str):
        super().__init__(ErrorKind.CONFIG, message)


@dataclass(frozen=True)
class Config:
    device: str = DEFAULT_DEVICE
    increment: int = 0
    decrement: int = 0
    set_percent: int = 0
    get: bool = False
    sysfs_root: Path = SYSFS_BACKLIGHT_ROOT

    @property
    def device_path(self) -> Path:
        return self.sysfs_root / self.device


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    validate(data)
    return data


def load_default() -> dict[str, Any]:
    """Load the per-user defaults file if there is one."""

    p = default_config_file()
    if not p.is_file():
        return {}
    return load(p)


def normalize(cfg: dict[str, Any]) -> None:
    for key, value in cfg.items():
        if isinstance(value, str):
            cfg[key] = value.strip()


def validate(cfg: dict[str, Any]) -> None:
    for key, value in cfg.items():
        if key not in _KEYS:
            raise ConfigError(f"Unknown config key: {key}")
        if not isinstance(value, _KEYS[key]):
            raise ConfigError(f"{key} must be a {_KEYS[key].__name__}")

    if "device" in cfg and not cfg["device"]:
        raise ConfigError("device must be a non-empty string")

    if "sysfs_root" in cfg and not cfg["sysfs_root"]:
        raise ConfigError("sysfs_root must be a non-empty string")

    if "log_level" in cfg and not isinstance(
        logging.getLevelName(cfg["log_level"].upper()), int
    ):
        raise ConfigError(f"Unknown log_level: {cfg['log_level']}")


def build(
    file_cfg: dict[str, Any],
    *,
    device: str | None = None,
    sysfs_root: str | Path | None = None,
    increment: int = 0,
    decrement: int = 0,
    set_percent: int = 0,
    get: bool = False,
) -> Config:
    """Merge defaults, the YAML file and command-line values into a Config.

    Command-line values win over the file, the file wins over built-in defaults.
    """

    device = device if device is not None else file_cfg.get("device", DEFAULT_DEVICE)
    device = str(device).strip()
    if not device:
        raise ConfigError("device must be a non-empty string")

    root = sysfs_root if sysfs_root is not None else file_cfg.get("sysfs_root")
    if root is not None and not str(root).strip():
        raise ConfigError("sysfs_root must be a non-empty string")

    return Config(
        device=device,
        increment=int(increment),
        decrement=int(decrement),
        set_percent=int(set_percent),
        get=bool(get),
        sysfs_root=Path(str(root).strip()) if root is not None else SYSFS_BACKLIGHT_ROOT,
    )
