from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MakeDevice = Callable[..., Path]


@pytest.fixture
def make_device(tmp_path: Path) -> MakeDevice:
    """Create a fake /sys/class/backlight/<name> directory under tmp_path."""

    def make(
        name: str = "intel_backlight",
        *,
        brightness: str = "250\n",
        actual: str = "250\n",
        maximum: str = "1000\n",
    ) -> Path:
        dev = tmp_path / name
        dev.mkdir()
        (dev / "brightness").write_text(brightness, encoding="utf-8")
        (dev / "actual_brightness").write_text(actual, encoding="utf-8")
        (dev / "max_brightness").write_text(maximum, encoding="utf-8")
        return dev

    return make
