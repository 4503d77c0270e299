from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from backlight_ctl.errors import BacklightError, ErrorKind

log = logging.getLogger(__name__)

BRIGHTNESS = "brightness"
ACTUAL_BRIGHTNESS = "actual_brightness"
MAX_BRIGHTNESS = "max_brightness"
DRIVER_FILES = (BRIGHTNESS, ACTUAL_BRIGHTNESS, MAX_BRIGHTNESS)

_INT_RE = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class DeviceState:
    path: Path
    brightness: int
    actual_brightness: int
    max_brightness: int


def parse_value(text: str) -> int:
    """Parse a sysfs attribute as a signed 64-bit base-10 integer.

    Surrounding newlines are trimmed; anything else that is not a plain
    signed decimal number (including empty content) is rejected, as are
    values outside the int64 range.
    """

    value = text.strip("\n")
    m = _INT_RE.fullmatch(value)
    if not m:
        raise BacklightError(ErrorKind.PARSE, f"Error parsing {value!r}: invalid syntax")

    digits = m.group("digits").lstrip("0") or "0"
    if len(digits) > len(str(INT64_MAX)):
        raise BacklightError(ErrorKind.PARSE, f"Error parsing {value[:32]!r}: value out of range")
    try:
        number = int(m.group("sign") + digits, 10)
    except ValueError as e:
        raise BacklightError(ErrorKind.PARSE, f"Error parsing {value!r}: {e}") from e
    if not INT64_MIN <= number <= INT64_MAX:
        raise BacklightError(ErrorKind.PARSE, f"Error parsing {value!r}: value out of range")
    return number


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / BRIGHTNESS

    def discover(self) -> list[str]:
        """Return the driver file names present in the device directory."""

        try:
            names = [entry.name for entry in os.scandir(self.sysfs_dir)]
        except OSError as e:
            raise BacklightError.from_os_error(e) from e

        found = [name for name in sorted(names) if name in DRIVER_FILES]
        log.debug("driver files in %s: %s", self.sysfs_dir, found)
        if len(found) != len(DRIVER_FILES):
            raise BacklightError(ErrorKind.DRIVER_FILES_NOT_FOUND)
        return found

    def _read(self, name: str) -> int:
        try:
            raw = (self.sysfs_dir / name).read_bytes()
        except OSError as e:
            raise BacklightError.from_os_error(e) from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BacklightError(ErrorKind.PARSE, f"Error parsing {name}: {e}") from e
        return parse_value(text)

    def load(self, files: list[str]) -> DeviceState:
        if len(files) != len(DRIVER_FILES):
            raise BacklightError(ErrorKind.DRIVER_FILES_NOT_FOUND)

        values: dict[str, int] = {}
        for name in files:
            if name not in DRIVER_FILES:
                raise BacklightError(ErrorKind.UNEXPECTED_FILE)
            values[name] = self._read(name)

        if len(values) != len(DRIVER_FILES):
            raise BacklightError(ErrorKind.DRIVER_FILES_NOT_FOUND)

        # Percentages divide by the maximum.
        if values[MAX_BRIGHTNESS] <= 0:
            raise BacklightError(ErrorKind.INVALID_MAX)

        state = DeviceState(
            path=self.sysfs_dir,
            brightness=values[BRIGHTNESS],
            actual_brightness=values[ACTUAL_BRIGHTNESS],
            max_brightness=values[MAX_BRIGHTNESS],
        )
        log.debug("loaded %s", state)
        return state

    def set_brightness(self, value: int) -> None:
        # Write-only without O_CREAT: a vanished attribute must fail, not be recreated.
        try:
            fd = os.open(self._brightness, os.O_WRONLY | os.O_TRUNC)
        except OSError as e:
            raise BacklightError.from_os_error(e) from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(str(int(value)))
                f.flush()
        except OSError as e:
            raise BacklightError.from_os_error(e) from e
        log.debug("wrote %d to %s", value, self._brightness)
