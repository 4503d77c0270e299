from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    DRIVER_FILES_NOT_FOUND = "driver_files_not_found"
    UNEXPECTED_FILE = "unexpected_file"
    IO = "io"
    PARSE = "parse"
    INVALID_MAX = "invalid_max"
    COMBINED_OPTIONS = "combined_options"
    SET_RANGE = "set_range"
    VALUE_RANGE = "value_range"
    NIL_ACTION = "nil_action"
    NO_OPTION = "no_option"
    CONFIG = "config"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.DRIVER_FILES_NOT_FOUND: "Error driver files not found in device path",
    ErrorKind.UNEXPECTED_FILE: "Error no proper files on driver folder",
    ErrorKind.INVALID_MAX: "Error max_brightness must be greater than 0",
    ErrorKind.COMBINED_OPTIONS: "Error combined options",
    ErrorKind.SET_RANGE: "Error value must be between 1 and 100",
    ErrorKind.VALUE_RANGE: "Error value must be between 1 and 10",
    ErrorKind.NIL_ACTION: "Error action is nil",
    ErrorKind.NO_OPTION: "Error no options, try backlight-ctl -h",
}


class BacklightError(Exception):
    """Terminal failure of one invocation, tagged with an ErrorKind."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or DEFAULT_MESSAGES.get(kind, kind.value))

    @classmethod
    def from_os_error(cls, exc: OSError) -> BacklightError:
        return cls(ErrorKind.IO, str(exc))
