from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from backlight_ctl.config import Config
from backlight_ctl.errors import BacklightError, ErrorKind
from backlight_ctl.policy import (
    Action,
    percentage,
    select_action,
    target_value,
    validate_options,
    writable,
)
from backlight_ctl.system.backlight import Backlight, DeviceState

log = logging.getLogger(__name__)


class Stage(enum.Enum):
    UNINITIALIZED = "uninitialized"
    PATH_RESOLVED = "path_resolved"
    DISCOVERY_DONE = "discovery_done"
    PARAMS_LOADED = "params_loaded"
    VALIDATED = "validated"
    ACTION_EXECUTED = "action_executed"
    ERROR = "error"


@dataclass
class Controller:
    """Loads one backlight device and applies a single action to it."""

    config: Config
    stage: Stage = field(default=Stage.UNINITIALIZED, init=False)
    device: DeviceState | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._backlight: Backlight | None = None

    def init(self) -> None:
        try:
            path = self.config.device_path
            try:
                path.stat()
            except OSError as e:
                raise BacklightError.from_os_error(e) from e
            log.debug("device path %s", path)
            self._backlight = Backlight(path)
            self.stage = Stage.PATH_RESOLVED

            files = self._backlight.discover()
            self.stage = Stage.DISCOVERY_DONE

            self.device = self._backlight.load(files)
            self.stage = Stage.PARAMS_LOADED
        except BacklightError:
            self.stage = Stage.ERROR
            raise

    def run(self) -> str:
        """Validate and execute the selected action.

        Returns the brightness percentage for get, an empty string otherwise.
        """

        if self.device is None or self.stage is not Stage.PARAMS_LOADED:
            raise RuntimeError("Controller.run() called before a successful init()")

        action = select_action(self.config)
        log.debug("selected action %s", action)
        try:
            if action is None:
                raise BacklightError(ErrorKind.NO_OPTION)
            validate_options(self.config, action)
            self.stage = Stage.VALIDATED

            out = ""
            if action is Action.GET:
                out = self.get()
            elif action is Action.SET:
                self.set()
            elif action is Action.DEC:
                self.decrement()
            else:
                self.increment()
        except BacklightError:
            self.stage = Stage.ERROR
            raise

        self.stage = Stage.ACTION_EXECUTED
        return out

    def _loaded(self) -> DeviceState:
        if self.device is None:
            raise RuntimeError("device parameters not loaded")
        return self.device

    def get(self) -> str:
        dev = self._loaded()
        return str(percentage(dev.actual_brightness, dev.max_brightness))

    def _apply(self, action: Action) -> None:
        dev = self._loaded()
        value = target_value(action, self.config, dev.actual_brightness, dev.max_brightness)
        if not writable(value, dev.max_brightness):
            log.debug(
                "%s: new value %d outside 1..%d, not written",
                action.value,
                value,
                dev.max_brightness,
            )
            return
        assert self._backlight is not None
        self._backlight.set_brightness(value)

    def increment(self) -> None:
        self._apply(Action.INC)

    def decrement(self) -> None:
        self._apply(Action.DEC)

    def set(self) -> None:
        self._apply(Action.SET)
