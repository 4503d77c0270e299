from __future__ import annotations

import enum

from backlight_ctl.config import Config
from backlight_ctl.errors import BacklightError, ErrorKind

SET_MAX_PERCENT = 100
STEP_MAX_PERCENT = 10


class Action(enum.Enum):
    GET = "get"
    SET = "set"
    DEC = "dec"
    INC = "inc"


def select_action(cfg: Config) -> Action | None:
    """Return the first active action in priority order get, set, dec, inc."""

    if cfg.get:
        return Action.GET
    if cfg.set_percent > 0:
        return Action.SET
    if cfg.decrement > 0:
        return Action.DEC
    if cfg.increment > 0:
        return Action.INC
    return None


def _coerce(action: Action | str | None) -> Action | None:
    if isinstance(action, Action):
        return action
    try:
        return Action(action)
    except ValueError:
        return None


def validate_options(cfg: Config, action: Action | str | None) -> None:
    """Check that `action` is the only active option and its value is in range."""

    chosen = _coerce(action)

    if chosen is Action.GET:
        if cfg.set_percent > 0 or cfg.increment > 0 or cfg.decrement > 0:
            raise BacklightError(ErrorKind.COMBINED_OPTIONS)
        return

    if chosen is Action.SET:
        if cfg.increment > 0 or cfg.decrement > 0 or cfg.get:
            raise BacklightError(ErrorKind.COMBINED_OPTIONS)
        if not 0 < cfg.set_percent <= SET_MAX_PERCENT:
            raise BacklightError(ErrorKind.SET_RANGE)
        return

    if chosen is Action.DEC:
        if cfg.increment > 0 or cfg.set_percent > 0 or cfg.get:
            raise BacklightError(ErrorKind.COMBINED_OPTIONS)
        if not 0 < cfg.decrement <= STEP_MAX_PERCENT:
            raise BacklightError(ErrorKind.VALUE_RANGE)
        return

    if chosen is Action.INC:
        if cfg.decrement > 0 or cfg.set_percent > 0 or cfg.get:
            raise BacklightError(ErrorKind.COMBINED_OPTIONS)
        if not 0 < cfg.increment <= STEP_MAX_PERCENT:
            raise BacklightError(ErrorKind.VALUE_RANGE)
        return

    raise BacklightError(ErrorKind.NIL_ACTION)


def div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""

    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def percentage(actual: int, maximum: int) -> int:
    return div_trunc(actual * 100, maximum)


def target_value(action: Action, cfg: Config, actual: int, maximum: int) -> int:
    if action is Action.INC:
        return actual + div_trunc(cfg.increment * maximum, 100)
    if action is Action.DEC:
        return actual - div_trunc(cfg.decrement * maximum, 100)
    if action is Action.SET:
        return div_trunc(cfg.set_percent * maximum, 100)
    raise ValueError(f"{action} does not change brightness")


def writable(value: int, maximum: int) -> bool:
    return 0 < value <= maximum
