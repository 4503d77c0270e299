from __future__ import annotations

import itertools

import pytest

from backlight_ctl.config import Config
from backlight_ctl.errors import BacklightError, ErrorKind
from backlight_ctl.policy import (
    Action,
    div_trunc,
    percentage,
    select_action,
    target_value,
    validate_options,
    writable,
)

ACTIVE = {
    Action.GET: {"get": True},
    Action.SET: {"set_percent": 25},
    Action.DEC: {"decrement": 5},
    Action.INC: {"increment": 5},
}


def _kind(cfg: Config, action) -> ErrorKind | None:
    try:
        validate_options(cfg, action)
    except BacklightError as e:
        return e.kind
    return None


@pytest.mark.parametrize("action", list(Action))
def test_single_option_is_valid(action: Action) -> None:
    cfg = Config(**ACTIVE[action])
    assert _kind(cfg, action) is None
    assert _kind(cfg, action.value) is None


@pytest.mark.parametrize("pair", list(itertools.combinations(Action, 2)))
def test_combined_options_rejected(pair: tuple[Action, Action]) -> None:
    fields: dict = {}
    for a in pair:
        fields.update(ACTIVE[a])
    cfg = Config(**fields)
    for a in pair:
        assert _kind(cfg, a) is ErrorKind.COMBINED_OPTIONS


def test_all_options_rejected_for_every_action() -> None:
    fields: dict = {}
    for a in Action:
        fields.update(ACTIVE[a])
    cfg = Config(**fields)
    for a in Action:
        assert _kind(cfg, a) is ErrorKind.COMBINED_OPTIONS


@pytest.mark.parametrize("value,ok", [(0, False), (1, True), (50, True), (100, True), (101, False)])
def test_set_range(value: int, ok: bool) -> None:
    kind = _kind(Config(set_percent=value), Action.SET)
    assert kind is (None if ok else ErrorKind.SET_RANGE)


@pytest.mark.parametrize("action,field", [(Action.INC, "increment"), (Action.DEC, "decrement")])
@pytest.mark.parametrize("value,ok", [(0, False), (1, True), (10, True), (11, False)])
def test_step_range(action: Action, field: str, value: int, ok: bool) -> None:
    kind = _kind(Config(**{field: value}), action)
    assert kind is (None if ok else ErrorKind.VALUE_RANGE)


@pytest.mark.parametrize("action", [None, "", "toggle", "GET"])
def test_unknown_action(action) -> None:
    assert _kind(Config(get=True), action) is ErrorKind.NIL_ACTION


def test_select_action_priority() -> None:
    assert select_action(Config()) is None
    assert select_action(Config(increment=5)) is Action.INC
    assert select_action(Config(increment=5, decrement=5)) is Action.DEC
    assert select_action(Config(increment=5, decrement=5, set_percent=5)) is Action.SET
    assert select_action(Config(increment=5, decrement=5, set_percent=5, get=True)) is Action.GET


def test_div_trunc_rounds_toward_zero() -> None:
    assert div_trunc(7, 2) == 3
    assert div_trunc(-7, 2) == -3
    assert div_trunc(7, -2) == -3
    assert div_trunc(0, 5) == 0


def test_percentage_and_targets() -> None:
    assert percentage(250, 1000) == 25
    assert percentage(333, 1000) == 33
    assert percentage(-5, 1000) == 0
    assert target_value(Action.INC, Config(increment=5), 250, 1000) == 300
    assert target_value(Action.DEC, Config(decrement=5), 250, 1000) == 200
    assert target_value(Action.SET, Config(set_percent=25), 250, 1000) == 250
    assert target_value(Action.SET, Config(set_percent=3), 0, 7) == 0


def test_target_value_get_is_not_a_write() -> None:
    with pytest.raises(ValueError):
        target_value(Action.GET, Config(get=True), 250, 1000)


def test_writable() -> None:
    assert not writable(0, 1000)
    assert writable(1, 1000)
    assert writable(1000, 1000)
    assert not writable(1001, 1000)
    assert not writable(-1, 1000)
