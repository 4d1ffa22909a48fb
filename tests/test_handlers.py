from __future__ import annotations

import pytest

from pymtcsound.handlers import (
    REJECTED,
    BoolSetting,
    ChannelEnter,
    ChannelExit,
    IntSetting,
    NullHandler,
    PowerSetting,
    ReadOnly,
    TextSetting,
)
from pymtcsound.models.state import DeviceState
from pymtcsound.registry import build_registry

PROTOCOL_KEYS = {
    "av_control_mode",
    "rpt_power",
    "av_channel_enter",
    "av_channel_exit",
    "av_channel",
    "av_phone",
    "av_mute",
    "av_volume",
    "av_phone_volume",
    "av_balance",
    "av_gain",
    "av_eq_on",
    "av_eq_bass",
    "av_eq_middle",
    "av_eq_treble",
    "av_lud",
    "av_loudness",
    "cfg_maxvolume",
    "cfg_volumerange",
    "cfg_subwoofer",
    "cfg_gps_altmix",
    "cfg_gps_ontop",
    "av_gps_package",
    "av_gps_monitor",
    "av_gps_switch",
    "av_gps_gain",
    "av_gps_ontop",
    "av_eq",
}


def test_registry_covers_protocol_keys() -> None:
    assert set(build_registry()) == PROTOCOL_KEYS


def test_registry_is_read_only() -> None:
    registry = build_registry()
    with pytest.raises(TypeError):
        registry["av_new"] = NullHandler()  # type: ignore[index]


def test_int_setting_clamps_both_ends() -> None:
    state = DeviceState()
    handler = IntSetting("balance", -14, 14)

    assert handler.set(state, "99").value == "14"
    assert state.balance == 14
    assert handler.set(state, " -20 ").value == "-14"
    assert handler.get(state) == "-14"


def test_int_setting_reports_change_only_when_different() -> None:
    state = DeviceState()
    handler = IntSetting("volume", 0, 30)

    result = handler.set(state, "12")
    assert result.value == "12"
    assert not result.changed

    result = handler.set(state, "13")
    assert result.changed
    assert not result.forced


def test_int_setting_rejects_garbage() -> None:
    state = DeviceState()
    assert IntSetting("volume", 0, 30).set(state, "12.5") is REJECTED
    assert IntSetting("volume", 0, 30).set(state, "") is REJECTED
    assert state.volume == 12


def test_bool_setting_canonical_echo() -> None:
    state = DeviceState()
    handler = BoolSetting("mute")

    assert handler.set(state, "ON").value == "true"
    assert state.mute is True
    assert handler.set(state, "0").value == "false"
    assert handler.set(state, "perhaps") is REJECTED
    assert handler.get(state) == "false"


def test_profile_path_targets_active_input() -> None:
    state = DeviceState()
    handler = IntSetting("profile.treble", -7, 7)

    handler.set(state, "3")
    state.input = "bt"
    assert handler.get(state) == "0"
    assert set(state.profiles) == {"sys"}


def test_profile_reads_are_pure() -> None:
    state = DeviceState(input="aux")
    handler = BoolSetting("profile.loudness_on")

    assert handler.get(state) == "false"
    assert handler.set(state, "false").changed is False
    assert state.profiles == {}

    assert handler.set(state, "true").changed
    assert state.profiles["aux"].loudness_on is True


def test_nested_gps_path() -> None:
    state = DeviceState()
    TextSetting("gps.package").set(state, "  com.waze ")
    assert state.gps.package == "com.waze"


def test_read_only_rejects_set() -> None:
    state = DeviceState(hardware_status="i2c:x")
    handler = ReadOnly(lambda s: s.hardware_status)
    assert handler.get(state) == "i2c:x"
    assert handler.set(state, "none") is REJECTED
    assert state.hardware_status == "i2c:x"


def test_power_setting_requests_forced_apply_on_resume() -> None:
    state = DeviceState()
    handler = PowerSetting()

    off = handler.set(state, "false")
    assert off.value == "false"
    assert not off.changed
    assert state.power is False

    on = handler.set(state, "true")
    assert on.changed
    assert on.forced


def test_channel_enter_and_exit() -> None:
    state = DeviceState()

    entered = ChannelEnter().set(state, "ipod")
    assert entered.input_changed
    assert state.input == "ipod"
    assert ChannelEnter().set(state, "ipod").input_changed is False
    assert ChannelEnter().set(state, "  ") is REJECTED

    assert ChannelExit().get(state) is None
    assert not ChannelExit().set(state, "fm").changed
    exited = ChannelExit().set(state, "ipod")
    assert exited.changed
    assert state.input == "sys"
    assert not ChannelExit().set(state, "sys").changed


def test_null_handler() -> None:
    state = DeviceState()
    assert NullHandler().get(state) is None
    assert NullHandler().set(state, "1") is REJECTED
