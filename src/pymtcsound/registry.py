"""Static parameter table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pymtcsound._constants import (
    BALANCE_LIMIT,
    EQ_LIMIT,
    GPS_GAIN_MAX,
    INPUT_GAIN_MAX,
    LOUDNESS_MAX,
    VOLUME_MAX,
    VOLUME_MIN,
    VOLUME_RANGE_MAX,
    VOLUME_RANGE_MIN,
)
from pymtcsound.handlers import (
    BoolSetting,
    ChannelEnter,
    ChannelExit,
    IntSetting,
    NullHandler,
    ParameterHandler,
    PowerSetting,
    ReadOnly,
    TextSetting,
)


def build_registry() -> Mapping[str, ParameterHandler]:
    """Return the read-only mapping of every protocol key to its handler."""
    handlers: dict[str, ParameterHandler] = {
        "av_control_mode": ReadOnly(lambda state: state.hardware_status),
        # Registered whatever the probe found: resume must re-push registers.
        "rpt_power": PowerSetting(),
        # inputs
        "av_channel_enter": ChannelEnter(),
        "av_channel_exit": ChannelExit(),
        "av_channel": ReadOnly(lambda state: state.input),
        "av_phone": BoolSetting("phone"),
        # globals
        "av_mute": BoolSetting("mute"),
        "av_volume": IntSetting("volume", VOLUME_MIN, VOLUME_MAX),
        "av_phone_volume": IntSetting("phone_volume", VOLUME_MIN, VOLUME_MAX),
        "av_balance": IntSetting("balance", -BALANCE_LIMIT, BALANCE_LIMIT),
        # active input profile
        "av_gain": IntSetting("profile.gain", 0, INPUT_GAIN_MAX),
        "av_eq_on": BoolSetting("profile.eq_on"),
        "av_eq_bass": IntSetting("profile.bass", -EQ_LIMIT, EQ_LIMIT),
        "av_eq_middle": IntSetting("profile.middle", -EQ_LIMIT, EQ_LIMIT),
        "av_eq_treble": IntSetting("profile.treble", -EQ_LIMIT, EQ_LIMIT),
        # av_lud is the name MTCManager sends for the LOUD button
        "av_lud": BoolSetting("profile.loudness_on"),
        "av_loudness": IntSetting("profile.loudness", 0, LOUDNESS_MAX),
        # configuration
        "cfg_maxvolume": ReadOnly(lambda state: str(VOLUME_MAX)),
        "cfg_volumerange": IntSetting("volume_range", VOLUME_RANGE_MIN, VOLUME_RANGE_MAX),
        "cfg_subwoofer": BoolSetting("subwoofer"),
        "cfg_gps_altmix": BoolSetting("gps_alt_mix"),
        "cfg_gps_ontop": BoolSetting("gps_ontop_enabled"),
        # navigation mix
        "av_gps_package": TextSetting("gps.package"),
        "av_gps_monitor": BoolSetting("gps.monitor"),
        "av_gps_switch": BoolSetting("gps.is_aloud"),
        "av_gps_gain": IntSetting("gps.gain", 0, GPS_GAIN_MAX),
        "av_gps_ontop": BoolSetting("gps.ontop"),
        # reject
        "av_eq": NullHandler(),
    }
    return MappingProxyType(handlers)
