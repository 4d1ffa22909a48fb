"""Media lifecycle events and the navigation-ducking decision rule."""

from __future__ import annotations

import enum
from collections.abc import Mapping

from pymtcsound.models.state import GpsState

__all__ = [
    "DECODER_RULES",
    "STREAM_RULES",
    "DecoderEvent",
    "StreamEvent",
    "desired_aloud",
    "is_monitored",
]


class DecoderEvent(enum.IntEnum):
    """Media player (decoder) lifecycle codes."""

    PLAYBACK_COMPLETE = 2
    STARTED = 6
    PAUSED = 7
    STOPPED = 8
    ERROR = 100


class StreamEvent(enum.IntEnum):
    """Audio track (output stream) play states."""

    STOPPED = 1
    PAUSED = 2
    PLAYING = 3


DECODER_RULES: Mapping[int, bool] = {
    DecoderEvent.STARTED: True,
    DecoderEvent.PAUSED: False,
    DecoderEvent.STOPPED: False,
    DecoderEvent.PLAYBACK_COMPLETE: False,
    DecoderEvent.ERROR: False,
}

STREAM_RULES: Mapping[int, bool] = {
    StreamEvent.PLAYING: True,
    StreamEvent.PAUSED: False,
    StreamEvent.STOPPED: False,
}


def is_monitored(gps: GpsState, package: str) -> bool:
    """Whether events from *package* drive the ducking decision."""
    return gps.monitor and gps.package == package


def desired_aloud(rules: Mapping[int, bool], event: int, current: bool) -> bool:
    """Map *event* to an aloud value; unknown codes keep *current*."""
    return rules.get(event, current)
