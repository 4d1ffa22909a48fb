"""Device state snapshot.

One :class:`DeviceState` instance is owned by the dispatch engine and
shared by reference with handlers, the hardware link and the persister
while the engine lock is held.
"""

from __future__ import annotations

from pydantic import Field

from pymtcsound._constants import SYSTEM_INPUT
from pymtcsound.models._base import SoundBaseModel

__all__ = [
    "DeviceState",
    "GpsState",
    "SoundProfile",
]


class SoundProfile(SoundBaseModel):
    """Per-input tone settings."""

    gain: int = 0
    eq_on: bool = True
    bass: int = 0
    middle: int = 0
    treble: int = 0
    loudness_on: bool = False
    loudness: int = 8


class GpsState(SoundBaseModel):
    """Navigation-prompt mixing (ducking) state."""

    monitor: bool = False
    """Whether playback of :attr:`package` drives :attr:`is_aloud`."""

    package: str = ""
    """Package whose playback triggers ducking."""

    is_aloud: bool = False
    """Current ducking decision."""

    gain: int = 0
    ontop: bool = False


class DeviceState(SoundBaseModel):
    """Snapshot of all audio settings.

    ``hardware_status`` and ``power`` describe the running head unit
    rather than user settings and are excluded from persistence.
    """

    hardware_status: str = Field(default="", exclude=True)
    power: bool = Field(default=True, exclude=True)

    input: str = SYSTEM_INPUT
    phone: bool = False
    mute: bool = False
    volume: int = 12
    phone_volume: int = 12
    balance: int = 0
    volume_range: int = 50

    subwoofer: bool = False
    gps_alt_mix: bool = False
    gps_ontop_enabled: bool = False

    profiles: dict[str, SoundProfile] = Field(default_factory=dict)
    gps: GpsState = Field(default_factory=GpsState)

    @property
    def profile(self) -> SoundProfile:
        """Profile of the active input.

        An input without a stored profile reads as defaults; nothing is
        added to :attr:`profiles`.
        """
        profile = self.profiles.get(self.input)
        if profile is None:
            return SoundProfile()
        return profile

    def ensure_profile(self) -> SoundProfile:
        """Profile of the active input, stored with defaults if missing."""
        profile = self.profiles.get(self.input)
        if profile is None:
            profile = SoundProfile()
            self.profiles[self.input] = profile
        return profile

    def restore(self, stored: DeviceState) -> None:
        """Copy persisted settings from *stored* into this instance.

        Runtime fields (excluded from persistence) keep their current
        values so the probe result survives the lazy load.
        """
        for name, field in type(self).model_fields.items():
            if field.exclude:
                continue
            setattr(self, name, getattr(stored, name))
