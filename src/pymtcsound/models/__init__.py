"""Typed models for pymtcsound."""

from pymtcsound.models._base import SoundBaseModel
from pymtcsound.models.state import DeviceState, GpsState, SoundProfile

__all__ = [
    "DeviceState",
    "GpsState",
    "SoundBaseModel",
    "SoundProfile",
]
