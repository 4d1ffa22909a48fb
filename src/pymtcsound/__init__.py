"""pymtcsound - parameter dispatch and state sync for MTC head-unit audio."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymtcsound")
except PackageNotFoundError:
    __version__ = "0+local"
from pymtcsound.config import SoundConfig
from pymtcsound.device import LoadState, SoundDevice
from pymtcsound.exceptions import (
    HardwareLinkError,
    MtcSoundConfigError,
    MtcSoundError,
    PersistenceError,
)
from pymtcsound.handlers import ParameterHandler, SetResult
from pymtcsound.hardware import HardwareLink, NullHardwareLink
from pymtcsound.media import DecoderEvent, StreamEvent
from pymtcsound.models import DeviceState, GpsState, SoundProfile
from pymtcsound.persistence import JsonFilePersister, StatePersister
from pymtcsound.registry import build_registry

__all__ = [
    "__version__",
    "DecoderEvent",
    "DeviceState",
    "GpsState",
    "HardwareLink",
    "HardwareLinkError",
    "JsonFilePersister",
    "LoadState",
    "MtcSoundConfigError",
    "MtcSoundError",
    "NullHardwareLink",
    "ParameterHandler",
    "PersistenceError",
    "SetResult",
    "SoundConfig",
    "SoundDevice",
    "SoundProfile",
    "StatePersister",
    "StreamEvent",
    "build_registry",
]
