"""Parameter dispatch engine for the head-unit sound module."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Callable, Mapping

from pymtcsound._constants import DEFAULT_BUS_PREFIX, NO_HARDWARE_STATUS
from pymtcsound._wire import split_key_value
from pymtcsound.config import SoundConfig
from pymtcsound.exceptions import HardwareLinkError, PersistenceError
from pymtcsound.handlers import ParameterHandler
from pymtcsound.hardware import HardwareLink, NullHardwareLink
from pymtcsound.media import DECODER_RULES, STREAM_RULES, desired_aloud, is_monitored
from pymtcsound.models.state import DeviceState
from pymtcsound.persistence import JsonFilePersister, StatePersister
from pymtcsound.registry import build_registry

_logger = logging.getLogger(__name__)


class LoadState(enum.Enum):
    """Lazy-load gate; only ever moves forward."""

    NOT_LOADED = "not_loaded"
    LOADED = "loaded"


class SoundDevice:
    """Serialises get/set traffic against one :class:`DeviceState`.

    Usage::

        device = SoundDevice(persister=JsonFilePersister(path), hardware=link)
        device.set_parameters("av_volume=15")   # -> "av_volume=15"
        device.get_parameters("av_volume", "")  # -> "15"

    The hardware link is probed once, here.  Stored state is read on the
    first get/set call, not before.  Every call, including the media
    event hooks, runs under a single lock, so at most one state
    mutation, hardware push and save is in flight at any time.
    """

    def __init__(
        self,
        *,
        persister: StatePersister,
        hardware: HardwareLink | None = None,
        bus_prefix: str = DEFAULT_BUS_PREFIX,
        on_input_change: Callable[[], None] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._persister = persister
        self._hardware: HardwareLink = hardware if hardware is not None else NullHardwareLink()
        self._on_input_change = on_input_change
        self._load_state = LoadState.NOT_LOADED
        self._handlers: Mapping[str, ParameterHandler] = build_registry()

        self.state = DeviceState()
        self.state.hardware_status = self._probe()
        self._bus_present = self.state.hardware_status.startswith(bus_prefix)
        _logger.info(
            "Sound device ready hardware_status=%s bus_present=%s",
            self.state.hardware_status,
            self._bus_present,
        )

    @classmethod
    def from_config(
        cls,
        config: SoundConfig,
        *,
        hardware: HardwareLink | None = None,
        on_input_change: Callable[[], None] | None = None,
    ) -> SoundDevice:
        """Build a device persisting to ``config.state_path``."""
        return cls(
            persister=JsonFilePersister(config.state_path),
            hardware=hardware,
            bus_prefix=config.bus_prefix,
            on_input_change=on_input_change,
        )

    @property
    def bus_present(self) -> bool:
        """Whether the probe found a managed codec bus."""
        return self._bus_present

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._load_state is LoadState.LOADED

    # ------------------------------------------------------------------
    # Protocol entry points
    # ------------------------------------------------------------------

    def get_parameters(self, key_value: str, default: str | None = None) -> str | None:
        """Return the wire value for *key_value*, or *default*.

        *default* comes back for malformed input, unknown keys and keys
        with nothing to report.
        """
        parts = split_key_value(key_value)
        if parts is None:
            return default
        key = parts[0]

        handler = self._handlers.get(key)
        if handler is None:
            return default

        with self._lock:
            self._ensure_loaded()
            value = handler.get(self.state)

        _logger.debug("get %s -> %s", key, value)
        if value is None:
            return default
        return value

    def set_parameters(self, key_value: str) -> str | None:
        """Apply ``key=value`` and return ``key=canonical``.

        Input without ``=`` and keys this module does not own are passed
        through unchanged.  ``None`` means a known handler rejected the
        value.
        """
        parts = split_key_value(key_value)
        if parts is None or parts[1] is None:
            return key_value
        key, value = parts[0], parts[1]

        handler = self._handlers.get(key)
        if handler is None:
            return f"{key}={value}"

        with self._lock:
            self._ensure_loaded()
            result = handler.set(self.state, value)
            if result.changed:
                self._apply_locked(result.forced)

        _logger.debug("set %s=%s -> %s changed=%s", key, value, result.value, result.changed)
        if result.input_changed:
            self.notify_input_change()
        if result.value is None:
            return None
        return f"{key}={result.value}"

    # ------------------------------------------------------------------
    # Media event hooks
    # ------------------------------------------------------------------

    def on_media_player_event(self, caller_package: str, event: int) -> None:
        """Decoder lifecycle event (see :class:`~pymtcsound.media.DecoderEvent`)."""
        self._on_media_event(DECODER_RULES, caller_package, event)

    def on_audio_track_event(self, caller_package: str, event: int) -> None:
        """Output stream play-state event (see :class:`~pymtcsound.media.StreamEvent`)."""
        self._on_media_event(STREAM_RULES, caller_package, event)

    def _on_media_event(self, rules: Mapping[int, bool], caller_package: str, event: int) -> None:
        with self._lock:
            gps = self.state.gps
            if not is_monitored(gps, caller_package):
                return
            aloud = desired_aloud(rules, event, gps.is_aloud)
            # Only a decision equal to the current value is applied.
            if aloud != gps.is_aloud:
                _logger.debug("Ignoring aloud=%s from %s event=%s", aloud, caller_package, event)
                return
            gps.is_aloud = aloud
            self._apply_locked(False)

    # ------------------------------------------------------------------
    # State fan-out
    # ------------------------------------------------------------------

    def apply_state(self, forced: bool = False) -> None:
        """Push the snapshot to the codec (if present) and persist it."""
        with self._lock:
            self._apply_locked(forced)

    def notify_input_change(self) -> None:
        """Tell the platform the active audio input changed."""
        if self._on_input_change is None:
            return
        try:
            self._on_input_change()
        except Exception:
            _logger.warning("Input change callback failed", exc_info=True)

    def _apply_locked(self, forced: bool) -> None:
        if self._bus_present:
            self._push_hardware(forced)
        try:
            self._persister.save(self.state)
        except (PersistenceError, OSError) as exc:
            _logger.warning("Saving sound state failed: %s", exc)

    def _push_hardware(self, forced: bool) -> None:
        try:
            self._hardware.apply(self.state, forced)
        except (HardwareLinkError, OSError) as exc:
            _logger.warning("Hardware apply failed forced=%s: %s", forced, exc)

    def _ensure_loaded(self) -> None:
        if self._load_state is LoadState.LOADED:
            return
        try:
            stored = self._persister.load()
        except (PersistenceError, OSError) as exc:
            _logger.warning("Loading sound state failed, using defaults: %s", exc)
            stored = None
        if stored is not None:
            self.state.restore(stored)
        _logger.info("Sound state loaded stored=%s", stored is not None)
        try:
            if self._bus_present:
                self._push_hardware(True)
        finally:
            self._load_state = LoadState.LOADED

    def _probe(self) -> str:
        try:
            return self._hardware.probe()
        except (HardwareLinkError, OSError) as exc:
            _logger.warning("Hardware probe failed: %s", exc)
            return NO_HARDWARE_STATUS
