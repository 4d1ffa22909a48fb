"""Engine configuration for pymtcsound."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pymtcsound._constants import DEFAULT_BUS_PREFIX, DEFAULT_STATE_FILENAME
from pymtcsound.exceptions import MtcSoundConfigError


def _default_state_path() -> Path:
    return Path.home() / ".local" / "share" / "mtcsound" / DEFAULT_STATE_FILENAME


@dataclasses.dataclass(frozen=True)
class SoundConfig:
    """Engine configuration.

    Parameters
    ----------
    state_path : Path
        JSON file holding the persisted device state.
    bus_prefix : str
        Hardware probe status prefix that marks a managed codec bus.
        Any other probe status keeps the hardware pathway out of
        ``apply_state`` for the lifetime of the engine.
    """

    state_path: Path = dataclasses.field(default_factory=_default_state_path)
    bus_prefix: str = DEFAULT_BUS_PREFIX

    def __post_init__(self) -> None:
        if not self.bus_prefix:
            raise MtcSoundConfigError("bus_prefix must be non-empty")
        if not isinstance(self.state_path, Path):
            object.__setattr__(self, "state_path", Path(self.state_path))

    @classmethod
    def from_env(cls, **overrides: Any) -> SoundConfig:
        """Create configuration from environment variables.

        Reads ``MTCSOUND_STATE_PATH`` and ``MTCSOUND_BUS_PREFIX``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "MTCSOUND_STATE_PATH": "state_path",
            "MTCSOUND_BUS_PREFIX": "bus_prefix",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
