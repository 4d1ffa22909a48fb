"""Durable storage for the device state snapshot."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from pymtcsound.exceptions import PersistenceError
from pymtcsound.models.state import DeviceState

_logger = logging.getLogger(__name__)


class StatePersister(Protocol):
    """Structural interface for state storage."""

    def load(self) -> DeviceState | None:
        """Return the stored snapshot, or ``None`` when nothing is stored."""
        ...

    def save(self, state: DeviceState) -> None:
        ...


class JsonFilePersister:
    """Stores the snapshot as a JSON document.

    Writes go to a temporary sibling file which then replaces the
    target, so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DeviceState | None:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            _logger.debug("No stored state at %s", self._path)
            return None
        except OSError as exc:
            raise PersistenceError(f"Cannot read state: {exc}", path=str(self._path)) from exc

        try:
            return DeviceState.model_validate_json(text)
        except ValidationError as exc:
            raise PersistenceError(f"Stored state is invalid: {exc}", path=str(self._path)) from exc

    def save(self, state: DeviceState) -> None:
        payload = state.model_dump_json(indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write state: {exc}", path=str(self._path)) from exc
