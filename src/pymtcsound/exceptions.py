"""Custom exception hierarchy for pymtcsound."""

from __future__ import annotations


class MtcSoundError(Exception):
    """Base exception for all pymtcsound errors."""


class MtcSoundConfigError(MtcSoundError):
    """Invalid or missing configuration."""


class HardwareLinkError(MtcSoundError):
    """Audio codec bus failure (probe or register push)."""

    def __init__(self, message: str, *, status: str = "") -> None:
        self.status = status
        super().__init__(message)


class PersistenceError(MtcSoundError):
    """Stored device state could not be read or written.

    Raised by :class:`~pymtcsound.persistence.StatePersister`
    implementations.  The dispatch engine treats persistence as
    best-effort: it logs this error and keeps serving from the
    in-memory snapshot.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
