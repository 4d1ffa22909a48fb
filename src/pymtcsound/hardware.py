"""Audio codec link interface.

Concrete bus drivers live with the host platform.  The engine only
needs :class:`HardwareLink`; having a protocol here makes it easy to
pass test doubles while keeping drivers out of this package.
"""

from __future__ import annotations

from typing import Protocol

from pymtcsound._constants import NO_HARDWARE_STATUS
from pymtcsound.models.state import DeviceState


class HardwareLink(Protocol):
    """Structural interface for the codec bus."""

    def probe(self) -> str:
        """Detect the codec and return a status string.

        A status starting with the configured bus prefix (``"i2c"`` by
        default) marks the bus as present.
        """
        ...

    def apply(self, state: DeviceState, forced: bool) -> None:
        """Push *state* to the codec.

        With ``forced`` every register is rewritten; otherwise the link
        may write only what changed since its last push.  May raise
        :class:`~pymtcsound.exceptions.HardwareLinkError` or ``OSError``.
        """
        ...


class NullHardwareLink:
    """Link used when the host has no managed codec."""

    def probe(self) -> str:
        return NO_HARDWARE_STATUS

    def apply(self, state: DeviceState, forced: bool) -> None:
        return None
