"""Parameter handler kinds.

A handler is a typed lens over one or more :class:`DeviceState` fields.
It converts between wire strings and state values and reports, through
:class:`SetResult`, which side effects the engine must run.  Handlers
keep no mutable state of their own; the engine passes the shared
snapshot into every call while holding its lock.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from pymtcsound._constants import SYSTEM_INPUT
from pymtcsound._wire import format_bool, parse_bool, parse_clamped_int
from pymtcsound.models.state import DeviceState

__all__ = [
    "REJECTED",
    "BoolSetting",
    "ChannelEnter",
    "ChannelExit",
    "IntSetting",
    "NullHandler",
    "ParameterHandler",
    "PowerSetting",
    "ReadOnly",
    "SetResult",
    "TextSetting",
]


@dataclass(frozen=True, slots=True)
class SetResult:
    """Outcome of :meth:`ParameterHandler.set`.

    ``value`` is the canonical echo, or ``None`` when the input was
    rejected.  ``changed`` asks the engine to apply the state before
    returning; ``forced`` makes that a full register rewrite.
    ``input_changed`` asks for the platform input-change notification.
    """

    value: str | None
    changed: bool = False
    forced: bool = False
    input_changed: bool = False


REJECTED = SetResult(None)


class ParameterHandler(Protocol):
    """Capability implemented by every registered parameter."""

    def get(self, state: DeviceState) -> str | None:
        ...

    def set(self, state: DeviceState, raw: str) -> SetResult:
        ...


def _owner(state: DeviceState, path: str, *, for_write: bool = False) -> tuple[Any, str]:
    """Resolve a dotted *path* to ``(object, attribute)``.

    ``profile.*`` paths target the active input's profile, which is only
    stored in ``state.profiles`` when resolved *for_write*.
    """
    *parents, name = path.split(".")
    target: Any = state
    for parent in parents:
        if for_write and parent == "profile":
            target = state.ensure_profile()
        else:
            target = getattr(target, parent)
    return target, name


def _read(state: DeviceState, path: str) -> Any:
    owner, name = _owner(state, path)
    return getattr(owner, name)


def _write(state: DeviceState, path: str, value: Any, echo: str) -> SetResult:
    if _read(state, path) == value:
        return SetResult(echo)
    owner, name = _owner(state, path, for_write=True)
    setattr(owner, name, value)
    return SetResult(echo, changed=True)


@dataclass(frozen=True, slots=True)
class IntSetting:
    """Integer field clamped to ``[minimum, maximum]``."""

    path: str
    minimum: int
    maximum: int

    def get(self, state: DeviceState) -> str | None:
        return str(_read(state, self.path))

    def set(self, state: DeviceState, raw: str) -> SetResult:
        try:
            value = parse_clamped_int(raw, self.minimum, self.maximum)
        except ValueError:
            return REJECTED
        return _write(state, self.path, value, str(value))


@dataclass(frozen=True, slots=True)
class BoolSetting:
    path: str

    def get(self, state: DeviceState) -> str | None:
        return format_bool(_read(state, self.path))

    def set(self, state: DeviceState, raw: str) -> SetResult:
        try:
            value = parse_bool(raw)
        except ValueError:
            return REJECTED
        return _write(state, self.path, value, format_bool(value))


@dataclass(frozen=True, slots=True)
class TextSetting:
    """Free-form string field; surrounding whitespace is dropped."""

    path: str

    def get(self, state: DeviceState) -> str | None:
        return str(_read(state, self.path))

    def set(self, state: DeviceState, raw: str) -> SetResult:
        value = raw.strip()
        return _write(state, self.path, value, value)


@dataclass(frozen=True, slots=True)
class ReadOnly:
    """Reports a derived value; every set is rejected."""

    reader: Callable[[DeviceState], str]

    def get(self, state: DeviceState) -> str | None:
        return self.reader(state)

    def set(self, state: DeviceState, raw: str) -> SetResult:
        return REJECTED


@dataclass(frozen=True, slots=True)
class PowerSetting:
    """Host power report.

    A power-on report requests a forced re-apply: some codec revisions
    lose their registers across suspend/resume.
    """

    def get(self, state: DeviceState) -> str | None:
        return format_bool(state.power)

    def set(self, state: DeviceState, raw: str) -> SetResult:
        try:
            value = parse_bool(raw)
        except ValueError:
            return REJECTED
        state.power = value
        return SetResult(format_bool(value), changed=value, forced=value)


@dataclass(frozen=True, slots=True)
class ChannelEnter:
    """A source takes over the audio path."""

    def get(self, state: DeviceState) -> str | None:
        return state.input

    def set(self, state: DeviceState, raw: str) -> SetResult:
        channel = raw.strip()
        if not channel:
            return REJECTED
        changed = state.input != channel
        if changed:
            state.input = channel
        return SetResult(channel, changed=changed, input_changed=changed)


@dataclass(frozen=True, slots=True)
class ChannelExit:
    """A source releases the audio path.

    Only the active source can release it; the path then falls back to
    the system input.
    """

    def get(self, state: DeviceState) -> str | None:
        return None

    def set(self, state: DeviceState, raw: str) -> SetResult:
        channel = raw.strip()
        if not channel:
            return REJECTED
        changed = channel == state.input and channel != SYSTEM_INPUT
        if changed:
            state.input = SYSTEM_INPUT
        return SetResult(channel, changed=changed, input_changed=changed)


@dataclass(frozen=True, slots=True)
class NullHandler:
    """Swallows commands the codec does not support."""

    def get(self, state: DeviceState) -> str | None:
        return None

    def set(self, state: DeviceState, raw: str) -> SetResult:
        return REJECTED
