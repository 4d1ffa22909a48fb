"""Wire-format helpers for the ``key=value`` parameter protocol."""

from __future__ import annotations

from pymtcsound._constants import FALSE_TOKENS, TRUE_TOKENS, WIRE_FALSE, WIRE_TRUE


def split_key_value(key_value: str | None) -> tuple[str, str | None] | None:
    """Split a protocol string into ``(key, value)``.

    The value is ``None`` when the string carries no ``=``.  Returns
    ``None`` when no key can be parsed at all.  Only the first ``=``
    separates; the remainder belongs to the value.
    """
    if not key_value:
        return None
    key, sep, value = key_value.partition("=")
    if not key.strip():
        return None
    if not sep:
        return key, None
    return key, value


def parse_bool(raw: str) -> bool:
    """Parse a protocol boolean.

    Raises :class:`ValueError` for anything outside the accepted tokens.
    """
    normalized = raw.strip().lower()
    if normalized in TRUE_TOKENS:
        return True
    if normalized in FALSE_TOKENS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def format_bool(value: bool) -> str:
    return WIRE_TRUE if value else WIRE_FALSE


def parse_clamped_int(raw: str, minimum: int, maximum: int) -> int:
    """Parse a decimal integer and clamp it into ``[minimum, maximum]``.

    Raises :class:`ValueError` when *raw* is not an integer.
    """
    value = int(raw.strip())
    return max(minimum, min(maximum, value))
