"""Internal constants shared across the library."""

from __future__ import annotations

#: Probe status prefix that marks a managed codec bus.
DEFAULT_BUS_PREFIX = "i2c"

#: Probe status reported when no bus could be detected.
NO_HARDWARE_STATUS = "none"

#: Input selected when no other source holds the audio path.
SYSTEM_INPUT = "sys"

DEFAULT_STATE_FILENAME = "mtcsound_state.json"

# ------------------------------------------------------------------
# Legal ranges (inclusive) for integer parameters
# ------------------------------------------------------------------

VOLUME_MIN = 0
VOLUME_MAX = 30
BALANCE_LIMIT = 14
VOLUME_RANGE_MIN = 20
VOLUME_RANGE_MAX = 79
INPUT_GAIN_MAX = 15
EQ_LIMIT = 7
LOUDNESS_MAX = 15
GPS_GAIN_MAX = 15

# ------------------------------------------------------------------
# Wire encodings
# ------------------------------------------------------------------

WIRE_TRUE = "true"
WIRE_FALSE = "false"
TRUE_TOKENS: frozenset[str] = frozenset({"1", "true", "yes", "y", "on"})
FALSE_TOKENS: frozenset[str] = frozenset({"0", "false", "no", "n", "off"})
