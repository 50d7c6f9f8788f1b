"""Numeric helpers shared by the codec and the picker state machine.

All helpers are total: NaN collapses to the lower bound instead of
propagating.
"""

import math


def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]."""
    if value != value:
        return 0.0
    return max(0.0, min(1.0, value))


def clamp_byte(value: float) -> int:
    """Round half up and clamp into the 8-bit channel range [0, 255]."""
    if value != value:
        return 0
    return max(0, min(255, round_half_up(value)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    channel encoding and hue snapping want ``2.5 -> 3``.
    """
    return int(math.floor(value + 0.5))


def wrap_degrees(value: float) -> float:
    """Wrap an angle into [0, 360), mapping non-finite input to 0."""
    if not math.isfinite(value):
        return 0.0
    wrapped = value % 360.0
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped
