"""Generic utility modules for huepicker.

This package contains helpers that are not specific to any color space:
- clamping: range clamping, rounding and angle wrapping
"""

from .clamping import clamp01, clamp_byte, round_half_up, wrap_degrees

__all__ = ["clamp01", "clamp_byte", "round_half_up", "wrap_degrees"]
