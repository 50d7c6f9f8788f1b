"""Hexadecimal color strings.

Hex is the storage format CSS and most APIs understand. Accepted input
forms are ``#rgb``, ``#rgba``, ``#rrggbb`` and ``#rrggbbaa``; output is
always lowercase ``#rrggbb`` or, for translucent colors, ``#rrggbbaa``.
"""

import logging
import re

from huepicker.models import HsvColor, RgbColor
from huepicker.protocols import ColorNameResolver
from huepicker.utils import clamp_byte

from .hsv import hsv_to_rgb
from .names import DEFAULT_RESOLVER, TRANSPARENT_HEX

logger = logging.getLogger(__name__)

HEX_COLOR_RE = re.compile(
    r"#(?:[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{4}|[0-9a-fA-F]{3})"
)


def is_hex_color_valid(value: object) -> bool:
    """
    Check whether a value is a CSS hexadecimal color.

    Args:
        value: Candidate string (e.g., "#FFF", "#ffffff80")

    Returns:
        True only for '#' followed by exactly 3, 4, 6 or 8 hex digits
    """
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def hex_to_rgb(value: str, resolver: ColorNameResolver | None = None) -> RgbColor | None:
    """
    Convert a hex color string into an RgbColor.

    Short forms double each nibble (``#f80`` -> ``#ff8800``). A trailing
    alpha byte becomes ``byte / 255``; without one alpha is 1.0.

    Strings that are not valid hex are handed to the named-color resolver
    (``red``, ``dodgerblue`` ...).

    Args:
        value: Hex string or color name
        resolver: Named-color resolver (defaults to the CSS keyword table)

    Returns:
        The decoded color, or None if the input is neither valid hex nor a
        resolvable name
    """
    if is_hex_color_valid(value):
        return _decode(value)

    if resolver is None:
        resolver = DEFAULT_RESOLVER
    resolved = resolver.resolve(value) if isinstance(value, str) else None
    if resolved is not None and is_hex_color_valid(resolved):
        return _decode(resolved)

    if resolved is not None:
        logger.warning(f"Resolver returned non-hex value {resolved!r} for {value!r}")
    return None


def rgb_to_hex(rgb: RgbColor) -> str:
    """
    Convert an RgbColor into a lowercase hex string.

    Alpha policy:
        - ``a == 0``: always ``#00000000``; a fully transparent color has
          no meaningful RGB payload
        - ``0 < a < 1``: ``#rrggbbaa`` with ``aa = round(a * 255)``
        - ``a >= 1``: ``#rrggbb``

    Example:
        >>> rgb_to_hex(RgbColor(r=0, g=255, b=0))
        '#00ff00'
    """
    if rgb.a == 0:
        return TRANSPARENT_HEX

    hex_value = f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"
    if rgb.a < 1:
        hex_value += f"{clamp_byte(rgb.a * 255):02x}"
    return hex_value


def hsv_to_hex(hsv: HsvColor) -> str:
    """Convert an HsvColor straight to hex (via RGB)."""
    return rgb_to_hex(hsv_to_rgb(hsv))


def _decode(value: str) -> RgbColor:
    digits = value[1:]
    if len(digits) in (3, 4):
        digits = "".join(nibble * 2 for nibble in digits)

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return RgbColor(r=r, g=g, b=b, a=a)
