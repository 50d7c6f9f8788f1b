"""RGB <-> OKLCH conversion.

OKLCH is the polar form of OKLab, a perceptually uniform space.

Conversion path::

    sRGB -> linear sRGB -> LMS -> cube root -> OKLab -> (L, C, H)

The matrix constants are the published OKLab ones, unrounded.
"""

import math

from huepicker.models import OklchColor, RgbColor
from huepicker.utils import clamp_byte

# Linear sRGB -> LMS
M1 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS (cube root) -> OKLab
M2 = (
    (0.2104542553, 0.7936177850, -0.0040720401),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> LMS (cube root)
M2_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> linear sRGB
M1_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)


def _apply(matrix, vector):
    x, y, z = vector
    return tuple(row[0] * x + row[1] * y + row[2] * z for row in matrix)


def srgb_to_linear(channel: int) -> float:
    """Gamma-decode an 8-bit sRGB channel to linear light (0..1)."""
    v = channel / 255
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> int:
    """Gamma-encode linear light to an 8-bit channel, rounded and clamped."""
    if value <= 0.0031308:
        encoded = 12.92 * value
    else:
        encoded = 1.055 * value ** (1 / 2.4) - 0.055
    return clamp_byte(encoded * 255)


def rgb_to_oklch(rgb: RgbColor) -> OklchColor:
    """
    Convert RGB to OKLCH.

    Example:
        >>> oklch = rgb_to_oklch(RgbColor(r=255, g=0, b=0))
        >>> round(oklch.l, 3), round(oklch.c, 3), round(oklch.h, 1)
        (0.628, 0.258, 29.2)
    """
    linear = (srgb_to_linear(rgb.r), srgb_to_linear(rgb.g), srgb_to_linear(rgb.b))
    lms = tuple(math.cbrt(v) for v in _apply(M1, linear))
    lightness, a, b = _apply(M2, lms)

    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360

    return OklchColor(l=lightness, c=chroma, h=hue, a=rgb.a)


def oklch_to_rgb(oklch: OklchColor) -> RgbColor:
    """
    Convert OKLCH to RGB.

    Colors outside the sRGB gamut are clamped per channel, not mapped
    back into gamut.
    """
    hue = math.radians(oklch.h)
    lab = (oklch.l, math.cos(hue) * oklch.c, math.sin(hue) * oklch.c)

    lms = tuple(v * v * v for v in _apply(M2_INV, lab))
    r, g, b = _apply(M1_INV, lms)

    return RgbColor(r=linear_to_srgb(r), g=linear_to_srgb(g), b=linear_to_srgb(b), a=oklch.a)
