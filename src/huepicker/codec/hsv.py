"""RGB <-> HSV conversion.

HSV drives the picker's surfaces: hue on the strip, saturation and value
on the 2D surface. These functions are pure; preserving the hue of gray
colors is the state machine's job, not theirs.
"""

from huepicker.models import HsvColor, RgbColor
from huepicker.utils import clamp_byte, wrap_degrees


def rgb_to_hsv(rgb: RgbColor) -> HsvColor:
    """
    Convert RGB to HSV with the max/min/delta sector algorithm.

    Returns:
        HsvColor with ``h`` in [0, 360) (0 for grays), ``s`` and ``v`` in
        [0, 1]; alpha passes through unchanged
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    h = 0.0
    if delta != 0:
        if high == r:
            h = ((g - b) / delta) % 6
        elif high == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h = wrap_degrees(h * 60)

    s = 0.0 if high == 0 else delta / high

    return HsvColor(h=h, s=s, v=high, a=rgb.a)


def hsv_to_rgb(hsv: HsvColor) -> RgbColor:
    """
    Convert HSV to RGB with the chroma/sector algorithm.

    The hue is wrapped into [0, 360) first, so 360 and -60 are valid
    inputs. Channels are rounded and clamped to [0, 255], which keeps
    out-of-range saturation or value from producing invalid colors.
    """
    h = wrap_degrees(hsv.h)

    c = hsv.v * hsv.s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = hsv.v - c

    sector = int(h // 60)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RgbColor(
        r=clamp_byte((r + m) * 255),
        g=clamp_byte((g + m) * 255),
        b=clamp_byte((b + m) * 255),
        a=hsv.a,
    )
