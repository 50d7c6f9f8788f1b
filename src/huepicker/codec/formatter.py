"""Render a ColorValue as text.

Every string produced here is accepted back by ``parse_to_rgb``.
"""

from huepicker.models import ColorFormat, ColorValue
from huepicker.utils import round_half_up


def _alpha_text(a: float) -> str:
    return f"{round(a, 3):g}"


def format_color(color: ColorValue, fmt: ColorFormat | str) -> str:
    """
    Render a color in one of the supported text formats.

    Args:
        color: Color to render
        fmt: ``hex``, ``rgb``, ``hsv`` or ``oklch``

    Returns:
        The color text; alpha is only included when below 1

    Raises:
        ValueError: If ``fmt`` is not a known format

    Example:
        >>> format_color(parse_color("#336699"), "hsv")
        'hsv(210, 67%, 60%)'
    """
    fmt = ColorFormat(fmt)
    alpha = color.rgb.a
    translucent = alpha < 1

    if fmt is ColorFormat.HEX:
        return color.hex

    if fmt is ColorFormat.RGB:
        rgb = color.rgb
        if translucent:
            return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {_alpha_text(alpha)})"
        return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"

    if fmt is ColorFormat.HSV:
        hsv = color.hsv
        body = f"{round_half_up(hsv.h)}, {round_half_up(hsv.s * 100)}%, {round_half_up(hsv.v * 100)}%"
        if translucent:
            return f"hsva({body}, {_alpha_text(alpha)})"
        return f"hsv({body})"

    oklch = color.oklch
    body = f"{oklch.l:.3f} {oklch.c:.3f} {round_half_up(oklch.h)}"
    if translucent:
        return f"oklch({body} / {_alpha_text(alpha)})"
    return f"oklch({body})"
