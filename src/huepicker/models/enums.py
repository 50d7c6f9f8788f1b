"""Enumerations for the color picker."""

from enum import Enum


class ColorFormat(str, Enum):
    """Textual formats a color can be rendered in."""

    HEX = "hex"  # '#336699' or '#33669980'
    RGB = "rgb"  # 'rgb(51, 102, 153)' / 'rgba(51, 102, 153, 0.5)'
    HSV = "hsv"  # 'hsv(210, 67%, 60%)' / 'hsva(210, 67%, 60%, 0.5)'
    OKLCH = "oklch"  # 'oklch(0.483 0.091 251)' / 'oklch(0.483 0.091 251 / 0.5)'
