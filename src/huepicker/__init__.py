"""Huepicker: color model conversions and an interactive picker state machine."""

__version__ = "0.1.0"

from .codec import format_color, parse_color, parse_to_rgb
from .core import PickerStateMachine
from .models import ColorFormat, ColorValue, HsvColor, OklchColor, RgbColor

__all__ = [
    "ColorFormat",
    "ColorValue",
    "HsvColor",
    "OklchColor",
    "PickerStateMachine",
    "RgbColor",
    "format_color",
    "parse_color",
    "parse_to_rgb",
]
