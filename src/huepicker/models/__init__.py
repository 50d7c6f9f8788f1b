"""Data models for the color picker."""

from .color import ColorValue, HsvColor, OklchColor, RgbColor
from .config import PickerConfig
from .enums import ColorFormat
from .state import PickerState

__all__ = [
    # Enums
    "ColorFormat",
    # Models
    "ColorValue",
    "HsvColor",
    "OklchColor",
    "PickerConfig",
    "PickerState",
    "RgbColor",
]
