"""Core picker logic: the state machine and the input surface adapters."""

from .state_machine import PickerStateMachine
from .surfaces import AlphaStrip, HueStrip, SaturationValueSurface, TextEntry

__all__ = [
    "AlphaStrip",
    "HueStrip",
    "PickerStateMachine",
    "SaturationValueSurface",
    "TextEntry",
]
