"""Domain events for observer pattern.

Picker events are published after a transition has fully completed, one
per field of the picker triple that actually changed.
"""

from enum import Enum


class PickerEvent(Enum):
    """Events from the picker state machine."""

    HSV_CHANGED = "hsv_changed"          # Live HSV reference changed
    COLOR_CHANGED = "color_changed"      # Displayed color changed
    PREVIEW_CHANGED = "preview_changed"  # Hue preview color changed
