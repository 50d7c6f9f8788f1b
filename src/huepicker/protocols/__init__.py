"""Protocol definitions for huepicker's observer and resolver seams."""

from .events import PickerEvent
from .observers import ColorNameResolver, PickerObserver

__all__ = [
    # Events
    "PickerEvent",
    # Protocols
    "ColorNameResolver",
    "PickerObserver",
]
