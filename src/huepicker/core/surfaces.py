"""Input surface adapters.

Rendering and pointer capture live outside this package. Whatever does
them hands these adapters normalized positions (0-1, origin top-left) or
raw text, and reads indicator positions back as percentages.
"""

import logging

from huepicker.codec import build_color_value, format_color, require_rgb
from huepicker.exceptions import handle_errors
from huepicker.models import ColorFormat
from huepicker.utils import clamp01

from .state_machine import PickerStateMachine

logger = logging.getLogger(__name__)


class SaturationValueSurface:
    """2D surface: saturation grows to the right, value grows upward."""

    def __init__(self, machine: PickerStateMachine):
        self.machine = machine

    def move(self, x: float, y: float) -> None:
        """Apply a pointer position (x, y in [0, 1], y down)."""
        x = clamp01(x)
        y = clamp01(y)
        self.machine.set_hsv(s=x, v=1 - y)

    def indicator(self) -> tuple[float, float]:
        """Indicator position as (left %, top %)."""
        hsv = self.machine.hsv
        return hsv.s * 100, (1 - hsv.v) * 100


class HueStrip:
    """Horizontal hue strip spanning 0-360 degrees."""

    def __init__(self, machine: PickerStateMachine):
        self.machine = machine

    def move(self, x: float) -> None:
        self.machine.set_hsv(h=clamp01(x) * 360)

    def indicator(self) -> float:
        """Indicator position as left %."""
        return self.machine.hsv.h / 360 * 100


class AlphaStrip:
    """Horizontal opacity strip from transparent (left) to opaque (right)."""

    def __init__(self, machine: PickerStateMachine):
        self.machine = machine

    def move(self, x: float) -> None:
        self.machine.set_hsv(a=clamp01(x))

    def indicator(self) -> float:
        return self.machine.hsv.a * 100


class TextEntry:
    """
    Text field showing the current color in one format.

    Submitted text goes through the external path (``set_color``) so the
    hue survives when the user types a gray.
    """

    def __init__(self, machine: PickerStateMachine, display_format: ColorFormat | str = ColorFormat.HEX):
        self.machine = machine
        self.display_format = ColorFormat(display_format)

    @property
    def text(self) -> str:
        """Current color rendered in the display format."""
        return format_color(self.machine.color, self.display_format)

    @handle_errors(
        operation_name="apply typed color",
        fallback_value=False,
        re_raise=False,
        log_level=logging.WARNING,
    )
    def submit(self, raw: str) -> bool:
        """
        Apply typed text.

        Args:
            raw: Text as typed

        Returns:
            False if the text is not a color, True otherwise. Text that
            renders the same as the current color is accepted without
            touching the picker.
        """
        color = build_color_value(require_rgb(raw, self.machine.resolver))
        if format_color(color, self.display_format) == self.text:
            logger.debug(f"Color text {raw!r} matches current color, ignoring")
            return True

        self.machine.set_color(color)
        return True
