"""Color parsing exceptions.

The codec's public parsers report failure as ``None``; these exceptions
are raised by the strict entry point (``require_rgb``) for callers that
need to tell the two failure kinds apart:

- InvalidColorError: the input looks like a known format but is malformed
- UnresolvableColorError: no known format and no named color matches
"""

from .base import HuePickerError

SUPPORTED_FORMATS_HINT = (
    "Supported formats:\n"
    "  - Hex: #rgb, #rgba, #rrggbb, #rrggbbaa\n"
    "  - rgb(51, 102, 153) / rgba(51, 102, 153, 0.5)\n"
    "  - hsv(210, 67%, 60%) / hsva(210, 67%, 60%, 0.5)\n"
    "  - oklch(0.48 0.09 251) / oklch(0.48 0.09 251 / 0.5)\n"
    "  - CSS color names such as 'rebeccapurple'"
)


class ColorParseError(HuePickerError):
    """A color input could not be turned into a color."""

    def __init__(self, value: object, user_message: str, technical_message: str):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=True,
            recovery_hint=SUPPORTED_FORMATS_HINT,
        )
        self.value = value


class InvalidColorError(ColorParseError):
    """Input matches a recognized color format but is malformed."""

    def __init__(self, value: object, reason: str):
        """
        Initialize invalid color error.

        Args:
            value: The rejected input
            reason: Why the input is malformed
        """
        super().__init__(
            value,
            user_message=f"Invalid color {value!r}: {reason}",
            technical_message=f"Malformed color input {value!r} ({type(value).__name__}): {reason}",
        )
        self.reason = reason


class UnresolvableColorError(ColorParseError):
    """Input is in no known format and the name resolver has no entry for it."""

    def __init__(self, value: str):
        """
        Initialize unresolvable color error.

        Args:
            value: The string nobody could resolve
        """
        super().__init__(
            value,
            user_message=f"Unknown color {value!r}",
            technical_message=f"Color {value!r} is not hex, not functional notation and not a known name",
        )
