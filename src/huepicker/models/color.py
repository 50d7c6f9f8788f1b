"""Color value models.

Every representation is a frozen Pydantic model so values are hashable
(they double as cache keys) and can never be partially updated.
"""

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """8-bit sRGB color with a floating alpha channel.

    RGB is the pivot representation: every conversion between two other
    spaces goes through it. Alpha is deliberately unbounded here; it is only
    clamped when encoded for display.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: float = Field(default=1.0, description="Alpha (0-1)")

    @classmethod
    def black(cls) -> "RgbColor":
        """Create opaque black."""
        return cls(r=0, g=0, b=0, a=1.0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple (alpha dropped)."""
        return (self.r, self.g, self.b)


class HsvColor(BaseModel):
    """Hue/saturation/value color.

    ``h`` is in degrees, ``s`` and ``v`` in [0, 1]. The hue carries no
    information when ``s == 0`` or ``v == 0``.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(description="Hue in degrees [0, 360)")
    s: float = Field(description="Saturation (0-1)")
    v: float = Field(description="Value / brightness (0-1)")
    a: float = Field(default=1.0, description="Alpha (0-1)")

    @property
    def is_degenerate(self) -> bool:
        """True when the hue is mathematically undefined (gray or black)."""
        return self.s <= 0 or self.v <= 0


class OklchColor(BaseModel):
    """Perceptually uniform lightness/chroma/hue color."""

    model_config = ConfigDict(frozen=True)

    l: float = Field(description="Lightness, roughly 0-1")  # noqa: E741
    c: float = Field(description="Chroma, >= 0 (below ~0.4 inside sRGB)")
    h: float = Field(description="Hue in degrees [0, 360)")
    a: float = Field(default=1.0, description="Alpha (0-1)")


class ColorValue(BaseModel):
    """Canonical aggregate holding all four representations of one color.

    Only the codec builds these (see ``huepicker.codec.parse_color``). ``hex``
    is always derived from ``rgb``; ``hsv`` and ``oklch`` are either derived
    from it too or are the representation the color was parsed from.
    """

    model_config = ConfigDict(frozen=True)

    hex: str = Field(description="Hex string, '#rrggbb' or '#rrggbbaa'")
    rgb: RgbColor
    hsv: HsvColor
    oklch: OklchColor
