"""Color codec: conversions between hex, RGB, HSV and OKLCH.

All functions here are pure and stateless apart from the parse cache.

- hex: hex string validation and encoding
- hsv: RGB <-> HSV
- oklch: RGB <-> OKLCH
- parser: unified parsing of any color input into a ColorValue
- formatter: ColorValue -> text
- cache: bounded LRU cache used by the parser
- names: CSS named colors
"""

from .cache import DEFAULT_CACHE_SIZE, ColorCache
from .formatter import format_color
from .hex import hex_to_rgb, hsv_to_hex, is_hex_color_valid, rgb_to_hex
from .hsv import hsv_to_rgb, rgb_to_hsv
from .names import CSS_COLOR_NAMES, DEFAULT_RESOLVER, TRANSPARENT_HEX, CssColorNames
from .oklch import oklch_to_rgb, rgb_to_oklch
from .parser import (
    ColorInput,
    build_color_value,
    coerce_color_input,
    parse_color,
    parse_to_rgb,
    require_rgb,
)

__all__ = [
    # Hex
    "hex_to_rgb",
    "hsv_to_hex",
    "is_hex_color_valid",
    "rgb_to_hex",
    # HSV / OKLCH
    "hsv_to_rgb",
    "oklch_to_rgb",
    "rgb_to_hsv",
    "rgb_to_oklch",
    # Parsing / formatting
    "ColorInput",
    "build_color_value",
    "coerce_color_input",
    "format_color",
    "parse_color",
    "parse_to_rgb",
    "require_rgb",
    # Cache
    "DEFAULT_CACHE_SIZE",
    "ColorCache",
    # Names
    "CSS_COLOR_NAMES",
    "DEFAULT_RESOLVER",
    "TRANSPARENT_HEX",
    "CssColorNames",
]
