"""Unified color parsing.

Every color that enters the picker goes through this module, whatever
its shape:

- Hex strings (``#f80``, ``#ff8800cc``)
- CSS functional strings: ``rgb()``/``rgba()``, ``hsv()``/``hsva()``,
  ``oklch()``
- Named colors, via a ColorNameResolver
- The color models themselves (RgbColor, HsvColor, OklchColor, ColorValue)
- Plain mappings such as ``{"r": 255, "g": 0, "b": 0}``

Raw input is first coerced into one of the model types (the "tagged
variant"); everything after that boundary dispatches on the model type.
"""

import logging
import re
from collections.abc import Mapping
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from huepicker.exceptions import ColorParseError, InvalidColorError, UnresolvableColorError
from huepicker.models import ColorValue, HsvColor, OklchColor, RgbColor
from huepicker.protocols import ColorNameResolver
from huepicker.utils import clamp01, clamp_byte, wrap_degrees

from .cache import ColorCache
from .hex import hex_to_rgb, is_hex_color_valid, rgb_to_hex
from .hsv import hsv_to_rgb, rgb_to_hsv
from .names import DEFAULT_RESOLVER
from .oklch import oklch_to_rgb, rgb_to_oklch

logger = logging.getLogger(__name__)

ColorInput = RgbColor | HsvColor | OklchColor | ColorValue | str

# Chroma of 100% in oklch() notation
OKLCH_CHROMA_REFERENCE = 0.4

_NUM = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:e[+-]?\d+)?"
_SEP = r"(?:\s*,\s*|\s+)"
_ALPHA = rf"(?:\s*[,/]\s*({_NUM}%?))?"

RGB_RE = re.compile(
    rf"rgba?\(\s*({_NUM}%?){_SEP}({_NUM}%?){_SEP}({_NUM}%?){_ALPHA}\s*\)",
    re.IGNORECASE,
)
HSV_RE = re.compile(
    rf"hsva?\(\s*({_NUM})(?:deg)?{_SEP}({_NUM}%?){_SEP}({_NUM}%?){_ALPHA}\s*\)",
    re.IGNORECASE,
)
OKLCH_RE = re.compile(
    rf"oklch\(\s*({_NUM}%?){_SEP}({_NUM}%?){_SEP}({_NUM})(?:deg)?{_ALPHA}\s*\)",
    re.IGNORECASE,
)
FUNCTION_PREFIX_RE = re.compile(r"(rgba?|hsva?|oklch)\s*\(", re.IGNORECASE)

_SHARED_CACHE = ColorCache()


def _percent_or_number(token: str, scale: float) -> float:
    """'50%' -> 0.5 * scale, '128' -> 128.0."""
    if token.endswith("%"):
        return float(token[:-1]) / 100 * scale
    return float(token)


def _unit_interval(token: str) -> float:
    """Saturation/value token: percent, fraction, or a bare 0-100 number."""
    if token.endswith("%"):
        return clamp01(float(token[:-1]) / 100)
    value = float(token)
    return clamp01(value / 100 if value > 1 else value)


def _alpha(token: Optional[str]) -> float:
    if token is None:
        return 1.0
    return clamp01(_percent_or_number(token, 1.0))


def _rgb_from_match(match: re.Match) -> RgbColor:
    r, g, b = (clamp_byte(_percent_or_number(match.group(i), 255)) for i in (1, 2, 3))
    return RgbColor(r=r, g=g, b=b, a=_alpha(match.group(4)))


def _hsv_from_match(match: re.Match) -> RgbColor:
    hsv = HsvColor(
        h=float(match.group(1)),
        s=_unit_interval(match.group(2)),
        v=_unit_interval(match.group(3)),
        a=_alpha(match.group(4)),
    )
    return hsv_to_rgb(hsv)


def _oklch_from_match(match: re.Match) -> RgbColor:
    oklch = OklchColor(
        l=clamp01(_percent_or_number(match.group(1), 1.0)),
        c=max(0.0, _percent_or_number(match.group(2), OKLCH_CHROMA_REFERENCE)),
        h=float(match.group(3)),
        a=_alpha(match.group(4)),
    )
    return oklch_to_rgb(oklch)


_FUNCTIONAL: tuple[tuple[re.Pattern, Callable[[re.Match], RgbColor]], ...] = (
    (RGB_RE, _rgb_from_match),
    (HSV_RE, _hsv_from_match),
    (OKLCH_RE, _oklch_from_match),
)


def coerce_color_input(value: object) -> ColorInput:
    """
    Turn raw input into one of the supported color variants.

    Mappings are discriminated by their keys, first match wins:
    ``{hex, rgb, hsv, oklch}`` -> ColorValue, ``{rgb}`` -> its nested RGB,
    ``{r, g, b}`` -> RgbColor, ``{h, s, v}`` -> HsvColor,
    ``{l, c, h}`` -> OklchColor. Extra keys are ignored.

    Raises:
        InvalidColorError: Unsupported type, unknown key set, or
            component values of the wrong type or range
    """
    if isinstance(value, (RgbColor, HsvColor, OklchColor, ColorValue, str)):
        return value

    if not isinstance(value, Mapping):
        raise InvalidColorError(value, f"unsupported input type {type(value).__name__}")

    keys = set(value)
    try:
        if {"hex", "rgb", "hsv", "oklch"} <= keys:
            return ColorValue.model_validate(dict(value))
        if "rgb" in keys:
            nested = value["rgb"]
            if isinstance(nested, RgbColor):
                return nested
            if not isinstance(nested, Mapping):
                raise InvalidColorError(value, "'rgb' must hold an r/g/b mapping")
            return RgbColor.model_validate(dict(nested))
        if {"r", "g", "b"} <= keys:
            return RgbColor.model_validate(dict(value))
        if {"h", "s", "v"} <= keys:
            return HsvColor.model_validate(dict(value))
        if {"l", "c", "h"} <= keys:
            return OklchColor.model_validate(dict(value))
    except ValidationError as e:
        raise InvalidColorError(value, f"{e.error_count()} invalid component(s)") from e

    raise InvalidColorError(value, "mapping has none of the keys r/g/b, h/s/v, l/c/h or rgb")


def require_rgb(value: object, resolver: Optional[ColorNameResolver] = None) -> RgbColor:
    """
    Parse any supported color input into RGB, raising on failure.

    Args:
        value: Color input (see module docstring)
        resolver: Named-color resolver for strings that are not hex or
            functional notation

    Raises:
        InvalidColorError: Input looks like a known format but is malformed
        UnresolvableColorError: String in no known format and not a known name
    """
    variant = coerce_color_input(value)

    if isinstance(variant, RgbColor):
        return variant
    if isinstance(variant, HsvColor):
        return hsv_to_rgb(variant)
    if isinstance(variant, OklchColor):
        return oklch_to_rgb(variant)
    if isinstance(variant, ColorValue):
        return variant.rgb
    return _text_to_rgb(variant, resolver)


def _text_to_rgb(raw: str, resolver: Optional[ColorNameResolver]) -> RgbColor:
    text = raw.strip()

    if is_hex_color_valid(text):
        return hex_to_rgb(text)
    if text.startswith("#"):
        raise InvalidColorError(raw, "hex colors need 3, 4, 6 or 8 hex digits")

    for pattern, convert in _FUNCTIONAL:
        match = pattern.fullmatch(text)
        if match:
            return convert(match)

    function = FUNCTION_PREFIX_RE.match(text)
    if function:
        raise InvalidColorError(raw, f"malformed {function.group(1).lower()}() notation")

    rgb = hex_to_rgb(text, resolver) if text else None
    if rgb is None:
        raise UnresolvableColorError(raw)
    return rgb


def parse_to_rgb(value: object, resolver: Optional[ColorNameResolver] = None) -> Optional[RgbColor]:
    """
    Parse any supported color input into RGB.

    Returns:
        The RGB pivot, or None when the input is not a color
    """
    try:
        return require_rgb(value, resolver)
    except ColorParseError as e:
        logger.debug(e.technical_message)
        return None


def build_color_value(
    rgb: RgbColor,
    hsv: Optional[HsvColor] = None,
    oklch: Optional[OklchColor] = None,
) -> ColorValue:
    """
    Assemble a ColorValue around an RGB pivot.

    ``hsv`` and ``oklch`` are kept verbatim when given (the source
    representation of the color); missing ones are derived from ``rgb``.
    """
    return ColorValue(
        hex=rgb_to_hex(rgb),
        rgb=rgb,
        hsv=hsv if hsv is not None else rgb_to_hsv(rgb),
        oklch=oklch if oklch is not None else rgb_to_oklch(rgb),
    )


M = TypeVar("M", HsvColor, OklchColor)


def _normalize_hue(variant: M) -> M:
    """Wrap a hue outside [0, 360] into [0, 360); 360 itself is kept."""
    if 0 <= variant.h <= 360:
        return variant
    return variant.model_copy(update={"h": wrap_degrees(variant.h)})


def _cache_key(variant: ColorInput):
    if isinstance(variant, str):
        return ("text", variant.strip().lower())
    # Frozen models hash by type and field values
    return variant


def _uses_custom_names(variant: ColorInput, resolver: Optional[ColorNameResolver]) -> bool:
    return isinstance(variant, str) and resolver is not None and resolver is not DEFAULT_RESOLVER


def parse_color(
    value: object,
    cache: Optional[ColorCache] = None,
    resolver: Optional[ColorNameResolver] = None,
) -> ColorValue:
    """
    Parse any supported color input into a canonical ColorValue.

    Never raises: input that is not a color yields opaque black. Results are
    memoized in ``cache``. When it is omitted a module-wide bounded cache is
    used, except for text parsed with a non-default resolver, which is not
    memoized. An HsvColor or OklchColor input is kept in the result (hue
    wrapped into [0, 360] when outside it) so that a picked hue survives
    even where RGB cannot represent it.

    Args:
        value: Color input (see module docstring)
        cache: Cache to memoize results in; pair one cache with one resolver
        resolver: Named-color resolver

    Returns:
        The canonical ColorValue

    Example:
        >>> parse_color("#ff0000").hsv
        HsvColor(h=0.0, s=1.0, v=1.0, a=1.0)
    """
    if isinstance(value, ColorValue):
        return value

    try:
        variant = coerce_color_input(value)
    except ColorParseError as e:
        logger.debug(f"Falling back to black: {e.technical_message}")
        return build_color_value(RgbColor.black())

    if isinstance(variant, ColorValue):
        return variant

    if isinstance(variant, (HsvColor, OklchColor)):
        variant = _normalize_hue(variant)

    if cache is None and not _uses_custom_names(variant, resolver):
        cache = _SHARED_CACHE

    key = _cache_key(variant)
    cached = cache.get(key) if cache is not None else None
    if cached is not None:
        return cached

    if isinstance(variant, HsvColor):
        color = build_color_value(hsv_to_rgb(variant), hsv=variant)
    elif isinstance(variant, OklchColor):
        color = build_color_value(oklch_to_rgb(variant), oklch=variant)
    else:
        rgb = parse_to_rgb(variant, resolver)
        if rgb is None:
            logger.debug(f"Falling back to black for {value!r}")
            return build_color_value(RgbColor.black())
        color = build_color_value(rgb)

    if cache is not None:
        cache.put(key, color)
    return color
