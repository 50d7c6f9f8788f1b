"""Tests for rendering colors as text."""

import pytest

from huepicker.codec import format_color, parse_color, parse_to_rgb
from huepicker.models import ColorFormat


@pytest.fixture
def steel(cache):
    return parse_color("#336699", cache=cache)


@pytest.fixture
def steel_translucent(cache):
    return parse_color("#33669980", cache=cache)


class TestFormatColor:
    """Test format_color output."""

    @pytest.mark.unit
    def test_hex(self, steel):
        assert format_color(steel, "hex") == "#336699"

    @pytest.mark.unit
    def test_rgb(self, steel):
        assert format_color(steel, "rgb") == "rgb(51, 102, 153)"

    @pytest.mark.unit
    def test_hsv(self, steel):
        assert format_color(steel, "hsv") == "hsv(210, 67%, 60%)"

    @pytest.mark.unit
    def test_oklch_red(self, cache):
        assert format_color(parse_color("red", cache=cache), "oklch") == "oklch(0.628 0.258 29)"

    @pytest.mark.unit
    def test_accepts_enum(self, steel):
        assert format_color(steel, ColorFormat.RGB) == format_color(steel, "rgb")

    @pytest.mark.unit
    def test_translucent(self, steel_translucent):
        assert format_color(steel_translucent, "hex") == "#33669980"
        assert format_color(steel_translucent, "rgb") == "rgba(51, 102, 153, 0.502)"
        assert format_color(steel_translucent, "hsv") == "hsva(210, 67%, 60%, 0.502)"
        assert format_color(steel_translucent, "oklch").endswith(" / 0.502)")

    @pytest.mark.unit
    def test_unknown_format(self, steel):
        with pytest.raises(ValueError):
            format_color(steel, "cmyk")

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ColorFormat))
    def test_every_format_parses_back(self, steel, steel_translucent, fmt):
        for color in (steel, steel_translucent):
            rgb = parse_to_rgb(format_color(color, fmt))
            assert rgb is not None
            assert all(abs(a - b) <= 2 for a, b in zip(rgb.to_rgb_tuple(), color.rgb.to_rgb_tuple()))
