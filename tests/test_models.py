"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from huepicker.models import (
    ColorFormat,
    HsvColor,
    OklchColor,
    PickerConfig,
    RgbColor,
)


class TestRgbColor:
    """Test RgbColor model."""

    @pytest.mark.unit
    def test_create_valid(self):
        color = RgbColor(r=255, g=128, b=0)
        assert color.to_rgb_tuple() == (255, 128, 0)
        assert color.a == 1.0

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["r", "g", "b"])
    def test_channel_out_of_range(self, field):
        values = {"r": 0, "g": 0, "b": 0, field: 256}
        with pytest.raises(ValidationError):
            RgbColor(**values)
        values[field] = -1
        with pytest.raises(ValidationError):
            RgbColor(**values)

    @pytest.mark.unit
    def test_black(self):
        assert RgbColor.black() == RgbColor(r=0, g=0, b=0, a=1.0)

    @pytest.mark.unit
    def test_frozen(self):
        color = RgbColor(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 4

    @pytest.mark.unit
    def test_hashable(self):
        assert len({RgbColor(r=1, g=2, b=3), RgbColor(r=1, g=2, b=3)}) == 1


class TestHsvColor:
    """Test HsvColor model."""

    @pytest.mark.unit
    def test_is_degenerate(self):
        assert HsvColor(h=10, s=0, v=1).is_degenerate
        assert HsvColor(h=10, s=1, v=0).is_degenerate
        assert not HsvColor(h=10, s=0.1, v=0.1).is_degenerate

    @pytest.mark.unit
    def test_distinct_from_oklch_with_same_numbers(self):
        assert HsvColor(h=1, s=0.5, v=0.5) != OklchColor(l=1, c=0.5, h=0.5)


class TestPickerConfig:
    """Test PickerConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = PickerConfig()
        assert config.display_format is ColorFormat.HEX
        assert config.cache_size == 256
        assert config.initial_color == "#ff0000"

    @pytest.mark.unit
    def test_display_format_from_string(self):
        assert PickerConfig(display_format="oklch").display_format is ColorFormat.OKLCH

    @pytest.mark.unit
    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            PickerConfig(cache_size=0)
        with pytest.raises(ValidationError):
            PickerConfig(display_format="cmyk")

    @pytest.mark.unit
    def test_color_format_is_a_string(self):
        assert ColorFormat.RGB == "rgb"
        assert ColorFormat("hsv") is ColorFormat.HSV
