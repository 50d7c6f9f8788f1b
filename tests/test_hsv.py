"""Tests for RGB <-> HSV conversion."""

import pytest

from huepicker.codec import hsv_to_rgb, rgb_to_hsv
from huepicker.models import HsvColor, RgbColor


class TestRgbToHsv:
    """Test RGB to HSV conversion."""

    @pytest.mark.unit
    def test_primaries(self):
        assert rgb_to_hsv(RgbColor(r=255, g=0, b=0)) == HsvColor(h=0, s=1, v=1, a=1)
        assert rgb_to_hsv(RgbColor(r=0, g=255, b=0)) == HsvColor(h=120, s=1, v=1, a=1)
        assert rgb_to_hsv(RgbColor(r=0, g=0, b=255)) == HsvColor(h=240, s=1, v=1, a=1)

    @pytest.mark.unit
    def test_magenta_wraps_below_360(self):
        assert rgb_to_hsv(RgbColor(r=255, g=0, b=255)).h == pytest.approx(300)

    @pytest.mark.unit
    def test_gray_has_zero_hue_and_saturation(self):
        hsv = rgb_to_hsv(RgbColor(r=128, g=128, b=128))
        assert hsv.h == 0
        assert hsv.s == 0
        assert hsv.v == pytest.approx(128 / 255)

    @pytest.mark.unit
    def test_black(self):
        assert rgb_to_hsv(RgbColor.black()) == HsvColor(h=0, s=0, v=0, a=1)

    @pytest.mark.unit
    def test_alpha_passes_through(self):
        assert rgb_to_hsv(RgbColor(r=10, g=20, b=30, a=0.25)).a == 0.25


class TestHsvToRgb:
    """Test HSV to RGB conversion."""

    @pytest.mark.unit
    def test_sectors(self):
        assert hsv_to_rgb(HsvColor(h=60, s=1, v=1)).to_rgb_tuple() == (255, 255, 0)
        assert hsv_to_rgb(HsvColor(h=180, s=1, v=1)).to_rgb_tuple() == (0, 255, 255)
        assert hsv_to_rgb(HsvColor(h=300, s=1, v=1)).to_rgb_tuple() == (255, 0, 255)

    @pytest.mark.unit
    def test_hue_wraps(self):
        assert hsv_to_rgb(HsvColor(h=360, s=1, v=1)).to_rgb_tuple() == (255, 0, 0)
        assert hsv_to_rgb(HsvColor(h=-60, s=1, v=1)).to_rgb_tuple() == (255, 0, 255)
        assert hsv_to_rgb(HsvColor(h=720 + 120, s=1, v=1)).to_rgb_tuple() == (0, 255, 0)

    @pytest.mark.unit
    def test_half_channel_rounds_up(self):
        # h=90: red channel is exactly 127.5
        assert hsv_to_rgb(HsvColor(h=90, s=1, v=1)).to_rgb_tuple() == (128, 255, 0)

    @pytest.mark.unit
    def test_out_of_range_components_are_clamped(self):
        rgb = hsv_to_rgb(HsvColor(h=10, s=2, v=1.5))
        assert all(0 <= channel <= 255 for channel in rgb.to_rgb_tuple())

    @pytest.mark.unit
    def test_alpha_passes_through(self):
        assert hsv_to_rgb(HsvColor(h=0, s=1, v=1, a=0.4)).a == 0.4

    @pytest.mark.unit
    def test_round_trip_is_exact(self):
        for r in range(0, 256, 51):
            for g in range(0, 256, 17):
                for b in (0, 100, 200, 255):
                    rgb = RgbColor(r=r, g=g, b=b)
                    assert hsv_to_rgb(rgb_to_hsv(rgb)) == rgb
