"""Unit tests for numeric helpers."""

import math

import pytest

from huepicker.utils import clamp01, clamp_byte, round_half_up, wrap_degrees


class TestRoundHalfUp:
    """Test round_half_up."""

    @pytest.mark.unit
    def test_ties_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    @pytest.mark.unit
    def test_negative_ties_round_toward_positive_infinity(self):
        assert round_half_up(-0.5) == 0
        assert round_half_up(-1.5) == -1

    @pytest.mark.unit
    def test_non_ties(self):
        assert round_half_up(1.49) == 1
        assert round_half_up(1.51) == 2


class TestClamping:
    """Test clamp01 and clamp_byte."""

    @pytest.mark.unit
    def test_clamp01(self):
        assert clamp01(-0.1) == 0.0
        assert clamp01(0.3) == 0.3
        assert clamp01(1.7) == 1.0
        assert clamp01(math.nan) == 0.0

    @pytest.mark.unit
    def test_clamp_byte(self):
        assert clamp_byte(-3) == 0
        assert clamp_byte(127.5) == 128
        assert clamp_byte(300) == 255
        assert clamp_byte(math.nan) == 0


class TestWrapDegrees:
    """Test wrap_degrees."""

    @pytest.mark.unit
    def test_wraps_into_range(self):
        assert wrap_degrees(360) == 0
        assert wrap_degrees(370) == 10
        assert wrap_degrees(-90) == 270
        assert wrap_degrees(-1e-20) == 0.0

    @pytest.mark.unit
    def test_non_finite(self):
        assert wrap_degrees(math.inf) == 0.0
        assert wrap_degrees(math.nan) == 0.0
