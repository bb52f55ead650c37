"""
Unit tests for color space conversions.

Covers RGB -> HSL rounding, hue wrap-around and hex formatting/parsing.
"""

import re

import pytest

from chromascope.services.colors.color_space import (
    rgb_to_hsl, rgb_to_hex, hex_to_rgb, round_half_up
)

HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")


class TestRoundHalfUp:
    """Half-up rounding helper"""

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(12.5) == 13

    def test_non_halves(self):
        assert round_half_up(12.49) == 12
        assert round_half_up(12.51) == 13
        assert round_half_up(0.0) == 0


class TestRgbToHsl:
    """Test RGB to HSL conversion"""

    def test_primary_colors(self):
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)

    def test_secondary_colors(self):
        assert rgb_to_hsl(255, 255, 0) == (60, 100, 50)
        assert rgb_to_hsl(0, 255, 255) == (180, 100, 50)
        assert rgb_to_hsl(255, 0, 255) == (300, 100, 50)

    def test_achromatic_colors(self):
        """Grays have zero hue and saturation"""
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)

    def test_dark_and_light_saturation_branches(self):
        # l <= 0.5 uses d / (max + min)
        assert rgb_to_hsl(128, 0, 0) == (0, 100, 25)
        # l > 0.5 uses d / (2 - max - min)
        assert rgb_to_hsl(255, 128, 128) == (0, 100, 75)

    def test_hue_near_wrap_stays_below_360(self):
        """Hues that round up to 360 wrap back to 0"""
        assert rgb_to_hsl(255, 0, 2)[0] == 0
        assert rgb_to_hsl(255, 0, 4)[0] == 359

    def test_red_wins_max_ties(self):
        """Red is checked first when red and green share the maximum"""
        assert rgb_to_hsl(255, 255, 0)[0] == 60
        assert rgb_to_hsl(200, 200, 100)[0] == 60

    @pytest.mark.parametrize("rgb", [
        (0, 0, 0), (20, 40, 60), (255, 255, 255), (240, 100, 20), (60, 255, 140)
    ])
    def test_ranges(self, rgb):
        h, s, l = rgb_to_hsl(*rgb)
        assert 0 <= h < 360
        assert 0 <= s <= 100
        assert 0 <= l <= 100


class TestRgbToHex:
    """Test RGB to hex conversion utility"""

    def test_basic_colors(self):
        assert rgb_to_hex(255, 0, 0) == "#FF0000"
        assert rgb_to_hex(0, 255, 0) == "#00FF00"
        assert rgb_to_hex(0, 0, 255) == "#0000FF"
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(255, 255, 255) == "#FFFFFF"

    def test_zero_padding_and_case(self):
        assert rgb_to_hex(1, 2, 3) == "#010203"
        assert rgb_to_hex(171, 205, 239) == "#ABCDEF"
        assert HEX_PATTERN.match(rgb_to_hex(10, 160, 240))


class TestHexToRgb:
    """Test hex parsing"""

    def test_with_and_without_prefix(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_roundtrip_with_rgb_to_hex(self):
        for rgb in [(0, 0, 0), (20, 40, 60), (255, 255, 255), (171, 205, 239)]:
            assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    @pytest.mark.parametrize("bad", ["#FFF", "#GGGGGG", "", "#1234567"])
    def test_invalid_hex(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)
