# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (hex ↔ RGB ↔ HSL, sRGB → linear)."""

import numpy as np
import pytest

from contrastkit.color.colorspace import (
    SRGB_THRESHOLD,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
    srgb_to_linear,
    srgb_uint8_to_linear,
)


# Primaries, grays and mid tones that survive the integer round trip exactly
HSL_GRID = [
    (0, 100, 50),
    (60, 100, 50),
    (120, 100, 50),
    (180, 100, 50),
    (240, 100, 50),
    (300, 100, 50),
    (0, 0, 0),
    (0, 0, 20),
    (0, 0, 100),
    (30, 50, 25),
    (210, 50, 40),
]


class TestRounding:

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_halves_round_away_from_zero_when_negative(self):
        assert round_half_up(-2.5) == -3

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2


class TestHexRGB:

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3941C8") == (57, 65, 200)

    def test_hex_to_rgb_without_hash_and_lower_case(self):
        assert hex_to_rgb("3941c8") == (57, 65, 200)

    def test_shorthand_rejected(self):
        assert hex_to_rgb("#fff") is None

    def test_non_hex_rejected(self):
        assert hex_to_rgb("#GGGGGG") is None
        assert hex_to_rgb("#12345") is None
        assert hex_to_rgb("#1234567") is None

    def test_rgb_to_hex_zero_pads(self):
        assert rgb_to_hex(0, 5, 10) == "#00050a"

    def test_rgb_to_hex_leaves_case_to_caller(self):
        assert rgb_to_hex(255, 0, 170) == "#ff00aa"


class TestRGBToHSL:

    @pytest.mark.parametrize("rgb, hsl", [
        ((255, 0, 0), (0, 100, 50)),
        ((0, 255, 0), (120, 100, 50)),
        ((0, 0, 255), (240, 100, 50)),
        ((51, 102, 153), (210, 50, 40)),
    ])
    def test_known_values(self, rgb, hsl):
        assert rgb_to_hsl(*rgb) == hsl

    def test_achromatic_has_zero_hue_and_saturation(self):
        assert rgb_to_hsl(51, 51, 51) == (0, 0, 20)
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)

    def test_hue_just_below_360_wraps_to_zero(self):
        """359.76 degrees rounds to 360, which is hue 0."""
        h, s, l = rgb_to_hsl(255, 0, 1)
        assert h == 0
        assert 0 <= h < 360


class TestHSLToRGB:

    @pytest.mark.parametrize("hsl, rgb", [
        ((0, 100, 50), (255, 0, 0)),
        ((120, 100, 50), (0, 255, 0)),
        ((240, 100, 50), (0, 0, 255)),
        ((210, 50, 40), (51, 102, 153)),
        ((30, 50, 25), (96, 64, 32)),
    ])
    def test_known_values(self, hsl, rgb):
        assert hsl_to_rgb(*hsl) == rgb

    def test_achromatic(self):
        assert hsl_to_rgb(0, 0, 20) == (51, 51, 51)

    def test_half_channel_rounds_up(self):
        """hsl(120, 100%, 25%) has a green channel of exactly 127.5."""
        assert hsl_to_rgb(120, 100, 25) == (0, 128, 0)


class TestRoundtrip:
    """
    RGB ↔ HSL through whole-number HSL.

    Rounding HSL to integers loses information, so RGB → HSL → RGB is exact
    only for some colors. Elsewhere a channel drifts by a few units.
    """

    @pytest.mark.parametrize("hsl", HSL_GRID)
    def test_rgb_hsl_rgb(self, hsl):
        rgb = hsl_to_rgb(*hsl)
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb

    @pytest.mark.parametrize("hsl", HSL_GRID)
    def test_hsl_rgb_hsl(self, hsl):
        assert rgb_to_hsl(*hsl_to_rgb(*hsl)) == hsl

    def test_integer_hsl_is_lossy(self):
        rgb = hsl_to_rgb(0, 11, 13)
        assert rgb == (37, 30, 30)
        assert rgb_to_hsl(*rgb) == (0, 10, 13)
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == (36, 30, 30)

    def test_drift_is_bounded(self):
        rng = np.random.RandomState(7)
        points = zip(
            rng.randint(0, 360, size=2000),
            rng.randint(0, 101, size=2000),
            rng.randint(0, 101, size=2000),
        )
        for h, s, l in points:
            rgb = hsl_to_rgb(int(h), int(s), int(l))
            back = hsl_to_rgb(*rgb_to_hsl(*rgb))
            assert max(abs(a - b) for a, b in zip(rgb, back)) <= 6, (h, s, l)

    def test_lightness_survives(self):
        rng = np.random.RandomState(11)
        for r, g, b in rng.randint(0, 256, size=(2000, 3)):
            rgb = (int(r), int(g), int(b))
            _, _, l = rgb_to_hsl(*rgb)
            assert rgb_to_hsl(*hsl_to_rgb(*rgb_to_hsl(*rgb)))[2] == l


class TestSRGBLinear:

    def test_black_and_white(self):
        np.testing.assert_allclose(srgb_to_linear([0.0, 1.0]), [0.0, 1.0], atol=1e-12)

    def test_linear_segment_below_threshold(self):
        val = 0.03
        assert float(srgb_to_linear(val)) == pytest.approx(val / 12.92, abs=1e-12)

    def test_threshold_is_wcag_value(self):
        assert SRGB_THRESHOLD == 0.03928

    def test_uint8_wrapper_matches_float(self):
        pixels = np.array([[10, 128, 255]])
        np.testing.assert_allclose(
            srgb_uint8_to_linear(pixels),
            srgb_to_linear(pixels / 255.0),
        )

    def test_monotonic(self):
        linear = srgb_uint8_to_linear(np.arange(256))
        assert np.all(np.diff(linear) > 0)
