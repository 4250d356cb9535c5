# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for the per-syntax format parsers."""

import pytest

from contrastkit.color.parsers import (
    parse_hex,
    parse_hsl,
    parse_hsla,
    parse_oklch,
    parse_rgb,
    parse_rgba,
)


class TestParseHex:

    def test_six_digits(self):
        assert parse_hex("#ffffff") == (255, 255, 255)

    def test_hash_optional(self):
        assert parse_hex("336699") == (51, 102, 153)

    def test_shorthand_is_no_match(self):
        assert parse_hex("#fff") is None

    def test_trailing_newline_is_no_match(self):
        assert parse_hex("#ffffff\n") is None


class TestParseRGB:

    def test_basic(self):
        assert parse_rgb("rgb(51, 102, 153)") == (51, 102, 153)

    def test_no_spaces(self):
        assert parse_rgb("rgb(1,2,3)") == (1, 2, 3)

    def test_out_of_range_is_not_clamped(self):
        assert parse_rgb("rgb(999, 0, 0)") == (999, 0, 0)

    def test_rgba_input_is_no_match(self):
        assert parse_rgb("rgba(1, 2, 3, 1)") is None

    @pytest.mark.parametrize("text", [
        "rgb(1, 2)",
        "rgb(1, 2, 3, 4)",
        "rgb(1.5, 2, 3)",
        "rgb(-1, 2, 3)",
        "rgb 1, 2, 3",
        "rgb(1,2,3)\n",
    ])
    def test_malformed(self, text):
        assert parse_rgb(text) is None


class TestParseRGBA:

    def test_fractional_alpha(self):
        assert parse_rgba("rgba(10, 20, 30, 0.5)") == (10, 20, 30, 0.5)

    def test_leading_dot_alpha(self):
        assert parse_rgba("rgba(10, 20, 30, .25)") == (10, 20, 30, 0.25)

    def test_integer_alpha(self):
        assert parse_rgba("rgba(10, 20, 30, 1)") == (10, 20, 30, 1.0)

    def test_empty_alpha_is_no_match(self):
        assert parse_rgba("rgba(10, 20, 30, )") is None

    def test_missing_alpha_is_no_match(self):
        assert parse_rgba("rgba(10, 20, 30)") is None


class TestParseHSL:

    def test_basic(self):
        assert parse_hsl("hsl(210, 50%, 40%)") == (210, 50, 40)

    def test_hue_range_not_enforced(self):
        assert parse_hsl("hsl(400, 50%, 50%)") == (400, 50, 50)

    def test_percent_signs_required(self):
        assert parse_hsl("hsl(210, 50, 40)") is None

    def test_hsla_with_alpha(self):
        assert parse_hsla("hsla(210, 50%, 40%, 0.75)") == (210, 50, 40, 0.75)

    def test_hsla_without_alpha(self):
        assert parse_hsla("hsla(210, 50%, 40%)") is None


class TestParseOKLCH:

    def test_recognized(self):
        assert parse_oklch("oklch(0.7, 15%, 220)") == (0.7, 15.0, 220.0)

    def test_malformed(self):
        assert parse_oklch("oklch(0.7 15% 220)") is None


class TestTrailingNewline:
    """A line break after the closing parenthesis is not part of the color."""

    def test_functional_syntaxes(self):
        assert parse_rgba("rgba(1, 2, 3, 1)\n") is None
        assert parse_hsl("hsl(1, 2%, 3%)\n") is None
        assert parse_hsla("hsla(1, 2%, 3%, 0.5)\n") is None
        assert parse_oklch("oklch(0.5, 20%, 100)\n") is None
