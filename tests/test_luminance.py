# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for relative luminance, contrast ratio and WCAG classification."""

import numpy as np
import pytest

from contrastkit.color import parse_color
from contrastkit.contrast.luminance import (
    CONTRAST_LEVELS,
    MAX_CONTRAST_RATIO,
    WCAG_GUIDELINES,
    contrast_ratio_matrix,
    get_contrast_compliance,
    get_contrast_ratio,
    get_luminance,
    relative_luminance,
)


def _random_hexes(n, seed=42):
    rgb = np.random.RandomState(seed).randint(0, 256, size=(n, 3))
    return ["#{:02X}{:02X}{:02X}".format(*row) for row in rgb]


class TestLuminance:

    def test_white_is_one(self):
        assert get_luminance(255, 255, 255) == pytest.approx(1.0, abs=1e-12)

    def test_black_is_zero(self):
        assert get_luminance(0, 0, 0) == 0.0

    def test_channel_weights(self):
        assert get_luminance(255, 0, 0) == pytest.approx(0.2126, abs=1e-9)
        assert get_luminance(0, 255, 0) == pytest.approx(0.7152, abs=1e-9)
        assert get_luminance(0, 0, 255) == pytest.approx(0.0722, abs=1e-9)

    def test_green_weighted_most(self):
        assert get_luminance(0, 255, 0) > get_luminance(255, 0, 0) > get_luminance(0, 0, 255)

    def test_linear_segment(self):
        """10/255 sits below the 0.03928 threshold."""
        assert get_luminance(10, 10, 10) == pytest.approx(10 / 255 / 12.92, abs=1e-12)

    def test_gamma_segment(self):
        assert get_luminance(51, 51, 51) == pytest.approx(0.0331, abs=1e-4)

    def test_batch_matches_scalar(self):
        pixels = np.array([[255, 0, 0], [51, 102, 153], [0, 0, 0]])
        batch = relative_luminance(pixels)
        assert batch.shape == (3,)
        for row, value in zip(pixels, batch):
            assert value == pytest.approx(get_luminance(*row), abs=1e-12)


class TestContrastRatio:

    def test_black_on_white(self):
        ratio = get_contrast_ratio("#FFFFFF", "#000000")
        assert ratio == pytest.approx(21.0, abs=1e-9)
        assert ratio <= MAX_CONTRAST_RATIO

    def test_identity(self):
        assert get_contrast_ratio("#777777", "#777777") == 1.0

    def test_symmetric(self):
        assert get_contrast_ratio("#336699", "#FFCC00") == get_contrast_ratio("#FFCC00", "#336699")

    def test_known_gray(self):
        assert get_contrast_ratio("#777777", "#FFFFFF") == pytest.approx(4.48, abs=0.01)
        assert get_contrast_ratio("#333333", "#FFFFFF") == pytest.approx(12.63, abs=0.01)

    def test_case_and_hash_insensitive(self):
        assert get_contrast_ratio("ffffff", "#000000") == pytest.approx(21.0, abs=1e-9)
        assert get_contrast_ratio("#abcdef", "#ABCDEF") == 1.0

    def test_unparseable_is_zero(self):
        assert get_contrast_ratio("not-a-color", "#ffffff") == 0.0
        assert get_contrast_ratio("#ffffff", "#fff") == 0.0
        assert get_contrast_ratio(None, "#ffffff") == 0.0

    def test_trailing_newline_is_unparseable(self):
        assert get_contrast_ratio("#000000\n", "#ffffff") == 0.0
        assert get_contrast_ratio("#000000", "ffffff\n") == 0.0

    def test_parsed_records_feed_the_engine(self):
        text = parse_color("#FFFFFF")
        background = parse_color("#000000")
        ratio = get_contrast_ratio(text.hex, background.hex)
        compliance = get_contrast_compliance(ratio)
        assert ratio == pytest.approx(21.0)
        assert compliance.aa and compliance.aaa


class TestContrastProperties:
    """Symmetry, identity and range over random colors."""

    @pytest.fixture
    def pairs(self):
        hexes = _random_hexes(400)
        return list(zip(hexes[:200], hexes[200:]))

    def test_symmetry(self, pairs):
        for a, b in pairs:
            assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)

    def test_range(self, pairs):
        for a, b in pairs:
            assert 1.0 <= get_contrast_ratio(a, b) <= 21.0

    def test_identity(self, pairs):
        for a, _ in pairs:
            assert get_contrast_ratio(a, a) == 1.0


class TestContrastMatrix:

    def test_matches_scalar(self):
        a = ["#000000", "#336699"]
        b = ["#FFFFFF", "#777777", "#FFCC00"]
        matrix = contrast_ratio_matrix(a, b)
        assert matrix.shape == (2, 3)
        for i, ca in enumerate(a):
            for j, cb in enumerate(b):
                assert matrix[i, j] == pytest.approx(get_contrast_ratio(ca, cb), abs=1e-12)

    def test_unparseable_entries_are_zero(self):
        matrix = contrast_ratio_matrix(["#000000", "oops"], ["#FFFFFF"])
        assert matrix[0, 0] == pytest.approx(21.0)
        assert matrix[1, 0] == 0.0

    def test_empty(self):
        assert contrast_ratio_matrix([], ["#FFFFFF"]).shape == (0, 1)


class TestCompliance:

    def test_seven_passes_everything(self):
        c = get_contrast_compliance(7.0)
        assert c.aa and c.aaa
        assert c.large_text is None

    def test_just_below_seven(self):
        c = get_contrast_compliance(6.99)
        assert c.aa and not c.aaa
        assert c.large_text is None

    def test_four_and_a_half(self):
        c = get_contrast_compliance(4.5)
        assert c.aa and not c.aaa

    def test_just_below_aa_is_large_text(self):
        c = get_contrast_compliance(4.49)
        assert not c.aa and not c.aaa
        assert c.large_text is True

    def test_three_is_large_text(self):
        c = get_contrast_compliance(3.0)
        assert not c.aa and not c.aaa
        assert c.large_text is True

    def test_below_three_fails(self):
        c = get_contrast_compliance(2.99)
        assert not c.aa and not c.aaa
        assert not c.large_text

    def test_sentinel_fails(self):
        assert get_contrast_compliance(0.0).to_dict() == {
            "aa": False, "aaa": False, "large_text": False,
        }


class TestGuidelines:

    def test_levels(self):
        assert CONTRAST_LEVELS == {"AAA": 7.0, "AA": 4.5, "AA_LARGE": 3.0}

    def test_table(self):
        assert [g.requirement for g in WCAG_GUIDELINES] == [4.5, 3.0, 7.0, 4.5]
