# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Relative luminance and WCAG contrast.

    L     = 0.2126 R + 0.7152 G + 0.0722 B     (linear-light channels)
    ratio = (L_lighter + 0.05) / (L_darker + 0.05)

The ratio is symmetric and lies in [1, 21]. A ratio of exactly 0 is the
"could not compute" sentinel returned for unparseable input; it is never
a legitimate result.

References:
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from contrastkit.color.colorspace import hex_to_rgb, srgb_uint8_to_linear
from contrastkit.schema import ContrastCompliance

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Flare term added to both luminances
CONTRAST_OFFSET = 0.05

MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0

# Returned when either color cannot be resolved
UNPARSEABLE_RATIO = 0.0

CONTRAST_LEVELS = {
    "AAA": 7.0,
    "AA": 4.5,
    "AA_LARGE": 3.0,
}


@dataclass(frozen=True)
class WCAGGuideline:
    """One row of the WCAG text contrast table."""
    name: str
    requirement: float
    description: str
    size: str


WCAG_GUIDELINES: tuple[WCAGGuideline, ...] = (
    WCAGGuideline(
        name="Normal Text (AA)",
        requirement=4.5,
        description="Minimum contrast ratio for normal text",
        size="16px",
    ),
    WCAGGuideline(
        name="Large Text (AA)",
        requirement=3.0,
        description="Minimum contrast ratio for large text (18pt or 14pt bold)",
        size="18px",
    ),
    WCAGGuideline(
        name="Normal Text (AAA)",
        requirement=7.0,
        description="Enhanced contrast ratio for normal text",
        size="16px",
    ),
    WCAGGuideline(
        name="Large Text (AAA)",
        requirement=4.5,
        description="Enhanced contrast ratio for large text (18pt or 14pt bold)",
        size="18px",
    ),
)


# =============================================================================
# Luminance
# =============================================================================


def relative_luminance(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Relative luminance of 8-bit sRGB colors.

    Args:
        rgb: Array of shape (..., 3) with sRGB channels [0, 255]

    Returns:
        Array of shape (...) with luminance in [0, 1]
    """
    linear = srgb_uint8_to_linear(rgb)
    # Elementwise per channel so identical colors give bit-identical results
    return (
        LUMINANCE_WEIGHTS[0] * linear[..., 0]
        + LUMINANCE_WEIGHTS[1] * linear[..., 1]
        + LUMINANCE_WEIGHTS[2] * linear[..., 2]
    )


def get_luminance(r: int, g: int, b: int) -> float:
    """Relative luminance of a single RGB color."""
    return float(relative_luminance([r, g, b]))


def _ratio_from_luminance(
    l1: NDArray[np.float64], l2: NDArray[np.float64]
) -> NDArray[np.float64]:
    lighter = np.maximum(l1, l2)
    darker = np.minimum(l1, l2)
    ratio = (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)
    # Black on white computes to a hair above 21
    return np.minimum(ratio, MAX_CONTRAST_RATIO)


# =============================================================================
# Contrast
# =============================================================================


def get_contrast_ratio(color1: str, color2: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Lighter and darker are decided by luminance, not argument order, so
    ``get_contrast_ratio(a, b) == get_contrast_ratio(b, a)``.

    Args:
        color1: ``#RRGGBB`` (``#`` optional, any case)
        color2: ``#RRGGBB``

    Returns:
        Ratio in [1, 21], or 0.0 if either color is not 6-digit hex
    """
    rgb1 = hex_to_rgb(color1) if isinstance(color1, str) else None
    rgb2 = hex_to_rgb(color2) if isinstance(color2, str) else None

    if rgb1 is None or rgb2 is None:
        logger.debug("Cannot compute contrast for %r and %r", color1, color2)
        return UNPARSEABLE_RATIO

    lum = relative_luminance(np.array([rgb1, rgb2], dtype=np.float64))
    return float(_ratio_from_luminance(lum[0], lum[1]))


def contrast_ratio_matrix(
    colors1: Sequence[str],
    colors2: Sequence[str],
) -> NDArray[np.float64]:
    """
    Vectorized contrast ratios for every pairing of two palettes.

    Args:
        colors1: N hex colors
        colors2: M hex colors

    Returns:
        Array of shape (N, M); entries involving an unparseable color are 0
    """
    rgb1 = [hex_to_rgb(c) for c in colors1]
    rgb2 = [hex_to_rgb(c) for c in colors2]

    valid1 = np.array([rgb is not None for rgb in rgb1], dtype=bool)
    valid2 = np.array([rgb is not None for rgb in rgb2], dtype=bool)

    lum1 = relative_luminance(
        np.array([rgb or (0, 0, 0) for rgb in rgb1], dtype=np.float64).reshape(-1, 3)
    )
    lum2 = relative_luminance(
        np.array([rgb or (0, 0, 0) for rgb in rgb2], dtype=np.float64).reshape(-1, 3)
    )

    ratios = _ratio_from_luminance(lum1[:, None], lum2[None, :])
    return np.where(valid1[:, None] & valid2[None, :], ratios, UNPARSEABLE_RATIO)


def get_contrast_compliance(ratio: float) -> ContrastCompliance:
    """
    Classify a ratio against the WCAG thresholds.

    - >= 7:   AA and AAA pass
    - >= 4.5: AA passes, AAA fails
    - >= 3:   both fail, large text passes AA (``large_text=True``)
    - < 3:    everything fails (``large_text=False``)
    """
    if ratio >= CONTRAST_LEVELS["AAA"]:
        return ContrastCompliance(aa=True, aaa=True)
    if ratio >= CONTRAST_LEVELS["AA"]:
        return ContrastCompliance(aa=True, aaa=False)
    if ratio >= CONTRAST_LEVELS["AA_LARGE"]:
        return ContrastCompliance(aa=False, aaa=False, large_text=True)
    return ContrastCompliance(aa=False, aaa=False, large_text=False)
