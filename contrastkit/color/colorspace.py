# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion paths: hex ↔ RGB ↔ HSL, and sRGB → linear RGB for luminance.

References:
- HSL: CSS Color Module Level 3, section 4.2.4
- sRGB transfer function: WCAG 2.x relative luminance definition

The scalar conversions are plain Python; the transfer function is NumPy so
it applies equally to one color or a whole palette.
"""

from __future__ import annotations

import math
import re
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray


# WCAG 2.x uses 0.03928 (sRGB proper uses 0.04045; no 8-bit value falls between)
SRGB_THRESHOLD = 0.03928
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_DIVISOR = 12.92
SRGB_GAMMA = 2.4

_HEX6_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """
    Convert a 6-digit hex string to an RGB triple.

    Args:
        hex_color: String like "#3941C8" or "3941c8"

    Returns:
        (r, g, b) tuple, or None if the string is not exactly 6 hex digits
        with an optional leading "#"
    """
    m = _HEX6_RE.fullmatch(hex_color)
    if not m:
        return None
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Convert RGB channels [0, 255] to a hex string.

    Each channel is zero-padded to two lower-case digits. Callers that
    need the canonical form upper-case the result.
    """
    return f"#{r:02x}{g:02x}{b:02x}"


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[int, int, int]:
    """
    Convert RGB [0, 255] to HSL.

    Achromatic colors (max == min) get hue 0 and saturation 0. Rounding to
    whole degrees and percents happens here, once.

    Returns:
        (h, s, l) with h in [0, 360), s and l in [0, 100]
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0

    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0
    h = s = 0.0

    if mx != mn:
        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)

        if mx == r:
            h = ((g - b) / d + (6.0 if g < b else 0.0)) / 6.0
        elif mx == g:
            h = ((b - r) / d + 2.0) / 6.0
        else:
            h = ((r - g) / d + 4.0) / 6.0

    # A hue just under 360 rounds up to 360, which is 0
    return (
        round_half_up(h * 360.0) % 360,
        round_half_up(s * 100.0),
        round_half_up(l * 100.0),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise hue → channel function."""
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB [0, 255].

    Args:
        h: Hue in degrees
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]

    Returns:
        (r, g, b) integer channels
    """
    h /= 360.0
    s /= 100.0
    l /= 100.0

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_channel(p, q, h + 1.0 / 3.0)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1.0 / 3.0)

    return (
        round_half_up(r * 255.0),
        round_half_up(g * 255.0),
        round_half_up(b * 255.0),
    )


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear light.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.03928: value / 12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= SRGB_THRESHOLD,
        srgb / SRGB_DIVISOR,
        np.power((srgb + SRGB_OFFSET) / SRGB_SCALE, SRGB_GAMMA)
    )
    return linear


def srgb_uint8_to_linear(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB channels [0,255] to linear light.

    Convenience wrapper for integer triples and arrays of them.
    """
    return srgb_to_linear(np.asarray(pixels, dtype=np.float64) / 255.0)
