# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Format parsers, one per textual color syntax.

Each parser takes a trimmed string and returns the parsed numeric tuple,
or None when the syntax does not match. Parsers never raise for malformed
input and never clamp: ``rgb(999, 0, 0)`` parses to ``(999, 0, 0)``.
Range handling belongs to the normalizer.
"""

from __future__ import annotations

import re
from typing import Optional

from contrastkit.color.colorspace import hex_to_rgb


_INT = r"\s*(\d+)\s*"
_NUM = r"\s*(\d*\.?\d+)\s*"

_RGB_RE = re.compile(rf"rgb\({_INT},{_INT},{_INT}\)", re.IGNORECASE)
_RGBA_RE = re.compile(rf"rgba\({_INT},{_INT},{_INT},{_NUM}\)", re.IGNORECASE)
_HSL_RE = re.compile(rf"hsl\({_INT},{_INT}%\s*,{_INT}%\s*\)", re.IGNORECASE)
_HSLA_RE = re.compile(
    rf"hsla\({_INT},{_INT}%\s*,{_INT}%\s*,{_NUM}\)", re.IGNORECASE
)
_OKLCH_RE = re.compile(rf"oklch\({_NUM},{_NUM}%\s*,{_NUM}\)", re.IGNORECASE)


def parse_hex(text: str) -> Optional[tuple[int, int, int]]:
    """Parse ``#rrggbb`` (the ``#`` is optional). 3-digit shorthand is rejected."""
    return hex_to_rgb(text)


def parse_rgb(text: str) -> Optional[tuple[int, int, int]]:
    """Parse ``rgb(r, g, b)`` with integer components."""
    m = _RGB_RE.fullmatch(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def parse_rgba(text: str) -> Optional[tuple[int, int, int, float]]:
    """Parse ``rgba(r, g, b, a)``; alpha may be integer or fractional."""
    m = _RGBA_RE.fullmatch(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3)), float(m.group(4))


def parse_hsl(text: str) -> Optional[tuple[int, int, int]]:
    """Parse ``hsl(h, s%, l%)``. Hue range is not checked."""
    m = _HSL_RE.fullmatch(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def parse_hsla(text: str) -> Optional[tuple[int, int, int, float]]:
    """Parse ``hsla(h, s%, l%, a)``."""
    m = _HSLA_RE.fullmatch(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3)), float(m.group(4))


def parse_oklch(text: str) -> Optional[tuple[float, float, float]]:
    """
    Parse ``oklch(l, c%, h)`` into (lightness fraction, chroma percent, hue).

    Recognized so the syntax can be classified; nothing converts the
    result to RGB.
    """
    m = _OKLCH_RE.fullmatch(text)
    if not m:
        return None
    return float(m.group(1)), float(m.group(2)), float(m.group(3))
