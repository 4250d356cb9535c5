# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color normalizer.

Turns any accepted color string into one canonical ColorValues record,
deriving every representation from whichever one was parsed natively:

    hex  → RGB → HSL
    rgb  → HSL (hex from RGB)
    hsl  → RGB (hex from RGB)

Out-of-range components are clamped once here (RGB to 0-255, S/L to
0-100, alpha to 0-1, hue wrapped modulo 360), so every record is in gamut
and its hex is always six digits.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from contrastkit.color.colorspace import hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from contrastkit.color.parsers import (
    parse_hex,
    parse_hsl,
    parse_hsla,
    parse_rgb,
    parse_rgba,
)
from contrastkit.color.validation import validate_color
from contrastkit.schema import (
    ColorFormat,
    ColorValues,
    HSLAColor,
    HSLColor,
    RGBAColor,
    RGBColor,
)

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _format_number(value: float) -> str:
    """Render like a JS number: ``1`` not ``1.0``, ``0.5`` stays ``0.5``."""
    return f"{value:g}"


def _from_rgb(r: int, g: int, b: int, a: float = 1.0) -> ColorValues:
    r, g, b = (int(_clamp(c, 0, 255)) for c in (r, g, b))
    a = _clamp(a, 0.0, 1.0)
    h, s, l = rgb_to_hsl(r, g, b)
    return ColorValues(
        hex=rgb_to_hex(r, g, b).upper(),
        rgb=RGBColor(r, g, b),
        rgba=RGBAColor(r, g, b, a),
        hsl=HSLColor(h, s, l),
        hsla=HSLAColor(h, s, l, a),
    )


def _from_hsl(h: int, s: int, l: int, a: float = 1.0) -> ColorValues:
    h = h % 360
    s = int(_clamp(s, 0, 100))
    l = int(_clamp(l, 0, 100))
    a = _clamp(a, 0.0, 1.0)
    r, g, b = hsl_to_rgb(h, s, l)
    return ColorValues(
        hex=rgb_to_hex(r, g, b).upper(),
        rgb=RGBColor(r, g, b),
        rgba=RGBAColor(r, g, b, a),
        hsl=HSLColor(h, s, l),
        hsla=HSLAColor(h, s, l, a),
    )


def parse_color(color: str) -> Optional[ColorValues]:
    """
    Parse any supported color string into a canonical record.

    Dispatch is by literal prefix, tested in a fixed order: ``#``,
    ``rgb(``, ``rgba(``, ``hsl(``, ``hsla(``. Each branch only tries its own
    parser, so an ``rgba(`` string is never attempted as ``rgb(``.

    Args:
        color: Raw input; surrounding whitespace and case are ignored.

    Returns:
        ColorValues with every field populated, or None if no parser
        matched (including 3-digit hex, bare hex and oklch).

    Example:
        >>> parse_color("rgb(51, 51, 51)").hex
        '#333333'
    """
    if not isinstance(color, str):
        return None
    text = color.strip().lower()

    if text.startswith("#"):
        rgb = parse_hex(text)
        if rgb is not None:
            return _from_rgb(*rgb)
    elif text.startswith("rgb("):
        rgb = parse_rgb(text)
        if rgb is not None:
            return _from_rgb(*rgb)
    elif text.startswith("rgba("):
        rgba = parse_rgba(text)
        if rgba is not None:
            return _from_rgb(*rgba)
    elif text.startswith("hsl("):
        hsl = parse_hsl(text)
        if hsl is not None:
            return _from_hsl(*hsl)
    elif text.startswith("hsla("):
        hsla = parse_hsla(text)
        if hsla is not None:
            return _from_hsl(*hsla)

    logger.debug("No color parser matched %r", color)
    return None


def format_color(color: ColorValues, format: Union[ColorFormat, str]) -> str:
    """
    Render a record in one textual format.

    Args:
        color: Canonical record to render.
        format: Target format (ColorFormat or its string value). Unknown
            formats fall back to hex.

    Returns:
        e.g. ``"#333333"``, ``"rgba(51, 51, 51, 1)"``, ``"hsl(0, 0%, 20%)"``
    """
    if not isinstance(format, ColorFormat):
        try:
            format = ColorFormat(str(format).lower())
        except ValueError:
            return color.hex

    if format == ColorFormat.RGB:
        c = color.rgb
        return f"rgb({c.r}, {c.g}, {c.b})"
    elif format == ColorFormat.RGBA:
        c = color.rgba
        return f"rgba({c.r}, {c.g}, {c.b}, {_format_number(c.a)})"
    elif format == ColorFormat.HSL:
        c = color.hsl
        return f"hsl({c.h}, {c.s}%, {c.l}%)"
    elif format == ColorFormat.HSLA:
        c = color.hsla
        return f"hsla({c.h}, {c.s}%, {c.l}%, {_format_number(c.a)})"
    elif format == ColorFormat.OKLCH:
        c = color.oklch
        return (
            f"oklch({_format_number(c.l)}%, {_format_number(c.c)}%, "
            f"{_format_number(c.h)})"
        )
    else:
        return color.hex


def to_hex(color: str) -> Optional[str]:
    """
    Resolve any accepted syntax to a canonical hex string.

    Validation runs first, so the lenient hex corrections apply (``fff``
    resolves to ``#FFFFFF``). Named colors are not resolved, and neither is
    oklch, which is recognized but not convertible.

    Returns:
        ``#RRGGBB`` or None
    """
    validation = validate_color(color)
    if not validation.is_valid:
        return None

    parsed = parse_color(validation.normalized or color)
    if parsed is None:
        logger.debug("Valid %s color %r has no hex form", validation.format, color)
        return None
    return parsed.hex
