# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Lenient color validation for live input.

Two tiers, tried in order:

1. Strict syntax match for hex, rgb, rgba, hsl, hsla and oklch.
2. Hex auto-correction: a missing ``#`` is added and 3-digit shorthand is
   doubled out to 6 digits. Results are flagged with a note.

Only hex is ever corrected. Malformed rgb/hsl input is rejected, never
repaired. Component ranges are not checked: ``rgb(999, 0, 0)`` is valid
here and clamped later by the normalizer.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from contrastkit.schema import ColorFormat, ValidationResult

logger = logging.getLogger(__name__)


REQUIRED_MESSAGE = "Color value is required"
INVALID_FORMAT_MESSAGE = (
    "Invalid color format. Use hex (#FF0000), rgb(255,0,0), hsl(0,100%,50%), etc."
)
AUTO_CORRECTED_NOTE = "Auto-corrected hex format"

_C = r"\s*(\d{1,3})\s*"
_A = r"\s*(\d*\.?\d+)\s*"

_HEX_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)
_RGB_RE = re.compile(rf"rgb\({_C},{_C},{_C}\)", re.IGNORECASE)
_RGBA_RE = re.compile(rf"rgba\({_C},{_C},{_C},{_A}\)", re.IGNORECASE)
_HSL_RE = re.compile(rf"hsl\({_C},{_C}%\s*,{_C}%\s*\)", re.IGNORECASE)
_HSLA_RE = re.compile(rf"hsla\({_C},{_C}%\s*,{_C}%\s*,{_A}\)", re.IGNORECASE)
_OKLCH_RE = re.compile(rf"oklch\({_A},{_C}%\s*,{_C}\)", re.IGNORECASE)

_BARE_HEX6_RE = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)
_HEX3_RE = re.compile(r"#?([0-9a-f]{3})", re.IGNORECASE)


def is_valid_hex(color: str) -> bool:
    """``#RRGGBB`` only; shorthand goes through auto-correction."""
    return bool(_HEX_RE.fullmatch(color))


def is_valid_rgb(color: str) -> bool:
    return bool(_RGB_RE.fullmatch(color))


def is_valid_rgba(color: str) -> bool:
    return bool(_RGBA_RE.fullmatch(color))


def is_valid_hsl(color: str) -> bool:
    return bool(_HSL_RE.fullmatch(color))


def is_valid_hsla(color: str) -> bool:
    return bool(_HSLA_RE.fullmatch(color))


def is_valid_oklch(color: str) -> bool:
    return bool(_OKLCH_RE.fullmatch(color))


# Strict tier, in the order it is tried
_STRICT_CHECKS = (
    (ColorFormat.HEX, is_valid_hex),
    (ColorFormat.RGB, is_valid_rgb),
    (ColorFormat.RGBA, is_valid_rgba),
    (ColorFormat.HSL, is_valid_hsl),
    (ColorFormat.HSLA, is_valid_hsla),
    (ColorFormat.OKLCH, is_valid_oklch),
)


def _try_fix_hex(color: str) -> Optional[str]:
    """Return the corrected ``#RRGGBB`` for common hex typos, or None."""
    if _BARE_HEX6_RE.fullmatch(color):
        return f"#{color.upper()}"

    m = _HEX3_RE.fullmatch(color)
    if m:
        expanded = "".join(ch * 2 for ch in m.group(1))
        return f"#{expanded.upper()}"

    return None


def validate_color(color: Any) -> ValidationResult:
    """
    Classify a raw color string and normalize it where possible.

    Args:
        color: User input. Anything that is not a non-empty string is
            reported as missing.

    Returns:
        ValidationResult. Valid results carry the detected format and a
        normalized string; invalid ones carry an error message.

    Example:
        >>> validate_color("fff").normalized
        '#FFFFFF'
    """
    if not isinstance(color, str) or not color.strip():
        return ValidationResult(is_valid=False, error=REQUIRED_MESSAGE)

    trimmed = color.strip()

    for fmt, check in _STRICT_CHECKS:
        if check(trimmed):
            normalized = trimmed.upper() if fmt == ColorFormat.HEX else trimmed
            return ValidationResult(is_valid=True, format=fmt, normalized=normalized)

    fixed = _try_fix_hex(trimmed)
    if fixed is not None:
        logger.debug("Auto-corrected %r to %s", trimmed, fixed)
        return ValidationResult(
            is_valid=True,
            format=ColorFormat.HEX,
            normalized=fixed,
            note=AUTO_CORRECTED_NOTE,
        )

    return ValidationResult(is_valid=False, error=INVALID_FORMAT_MESSAGE)


def get_color_error_message(validation: ValidationResult) -> str:
    """User-facing message for a validation result; empty when valid."""
    if validation.is_valid:
        return ""
    if validation.error == REQUIRED_MESSAGE:
        return "Please enter a color value"
    return validation.error or "Invalid color format"
