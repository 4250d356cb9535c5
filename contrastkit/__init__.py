# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Contrastkit -- Color parsing and WCAG contrast engine.

Parses textual colors (hex, rgb, rgba, hsl, hsla) into one canonical
record, measures WCAG 2.x contrast between two colors, and proposes
nearby colors that read better.

Quick start::

    from contrastkit import parse_color, get_contrast_ratio, get_contrast_compliance

    text = parse_color("rgb(51, 51, 51)")
    ratio = get_contrast_ratio(text.hex, "#FFFFFF")   # 12.63...
    get_contrast_compliance(ratio)                    # aa=True, aaa=True
"""

from __future__ import annotations

__version__ = "1.0.0"

from contrastkit.color import (
    format_color,
    get_color_error_message,
    parse_color,
    to_hex,
    validate_color,
)
from contrastkit.contrast import (
    SuggestionConfig,
    contrast_ratio_matrix,
    generate_color_suggestions,
    get_contrast_compliance,
    get_contrast_ratio,
    get_luminance,
    suggest_for_pair,
)
from contrastkit.schema import (
    ColorFormat,
    ColorRole,
    ColorSuggestion,
    ColorValues,
    ContrastCheck,
    ContrastCompliance,
    SuggestionAxis,
    SuggestionSet,
    ValidationResult,
)

DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"

__all__ = [
    # Core API
    "parse_color",
    "validate_color",
    "to_hex",
    "format_color",
    "get_contrast_ratio",
    "get_contrast_compliance",
    "generate_color_suggestions",
    # Extras
    "get_color_error_message",
    "get_luminance",
    "contrast_ratio_matrix",
    "suggest_for_pair",
    "SuggestionConfig",
    # Types (commonly needed)
    "ColorValues",
    "ColorFormat",
    "ColorRole",
    "ValidationResult",
    "ContrastCompliance",
    "ColorSuggestion",
    "SuggestionAxis",
    "SuggestionSet",
    "ContrastCheck",
    # Defaults
    "DEFAULT_TEXT_COLOR",
    "DEFAULT_BACKGROUND_COLOR",
    # Version
    "__version__",
]
