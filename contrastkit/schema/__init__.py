# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and contrast results.

All types in this module are immutable (frozen dataclasses).
Every call in the engine returns freshly constructed values; nothing
here holds shared state.
"""

from contrastkit.schema.color_values import (
    ColorFormat,
    ColorRole,
    ColorSuggestion,
    ColorValues,
    ContrastCheck,
    ContrastCompliance,
    HSLAColor,
    HSLColor,
    OKLCHColor,
    RGBAColor,
    RGBColor,
    SuggestionAxis,
    SuggestionSet,
    ValidationResult,
)

__all__ = [
    # Enums
    "ColorFormat",
    "ColorRole",
    "SuggestionAxis",
    # Color spaces
    "RGBColor",
    "RGBAColor",
    "HSLColor",
    "HSLAColor",
    "OKLCHColor",
    # Canonical record
    "ColorValues",
    # Validation
    "ValidationResult",
    # Contrast
    "ContrastCompliance",
    "ColorSuggestion",
    "SuggestionSet",
    "ContrastCheck",
]
