# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
WCAG contrast engine.

Luminance, contrast ratio, compliance classification and the bounded
suggestion search built on top of them.
"""

from contrastkit.contrast.luminance import (
    CONTRAST_LEVELS,
    WCAG_GUIDELINES,
    contrast_ratio_matrix,
    get_contrast_compliance,
    get_contrast_ratio,
    get_luminance,
)
from contrastkit.contrast.suggestions import (
    SuggestionConfig,
    generate_color_suggestions,
    suggest_for_pair,
)

__all__ = [
    "get_luminance",
    "get_contrast_ratio",
    "get_contrast_compliance",
    "contrast_ratio_matrix",
    "generate_color_suggestions",
    "suggest_for_pair",
    "SuggestionConfig",
    "CONTRAST_LEVELS",
    "WCAG_GUIDELINES",
]
