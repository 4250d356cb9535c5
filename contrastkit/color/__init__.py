# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Color parsing, conversion and validation.

Pure functions only: text in, values (or None) out. Nothing here raises
for malformed input.
"""

from contrastkit.color.normalize import format_color, parse_color, to_hex
from contrastkit.color.validation import get_color_error_message, validate_color

__all__ = [
    "parse_color",
    "format_color",
    "to_hex",
    "validate_color",
    "get_color_error_message",
]
