# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def format_ratio(ratio: float) -> str:
    """Render a contrast ratio the way WCAG tools print it, e.g. ``4.54:1``."""
    return f"{ratio:.2f}:1"
