# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Tool output serializer for API responses.

Formats a ContrastCheck as the JSON body returned by the check endpoint,
optionally with improvement suggestions for both roles. Keys are
camelCase because browsers and function-calling models consume them.
"""

from __future__ import annotations

import json
from typing import Optional

from contrastkit.runtime.serializers.base import SerializerFormat
from contrastkit.schema import ContrastCheck, SuggestionSet


def to_tool_output(
    check: ContrastCheck,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    suggestions: Optional[SuggestionSet] = None,
    include_tool_name: bool = False,
) -> str:
    """Serialize a ContrastCheck as response JSON.

    Args:
        check: The ContrastCheck to serialize.
        format: Output format (JSON or JSON_PRETTY).
        suggestions: Optional suggestions to attach under ``suggestions``.
        include_tool_name: Tag the payload with
            ``"tool": "contrastkit_contrast_check"`` for tool-use replies.

    Returns:
        JSON string.

    Example::

        {
          "ratio": 12.63,
          "textColor": "#333333",
          "backgroundColor": "#FFFFFF",
          "passesAA": true,
          "passesAAA": true,
          "largeTextOnly": false
        }
    """
    data: dict = {}
    if include_tool_name:
        data["tool"] = "contrastkit_contrast_check"
    data.update(check.to_dict())

    if suggestions is not None:
        data["suggestions"] = suggestions.to_dict()

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    else:
        return json.dumps(data, separators=(",", ":"))


def to_error_output(message: str) -> str:
    """Serialize an error body, ``{"error": "..."}``."""
    return json.dumps({"error": message}, separators=(",", ":"))
