# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Serializers for ContrastCheck delivery.

Each serializer formats a ContrastCheck for a specific consumer.
All serializers preserve the check exactly -- no recomputation.
"""

from contrastkit.runtime.serializers.base import SerializerFormat, format_ratio
from contrastkit.runtime.serializers.block import BlockFormat, to_context_block
from contrastkit.runtime.serializers.report import describe_color, to_text_report
from contrastkit.runtime.serializers.tool import to_error_output, to_tool_output

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "format_ratio",
    "describe_color",
    "to_tool_output",
    "to_error_output",
    "to_text_report",
    "to_context_block",
]
