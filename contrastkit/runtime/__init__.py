# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Request-facing runtime for Contrastkit.

The collaborator layer between callers and the pure engine:

1. Contrast Check -- parameter aliasing, length limits, error statuses
2. Rate Limiting -- explicit fixed-window state owned by the server
3. Serializers -- JSON response body, context blocks, text reports

Nothing here changes what the engine computes.
"""

from contrastkit.runtime.check import (
    CheckConfig,
    CheckError,
    check_contrast,
    check_params,
    resolve_color_params,
)
from contrastkit.runtime.ratelimit import (
    FixedWindowRateLimiter,
    RateLimitConfig,
    client_id_from_headers,
)
from contrastkit.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    to_context_block,
    to_error_output,
    to_text_report,
    to_tool_output,
)

__all__ = [
    "check_contrast",
    "check_params",
    "resolve_color_params",
    "CheckConfig",
    "CheckError",
    "FixedWindowRateLimiter",
    "RateLimitConfig",
    "client_id_from_headers",
    "to_tool_output",
    "to_error_output",
    "to_text_report",
    "to_context_block",
    "SerializerFormat",
    "BlockFormat",
]
