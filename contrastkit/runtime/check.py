# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Contrast check for request handlers.

The glue between an incoming request (query string, JSON body, CLI args)
and the pure engine: parameter aliasing, input length limits and error
reporting. Unlike the engine, this layer raises, because a caller asking
for a check needs to know why it could not be done.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from contrastkit.color import parse_color
from contrastkit.contrast import get_contrast_compliance, get_contrast_ratio
from contrastkit.schema import ContrastCheck

logger = logging.getLogger(__name__)


TEXT_PARAM_ALIASES = ("text", "textColor", "fg")
BACKGROUND_PARAM_ALIASES = ("background", "backgroundColor", "bg")

MISSING_PARAMS_MESSAGE = (
    "Missing parameters. Use text (or textColor/fg) and background "
    "(or backgroundColor/bg)."
)
TOO_LONG_MESSAGE = "Color value too long"
INVALID_COLOR_MESSAGE = "Invalid color format. Supported: hex, rgb, rgba, hsl, hsla."


class CheckError(ValueError):
    """A contrast check that cannot be answered, with an HTTP-style status."""

    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> dict:
        return {"error": self.message}


@dataclass(frozen=True)
class CheckConfig:
    """Limits applied before a check reaches the engine."""

    max_color_length: int = 200


def _first_present(params: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        value = params.get(key)
        if value is not None:
            return value
    return None


def resolve_color_params(params: Mapping[str, Any]) -> tuple[Optional[Any], Optional[Any]]:
    """
    Pick the text and background values out of request parameters.

    Each side accepts several names; the first one present wins.

    Returns:
        (text, background); either may be None
    """
    return (
        _first_present(params, TEXT_PARAM_ALIASES),
        _first_present(params, BACKGROUND_PARAM_ALIASES),
    )


def check_contrast(
    text: Any,
    background: Any,
    *,
    config: Optional[CheckConfig] = None,
) -> ContrastCheck:
    """
    Check a text/background pair.

    Args:
        text: Text color in any syntax ``parse_color`` accepts.
        background: Background color.
        config: Input limits (uses defaults if None).

    Returns:
        ContrastCheck with the ratio rounded to 2 decimals and both colors
        in canonical hex.

    Raises:
        CheckError: If a value is missing, too long or not a color.
    """
    cfg = config or CheckConfig()

    if not text or not background or not isinstance(text, str) or not isinstance(background, str):
        raise CheckError(MISSING_PARAMS_MESSAGE)

    if len(text) > cfg.max_color_length or len(background) > cfg.max_color_length:
        raise CheckError(TOO_LONG_MESSAGE)

    text_parsed = parse_color(text.strip())
    background_parsed = parse_color(background.strip())

    if text_parsed is None or background_parsed is None:
        logger.info("Rejected check for %r on %r", text, background)
        raise CheckError(INVALID_COLOR_MESSAGE)

    ratio = get_contrast_ratio(text_parsed.hex, background_parsed.hex)
    compliance = get_contrast_compliance(ratio)

    return ContrastCheck(
        ratio=round(ratio, 2),
        text_color=text_parsed.hex,
        background_color=background_parsed.hex,
        passes_aa=compliance.aa,
        passes_aaa=compliance.aaa,
        large_text_only=bool(compliance.large_text),
    )


def check_params(
    params: Mapping[str, Any],
    *,
    config: Optional[CheckConfig] = None,
) -> ContrastCheck:
    """Check a pair given as request parameters (query string or JSON body)."""
    text, background = resolve_color_params(params)
    return check_contrast(text, background, config=config)
