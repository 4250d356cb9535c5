# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Contrast-improving color suggestions.

A bounded, deterministic neighborhood search in HSL: a fixed list of
lightness steps plus one desaturation step around the base color. No
iterative optimization; the same input always yields the same
candidates, in the same order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from contrastkit.color.colorspace import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from contrastkit.contrast.luminance import get_contrast_ratio
from contrastkit.schema import ColorRole, ColorSuggestion, SuggestionAxis, SuggestionSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionConfig:
    """Configuration for the suggestion search grid."""

    # Lightness deltas (percent points), biased toward the direction most
    # likely to help each role: text usually darkens, background lightens
    text_lightness_steps: tuple[int, ...] = (-10, 10, 20, 30)
    background_lightness_steps: tuple[int, ...] = (10, -10, -20, -30)

    # Desaturate only colors above this saturation
    min_saturation: int = 10
    saturation_step: int = 10

    # Kept per role after ranking
    max_suggestions: int = 3

    def lightness_steps(self, role: ColorRole) -> tuple[int, ...]:
        if role == ColorRole.BACKGROUND:
            return self.background_lightness_steps
        return self.text_lightness_steps


def _candidate(
    original: str,
    h: int,
    s: int,
    l: int,
    compare: str,
    axis: SuggestionAxis,
    current_ratio: float,
) -> Optional[ColorSuggestion]:
    """Build a suggestion for one HSL point, or None if it does not improve."""
    new_hex = rgb_to_hex(*hsl_to_rgb(h, s, l)).upper()
    new_ratio = get_contrast_ratio(new_hex, compare)

    if new_ratio <= current_ratio:
        logger.debug(
            "Rejected %s candidate %s: %.3f <= %.3f",
            axis.value, new_hex, new_ratio, current_ratio,
        )
        return None

    return ColorSuggestion(
        original_color=original,
        suggested_color=new_hex,
        improvement=axis,
        contrast_ratio=new_ratio,
        original_ratio=current_ratio,
        improvement_ratio=(new_ratio - current_ratio) / current_ratio * 100.0,
    )


def generate_color_suggestions(
    base_color: str,
    compare_color: str,
    current_ratio: float,
    *,
    role: Union[ColorRole, str] = ColorRole.TEXT,
    config: Optional[SuggestionConfig] = None,
) -> list[ColorSuggestion]:
    """
    Propose replacements for ``base_color`` that raise its contrast.

    1. Decompose the base into HSL.
    2. Try each lightness step for the role, clamped to [0, 100].
    3. If saturation exceeds the floor, try one desaturation step.
    4. Keep candidates strictly above ``current_ratio``, rank by ratio
       descending and truncate.

    Candidates resolving to the same hex are reported once.

    Args:
        base_color: Hex color being adjusted.
        compare_color: Hex color it is measured against.
        current_ratio: Ratio of the unadjusted pair.
        role: Whether ``base_color`` is the text or the background.
        config: Search grid (uses defaults if None).

    Returns:
        At most ``max_suggestions`` suggestions, best first. Empty if the
        base is not hex or ``current_ratio`` is not positive.
    """
    cfg = config or SuggestionConfig()
    role = ColorRole(role)

    rgb = hex_to_rgb(base_color) if isinstance(base_color, str) else None
    if rgb is None or current_ratio <= 0:
        return []

    h, s, l = rgb_to_hsl(*rgb)
    candidates: list[ColorSuggestion] = []

    for step in cfg.lightness_steps(role):
        new_l = max(0, min(100, l + step))
        suggestion = _candidate(
            base_color, h, s, new_l, compare_color,
            SuggestionAxis.LIGHTNESS, current_ratio,
        )
        if suggestion is not None:
            candidates.append(suggestion)

    if s > cfg.min_saturation:
        suggestion = _candidate(
            base_color, h, s - cfg.saturation_step, l, compare_color,
            SuggestionAxis.SATURATION, current_ratio,
        )
        if suggestion is not None:
            candidates.append(suggestion)

    # Stable sort keeps grid order among equal ratios
    candidates.sort(key=lambda c: c.contrast_ratio, reverse=True)

    # Clamped steps often land on the same hex; list each color once,
    # even if that leaves fewer than max_suggestions
    seen: set[str] = set()
    ranked: list[ColorSuggestion] = []
    for suggestion in candidates:
        if suggestion.suggested_color in seen:
            continue
        seen.add(suggestion.suggested_color)
        ranked.append(suggestion)

    return ranked[: cfg.max_suggestions]


def suggest_for_pair(
    text_color: str,
    background_color: str,
    *,
    config: Optional[SuggestionConfig] = None,
) -> SuggestionSet:
    """Run the generator for both roles of a text/background pair."""
    current = get_contrast_ratio(text_color, background_color)
    text = generate_color_suggestions(
        text_color, background_color, current,
        role=ColorRole.TEXT, config=config,
    )
    background = generate_color_suggestions(
        background_color, text_color, current,
        role=ColorRole.BACKGROUND, config=config,
    )
    return SuggestionSet(text=tuple(text), background=tuple(background))
