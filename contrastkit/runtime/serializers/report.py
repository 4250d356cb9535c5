# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Human-readable report serializer.

Formats a ContrastCheck as a short Markdown-flavored summary: the pair,
the ratio, the WCAG guideline table with pass/fail per row, and any
suggestions.
"""

from __future__ import annotations

import json
from typing import Optional

from contrastkit.color import parse_color
from contrastkit.contrast import WCAG_GUIDELINES
from contrastkit.runtime.serializers.base import SerializerFormat, format_ratio
from contrastkit.schema import ContrastCheck, SuggestionSet


def to_text_report(
    check: ContrastCheck,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    suggestions: Optional[SuggestionSet] = None,
    preamble: bool = True,
) -> str:
    """Serialize a ContrastCheck for people.

    Args:
        check: The ContrastCheck to serialize.
        format: NATURAL (human-readable) or JSON.
        suggestions: Optional suggestions for both roles.
        preamble: Include the heading.

    Returns:
        Report string.

    Example (NATURAL)::

        ## Contrast Check

        **Text:** #333333 (Dark gray)
        **Background:** #FFFFFF (White)
        **Ratio:** 12.63:1

        - Normal Text (AA): pass (needs 4.5:1)
        - Large Text (AA): pass (needs 3:1)
        - Normal Text (AAA): pass (needs 7:1)
        - Large Text (AAA): pass (needs 4.5:1)
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(check, suggestions, preamble)
    else:
        return _to_json_block(check, suggestions, preamble)


def _to_natural(
    check: ContrastCheck,
    suggestions: Optional[SuggestionSet],
    preamble: bool,
) -> str:
    """Generate natural language representation."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Contrast Check",
            "",
        ])

    lines.append(f"**Text:** {check.text_color} ({describe_color(check.text_color)})")
    lines.append(
        f"**Background:** {check.background_color} "
        f"({describe_color(check.background_color)})"
    )
    lines.append(f"**Ratio:** {format_ratio(check.ratio)}")
    lines.append("")

    for guideline in WCAG_GUIDELINES:
        verdict = "pass" if check.meets(guideline.requirement) else "fail"
        lines.append(
            f"- {guideline.name}: {verdict} (needs {guideline.requirement:g}:1)"
        )

    if suggestions is not None and len(suggestions):
        lines.append("")
        lines.append("**Suggestions:**")
        for role, items in (("Text", suggestions.text),
                            ("Background", suggestions.background)):
            for s in items:
                lines.append(
                    f"- {role} {s.suggested_color} ({s.improvement.value}): "
                    f"{format_ratio(s.contrast_ratio)}, "
                    f"+{s.improvement_ratio:.0f}%"
                )

    return "\n".join(lines)


def _to_json_block(
    check: ContrastCheck,
    suggestions: Optional[SuggestionSet],
    preamble: bool,
) -> str:
    """Generate JSON block representation."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Contrast Check",
            "",
        ])

    data = check.to_dict()
    if suggestions is not None:
        data["suggestions"] = suggestions.to_dict()

    lines.append("```json")
    lines.append(json.dumps(data, indent=2))
    lines.append("```")

    return "\n".join(lines)


def describe_color(hex_color: str) -> str:
    """Approximate color name from HSL, e.g. ``Dark gray`` or ``Light blue``."""
    parsed = parse_color(hex_color)
    if parsed is None:
        return "Unknown"

    hsl = parsed.hsl
    if hsl.s < 10:
        if hsl.l > 90:
            return "White"
        elif hsl.l < 10:
            return "Black"
        elif hsl.l < 35:
            return "Dark gray"
        elif hsl.l > 75:
            return "Light gray"
        return "Gray"

    name = _hue_to_name(hsl.h)
    if hsl.l > 75:
        return f"Light {name.lower()}"
    elif hsl.l < 30:
        return f"Dark {name.lower()}"
    return name


def _hue_to_name(hue: int) -> str:
    """Convert HSL hue angle to an approximate color name.

    HSL hue wheel (approximate ranges used here):
      0-14, 345-359: Red
      15-44: Orange
      45-69: Yellow
      70-164: Green
      165-194: Cyan
      195-254: Blue
      255-289: Purple
      290-344: Pink
    """
    if hue < 15 or hue >= 345:
        return "Red"
    elif hue < 45:
        return "Orange"
    elif hue < 70:
        return "Yellow"
    elif hue < 165:
        return "Green"
    elif hue < 195:
        return "Cyan"
    elif hue < 255:
        return "Blue"
    elif hue < 290:
        return "Purple"
    else:
        return "Pink"
