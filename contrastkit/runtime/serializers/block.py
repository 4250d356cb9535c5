# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Context block serializer for embedding a check next to its colors.

Formats a ContrastCheck as a structured block (XML, JSON, or Markdown) that
can be embedded in a report, a prompt, or an HTML comment next to the
colors it describes.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from contrastkit.schema import ContrastCheck, SuggestionSet


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    check: ContrastCheck,
    *,
    format: BlockFormat = BlockFormat.XML,
    suggestions: Optional[SuggestionSet] = None,
    tag_name: str = "contrast_check",
) -> str:
    """Serialize a ContrastCheck as a context block.

    Args:
        check: The ContrastCheck to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        suggestions: Optional suggestions for both roles.
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <contrast_check source="contrastkit">
          <colors text="#777777" background="#FFFFFF"/>
          <ratio value="4.48" aa="false" aaa="false" large_text="true"/>
          <suggestions role="text">
            <color hex="#5E5E5E" axis="lightness" ratio="6.48"/>
          </suggestions>
        </contrast_check>
    """
    if format == BlockFormat.XML:
        return _to_xml(check, suggestions, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(check, suggestions, tag_name)
    else:
        return _to_markdown(check, suggestions, tag_name)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _to_xml(
    check: ContrastCheck,
    suggestions: Optional[SuggestionSet],
    tag_name: str,
) -> str:
    """Generate XML block."""
    lines = [f'<{tag_name} source="contrastkit">']
    lines.append(
        f'  <colors text="{check.text_color}" '
        f'background="{check.background_color}"/>'
    )
    lines.append(
        f'  <ratio value="{check.ratio:.2f}" aa="{_bool(check.passes_aa)}" '
        f'aaa="{_bool(check.passes_aaa)}" '
        f'large_text="{_bool(check.large_text_only)}"/>'
    )

    if suggestions is not None:
        for role, items in (("text", suggestions.text),
                            ("background", suggestions.background)):
            if not items:
                continue
            lines.append(f'  <suggestions role="{role}">')
            for s in items:
                lines.append(
                    f'    <color hex="{s.suggested_color}" '
                    f'axis="{s.improvement.value}" ratio="{s.contrast_ratio:.2f}"/>'
                )
            lines.append("  </suggestions>")

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _payload(check: ContrastCheck, suggestions: Optional[SuggestionSet]) -> dict:
    data = check.to_dict()
    if suggestions is not None:
        data["suggestions"] = suggestions.to_dict()
    return data


def _to_json(
    check: ContrastCheck,
    suggestions: Optional[SuggestionSet],
    tag_name: str,
) -> str:
    """Generate JSON block with wrapper."""
    wrapped = {tag_name: _payload(check, suggestions)}
    return json.dumps(wrapped, indent=2)


def _to_markdown(
    check: ContrastCheck,
    suggestions: Optional[SuggestionSet],
    tag_name: str,
) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(_payload(check, suggestions), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
