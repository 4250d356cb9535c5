# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Canonical value types for parsed colors, validation and contrast results.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same value
- Authoritative: ``hex`` is the identity form of a color
- Serializable: JSON-ready via ``to_dict``

Color spaces carried by a record:
- RGB: integer channels 0-255
- HSL: hue 0-359 degrees, saturation/lightness 0-100 percent (integers)
- OKLCH: reserved, always zero (conversion is not performed)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


_HEX_RE = re.compile(r"#[0-9A-F]{6}")


# =============================================================================
# Enums
# =============================================================================


class ColorFormat(Enum):
    """Textual color syntaxes understood by the parsers and validator."""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    OKLCH = "oklch"


class ColorRole(Enum):
    """Which side of a text/background pair a color plays."""
    TEXT = "text"
    BACKGROUND = "background"


class SuggestionAxis(Enum):
    """HSL axis adjusted to produce a suggestion."""
    LIGHTNESS = "lightness"
    SATURATION = "saturation"
    HUE = "hue"  # reserved, the generator does not rotate hue


# =============================================================================
# Core Color Types
# =============================================================================


def _check_alpha(a: float) -> None:
    if not 0.0 <= a <= 1.0:
        raise ValueError(f"Alpha must be 0-1, got {a}")


def _check_rgb(r: int, g: int, b: int) -> None:
    for name, value in (("Red", r), ("Green", g), ("Blue", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be 0-255, got {value}")


def _check_hsl(h: int, s: int, l: int) -> None:
    if not 0 <= h < 360:
        raise ValueError(f"Hue must be 0-360, got {h}")
    if not 0 <= s <= 100:
        raise ValueError(f"Saturation must be 0-100, got {s}")
    if not 0 <= l <= 100:
        raise ValueError(f"Lightness must be 0-100, got {l}")


@dataclass(frozen=True, slots=True)
class RGBColor:
    """An sRGB color with integer channels in [0, 255]."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_rgb(self.r, self.g, self.b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """An sRGB color plus alpha in [0, 1]."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        _check_rgb(self.r, self.g, self.b)
        _check_alpha(self.a)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL space, rounded to whole degrees and percents.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]
    """
    h: int
    s: int
    l: int

    def __post_init__(self) -> None:
        _check_hsl(self.h, self.s, self.l)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class HSLAColor:
    """An HSL color plus alpha in [0, 1]."""
    h: int
    s: int
    l: int
    a: float = 1.0

    def __post_init__(self) -> None:
        _check_hsl(self.h, self.s, self.l)
        _check_alpha(self.a)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l, "a": self.a}


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    Reserved OKLCH slot of a color record.

    OKLCH input is recognized but never converted, so every record carries
    zeros here. Do not treat these values as a measurement.
    """
    l: float = 0.0
    c: float = 0.0
    h: float = 0.0

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h}


@dataclass(frozen=True, slots=True)
class ColorValues:
    """
    Canonical multi-representation color record.

    Every field is derivable from the others; all are materialized for
    convenience. When they disagree through independent rounding, ``hex``
    wins: it is the form that is compared and persisted.

    Attributes:
        hex: ``#RRGGBB``, upper case
        rgb: Integer channels
        rgba: ``rgb`` plus alpha
        hsl: Rounded hue/saturation/lightness
        hsla: ``hsl`` plus alpha
        oklch: Always zero (see OKLCHColor)
    """
    hex: str
    rgb: RGBColor
    rgba: RGBAColor
    hsl: HSLColor
    hsla: HSLAColor
    oklch: OKLCHColor = OKLCHColor()

    def __post_init__(self) -> None:
        if not _HEX_RE.fullmatch(self.hex):
            raise ValueError(f"Hex must be #RRGGBB upper case, got {self.hex!r}")

    @property
    def alpha(self) -> float:
        return self.rgba.a

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "rgba": self.rgba.to_dict(),
            "hsl": self.hsl.to_dict(),
            "hsla": self.hsla.to_dict(),
            "oklch": self.oklch.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorValues:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGBColor(**data["rgb"]),
            rgba=RGBAColor(**data["rgba"]),
            hsl=HSLColor(**data["hsl"]),
            hsla=HSLAColor(**data["hsla"]),
            oklch=OKLCHColor(**data.get("oklch", {})),
        )


# =============================================================================
# Validation
# =============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of classifying a raw color string.

    Attributes:
        is_valid: True if a strict match or an auto-correction succeeded
        format: Detected format, None when invalid
        normalized: Trimmed input (hex upper-cased, or the corrected hex)
        error: Human-readable reason when invalid
        note: Informational message when the input was auto-corrected
    """
    is_valid: bool
    format: Optional[ColorFormat] = None
    normalized: Optional[str] = None
    error: Optional[str] = None
    note: Optional[str] = None

    @property
    def corrected(self) -> bool:
        """True if the input only validated after auto-correction."""
        return self.note is not None

    def to_dict(self) -> dict:
        d: dict = {"is_valid": self.is_valid}
        if self.format is not None:
            d["format"] = self.format.value
        if self.normalized is not None:
            d["normalized"] = self.normalized
        if self.error is not None:
            d["error"] = self.error
        if self.note is not None:
            d["note"] = self.note
        return d


# =============================================================================
# Contrast
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastCompliance:
    """
    WCAG pass/fail flags derived from one contrast ratio.

    ``large_text`` is None when the ratio clears full AA, True when it only
    clears the large-text AA threshold, and False below that.
    """
    aa: bool
    aaa: bool
    large_text: Optional[bool] = None

    def to_dict(self) -> dict:
        d = {"aa": self.aa, "aaa": self.aaa}
        if self.large_text is not None:
            d["large_text"] = self.large_text
        return d


@dataclass(frozen=True, slots=True)
class ColorSuggestion:
    """
    A replacement color that strictly improves a contrast ratio.

    Attributes:
        original_color: The color as it was passed in
        suggested_color: Replacement, ``#RRGGBB`` upper case
        improvement: HSL axis that was adjusted
        contrast_ratio: Ratio of the replacement against the other color
        original_ratio: Ratio before the adjustment
        improvement_ratio: Percentage gain over ``original_ratio``
    """
    original_color: str
    suggested_color: str
    improvement: SuggestionAxis
    contrast_ratio: float
    original_ratio: float
    improvement_ratio: float

    def __post_init__(self) -> None:
        if self.contrast_ratio <= self.original_ratio:
            raise ValueError(
                f"Suggestion must improve on {self.original_ratio}, "
                f"got {self.contrast_ratio}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary (camelCase keys, as consumed by the UI)."""
        return {
            "originalColor": self.original_color,
            "suggestedColor": self.suggested_color,
            "improvement": self.improvement.value,
            "contrastRatio": self.contrast_ratio,
            "originalRatio": self.original_ratio,
            "improvementRatio": self.improvement_ratio,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorSuggestion:
        """Deserialize from dictionary."""
        return cls(
            original_color=data["originalColor"],
            suggested_color=data["suggestedColor"],
            improvement=SuggestionAxis(data["improvement"]),
            contrast_ratio=data["contrastRatio"],
            original_ratio=data["originalRatio"],
            improvement_ratio=data["improvementRatio"],
        )


@dataclass(frozen=True, slots=True)
class SuggestionSet:
    """Suggestions for both roles of a text/background pair."""
    text: tuple[ColorSuggestion, ...] = ()
    background: tuple[ColorSuggestion, ...] = ()

    def __len__(self) -> int:
        return len(self.text) + len(self.background)

    def to_dict(self) -> dict:
        return {
            "text": [s.to_dict() for s in self.text],
            "background": [s.to_dict() for s in self.background],
        }


@dataclass(frozen=True, slots=True)
class ContrastCheck:
    """
    Result of checking one text/background pair.

    Attributes:
        ratio: Contrast ratio rounded to 2 decimals
        text_color: Canonical hex of the text color
        background_color: Canonical hex of the background color
        passes_aa: Normal text meets AA (4.5:1)
        passes_aaa: Normal text meets AAA (7:1)
        large_text_only: Only large text meets AA (3:1)
    """
    ratio: float
    text_color: str
    background_color: str
    passes_aa: bool
    passes_aaa: bool
    large_text_only: bool = False

    def __post_init__(self) -> None:
        if not 1.0 <= self.ratio <= 21.0:
            raise ValueError(f"Ratio must be 1-21, got {self.ratio}")
        for name, value in (("text_color", self.text_color),
                            ("background_color", self.background_color)):
            if not _HEX_RE.fullmatch(value):
                raise ValueError(f"{name} must be #RRGGBB upper case, got {value!r}")

    def meets(self, requirement: float) -> bool:
        """
        Whether the pair clears a WCAG ratio requirement (7, 4.5 or 3).

        Answered from the pass flags, which were decided on the unrounded
        ratio. ``ratio`` itself is rounded for display and can sit on the
        far side of a threshold, e.g. 2.9953 shown as 3.0.
        """
        if requirement >= 7.0:
            return self.passes_aaa
        if requirement >= 4.5:
            return self.passes_aa
        if requirement >= 3.0:
            return self.passes_aa or self.large_text_only
        return self.ratio >= requirement

    def to_dict(self) -> dict:
        """Serialize to the check response body."""
        return {
            "ratio": self.ratio,
            "textColor": self.text_color,
            "backgroundColor": self.background_color,
            "passesAA": self.passes_aa,
            "passesAAA": self.passes_aaa,
            "largeTextOnly": self.large_text_only,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ContrastCheck:
        """Deserialize from dictionary."""
        return cls(
            ratio=data["ratio"],
            text_color=data["textColor"],
            background_color=data["backgroundColor"],
            passes_aa=data["passesAA"],
            passes_aaa=data["passesAAA"],
            large_text_only=data.get("largeTextOnly", False),
        )
