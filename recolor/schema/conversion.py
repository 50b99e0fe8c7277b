# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Value types for a single text conversion.

Design principles:
- Immutable: All types are frozen dataclasses
- Pure: A conversion reads its inputs and returns a new value, nothing else
- Serializable: Results are JSON-ready for reporting

Offsets:
    Every offset in this module is a Python string index (code points).
    Matching, slicing and splicing all use the same unit, so offsets taken
    from a scan stay valid for the edit that rewrites the same text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum


# =============================================================================
# Target Formats
# =============================================================================


class TargetFormat(Enum):
    """
    CSS color notations a declaration can be rewritten into.

    The value is the CSS function name (or ``hex`` for ``#rrggbb[aa]``).
    """

    OKLCH = "oklch"
    OKLAB = "oklab"
    LCH = "lch"
    LAB = "lab"
    RGB = "rgb"
    HSL = "hsl"
    HEX = "hex"

    @property
    def label(self) -> str:
        """Short display label, as the notation appears in CSS."""
        if self is TargetFormat.HEX:
            return "#rrggbb[aa]"
        return f"{self.value}()"

    @property
    def description(self) -> str:
        """Human-readable description for pickers and help text."""
        return _FORMAT_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: str | TargetFormat) -> TargetFormat:
        """Look up a format by its value, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unknown target format '{value}' (expected one of: {choices})"
            ) from None


_FORMAT_DESCRIPTIONS = {
    TargetFormat.OKLCH: "Perceptual OKLCH",
    TargetFormat.OKLAB: "Perceptual OKLab",
    TargetFormat.LCH: "CIELCH",
    TargetFormat.LAB: "CIELAB",
    TargetFormat.RGB: "RGB functional syntax",
    TargetFormat.HSL: "HSL functional syntax",
    TargetFormat.HEX: "Hex (optionally with alpha)",
}


# =============================================================================
# Options
# =============================================================================

MIN_PRECISION = 0
MAX_PRECISION = 6


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """
    Options for one conversion call.

    Attributes:
        target_format: Notation every converted token is rendered in.
        precision: Decimal digits kept for non-integer components (0-6).
        use_opacity: Keep an explicit ``/ 1`` alpha when the source token
            spelled out its alpha. Alpha below 1 is always written.
        had_explicit_alpha: Whether the token being rendered carried an
            explicit alpha. Computed per token by the orchestrator; callers
            of ``convert_text`` leave it at the default.
    """
    target_format: TargetFormat = TargetFormat.OKLCH
    precision: int = 2
    use_opacity: bool = True
    had_explicit_alpha: bool = False

    def __post_init__(self) -> None:
        """Validate option values."""
        if not isinstance(self.target_format, TargetFormat):
            raise ValueError(
                f"target_format must be a TargetFormat, got {self.target_format!r}"
            )
        if not MIN_PRECISION <= self.precision <= MAX_PRECISION:
            raise ValueError(
                f"Precision must be {MIN_PRECISION}-{MAX_PRECISION}, got {self.precision}"
            )

    def with_explicit_alpha(self, had_explicit_alpha: bool) -> ConversionOptions:
        """Copy of these options with the per-token alpha flag merged in."""
        return replace(self, had_explicit_alpha=had_explicit_alpha)


# =============================================================================
# Scan and Edit Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class DeclarationMatch:
    """
    One ``<property>: <color>`` declaration found in the source text.

    Attributes:
        full_text: The matched text, from the property name through the end
            of the color token. The terminator is not included.
        color_token: The color value. Always a suffix of ``full_text``.
        start: Index in the source text where ``full_text`` begins.
    """
    full_text: str
    color_token: str
    start: int

    @property
    def end(self) -> int:
        """Exclusive end index of the declaration in the source text."""
        return self.start + len(self.full_text)

    @property
    def token_start(self) -> int:
        """Index in the source text where the color token begins."""
        return self.end - len(self.color_token)


@dataclass(frozen=True, slots=True)
class Edit:
    """A replacement of the half-open range ``[start, end)`` of a text."""
    start: int
    end: int
    replacement: str

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Edit start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(
                f"Edit end must be >= start, got [{self.start}, {self.end})"
            )


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    A color expressed in one library color space.

    Attributes:
        space: Color space name (``oklch``, ``srgb``, ``hsl``, ...)
        channels: Component values in the space's native ranges. NaN marks
            an undefined component (e.g. the hue of a gray).
        alpha: Alpha in [0, 1], NaN when undefined.
    """
    space: str
    channels: tuple[float, ...]
    alpha: float


# =============================================================================
# Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    Outcome of converting one block of text.

    Failures never raise; they are listed in ``error_colors`` in the order
    they were met, one entry per failing occurrence (duplicates included).

    Attributes:
        output: The rewritten text (the input itself when nothing changed)
        edits_applied: Number of declarations rewritten
        error_colors: Color tokens that could not be parsed or rendered
    """
    output: str
    edits_applied: int = 0
    error_colors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def changed(self) -> bool:
        """True if at least one declaration was rewritten."""
        return self.edits_applied > 0

    @property
    def has_errors(self) -> bool:
        """True if any matched token failed to convert."""
        return bool(self.error_colors)

    def to_dict(self, include_output: bool = True) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_output: If False, leave the rewritten text out (reports).
        """
        d = {
            "edits_applied": self.edits_applied,
            "error_colors": list(self.error_colors),
        }
        if include_output:
            d["output"] = self.output
        return d

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ConversionResult:
        """Deserialize from dictionary."""
        return cls(
            output=data["output"],
            edits_applied=data.get("edits_applied", 0),
            error_colors=tuple(data.get("error_colors", ())),
        )
