# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Color parsing and space conversion.

All color science is delegated to ColorAide: parsing of CSS Color Level 4
tokens and conversion between spaces. This module only adapts its objects
to the shapes the renderers consume.

Space conventions (ColorAide):
- oklch / oklab: L in [0, 1]
- lab / lch: CIE L* in [0, 100], D50 white point
- srgb: channels in [0, 1]
- hsl: hue in degrees, saturation and lightness in [0, 1]
- Hues are NaN for achromatic colors
"""

from __future__ import annotations

import logging
from typing import Optional

from coloraide import Color

from recolor.schema import Coordinates, TargetFormat

logger = logging.getLogger(__name__)

ParsedColor = Color

SPACE_FOR_FORMAT = {
    TargetFormat.OKLCH: "oklch",
    TargetFormat.OKLAB: "oklab",
    TargetFormat.LCH: "lch",
    TargetFormat.LAB: "lab",
    TargetFormat.RGB: "srgb",
    TargetFormat.HSL: "hsl",
    TargetFormat.HEX: "srgb",
}


def parse_color(token: str) -> Optional[ParsedColor]:
    """
    Parse a CSS color token.

    Args:
        token: A color value such as ``#fff``, ``rebeccapurple`` or
            ``oklch(62% 0.1 30 / 50%)``

    Returns:
        The parsed color, or None if the token is not a valid color.
    """
    # Only a lowercased copy is parsed; error_colors keeps the source spelling
    try:
        return Color(token.strip().lower())
    except ValueError:
        return None


def to_space(color: ParsedColor, space: str) -> Optional[Coordinates]:
    """
    Express a parsed color in another color space.

    A color already in ``space`` is read as-is, so converting a token to its
    own notation keeps its hue even when the chroma is zero.

    Args:
        color: A color returned by ``parse_color``
        space: ColorAide space name (see ``SPACE_FOR_FORMAT``)

    Returns:
        Coordinates in ``space``, or None if the conversion failed.
    """
    try:
        converted = color if color.space() == space else color.convert(space)
        channels = tuple(float(v) for v in converted.coords())
        alpha = float(converted.alpha())
    except (ValueError, KeyError, ArithmeticError) as exc:
        logger.debug("Conversion of %s to %s failed: %s", color, space, exc)
        return None
    return Coordinates(space=space, channels=channels, alpha=alpha)
