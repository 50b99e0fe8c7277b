# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Render parsed colors as CSS color strings.

Numeric conventions per target:
- oklch: lightness as a percentage, chroma and hue raw
- oklab, lab, lch: components raw, in the library's native units
- rgb: integer channels 0-255, clamped before scaling
- hsl: hue raw, saturation and lightness as clamped percentages
- hex: lowercase ``#rrggbb`` with an optional alpha byte

Alpha policy (shared by every target):
- alpha < 1 is always written, dropping it would change the color
- alpha == 1 is written only when ``use_opacity`` is set and the source
  token carried an explicit alpha
"""

from __future__ import annotations

import math
from typing import Callable

from recolor.convert.colorspace import SPACE_FOR_FORMAT, ParsedColor, to_space
from recolor.convert.numbers import (
    clamp01,
    finite_or_zero,
    format_number,
    round_half_up,
    to_hex2,
)
from recolor.errors import UnrenderableColor
from recolor.schema import ConversionOptions, Coordinates, TargetFormat


def format_color(color: ParsedColor, options: ConversionOptions) -> str:
    """
    Render ``color`` in ``options.target_format``.

    Raises:
        UnrenderableColor: If the color cannot be converted to the
            target's color space or its components cannot be written.
    """
    space = SPACE_FOR_FORMAT[options.target_format]
    coords = to_space(color, space)
    if coords is None:
        raise UnrenderableColor(space)
    try:
        return _FORMATTERS[options.target_format](coords, options)
    except (ArithmeticError, ValueError) as exc:
        raise UnrenderableColor(space) from exc


def _alpha(coords: Coordinates) -> float:
    # Undefined alpha means opaque
    return 1.0 if math.isnan(coords.alpha) else coords.alpha


def _include_alpha(alpha: float, options: ConversionOptions) -> bool:
    if alpha < 1:
        return True
    return options.use_opacity and options.had_explicit_alpha


def _alpha_suffix(alpha: float, options: ConversionOptions) -> str:
    if not _include_alpha(alpha, options):
        return ""
    return f" / {format_number(alpha, options.precision)}"


def _channels(coords: Coordinates) -> list[float]:
    return [finite_or_zero(v) for v in coords.channels]


def _rgb255(coords: Coordinates) -> list[int]:
    return [round_half_up(clamp01(v) * 255) for v in _channels(coords)]


def _format_oklch(coords: Coordinates, options: ConversionOptions) -> str:
    l, c, h = _channels(coords)
    p = options.precision
    return (
        f"oklch({format_number(l * 100, p)}% {format_number(c, p)} "
        f"{format_number(h, p)}{_alpha_suffix(_alpha(coords), options)})"
    )


def _format_raw(name: str) -> Callable[[Coordinates, ConversionOptions], str]:
    """Formatter writing three raw components: oklab, lab and lch."""

    def formatter(coords: Coordinates, options: ConversionOptions) -> str:
        body = " ".join(format_number(v, options.precision) for v in _channels(coords))
        return f"{name}({body}{_alpha_suffix(_alpha(coords), options)})"

    return formatter


def _format_rgb(coords: Coordinates, options: ConversionOptions) -> str:
    r, g, b = _rgb255(coords)
    return f"rgb({r} {g} {b}{_alpha_suffix(_alpha(coords), options)})"


def _format_hsl(coords: Coordinates, options: ConversionOptions) -> str:
    h, s, l = _channels(coords)
    p = options.precision
    return (
        f"hsl({format_number(h, p)} {format_number(clamp01(s) * 100, p)}% "
        f"{format_number(clamp01(l) * 100, p)}%{_alpha_suffix(_alpha(coords), options)})"
    )


def _format_hex(coords: Coordinates, options: ConversionOptions) -> str:
    digits = "".join(to_hex2(v) for v in _rgb255(coords))
    alpha = _alpha(coords)
    if _include_alpha(alpha, options):
        digits += to_hex2(clamp01(alpha) * 255)
    return f"#{digits}"


_FORMATTERS: dict[TargetFormat, Callable[[Coordinates, ConversionOptions], str]] = {
    TargetFormat.OKLCH: _format_oklch,
    TargetFormat.OKLAB: _format_raw("oklab"),
    TargetFormat.LCH: _format_raw("lch"),
    TargetFormat.LAB: _format_raw("lab"),
    TargetFormat.RGB: _format_rgb,
    TargetFormat.HSL: _format_hsl,
    TargetFormat.HEX: _format_hex,
}
