# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""Numeric formatting helpers shared by the renderers."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

JS_FIXED_LIMIT = 1e21

_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")
_ZERO_FRACTION_RE = re.compile(r"\.0+$")


def to_fixed(value: float, precision: int) -> str:
    """
    Fixed-point text with exactly ``precision`` decimal digits.

    Ties on the exact binary value round away from zero, so ``0.5`` gives
    ``"1"`` and ``0.125`` gives ``"0.13"`` at precision 2.

    Magnitudes of ``1e21`` and above are written in exponent form, as
    JavaScript's ``toFixed`` does.
    """
    if not abs(value) < JS_FIXED_LIMIT:
        return _exponent_text(value)
    exact = Decimal(value)
    # Integer digits, one for a carry, then the fraction
    context = Context(prec=max(exact.adjusted(), 0) + 2 + precision)
    quantum = Decimal(1).scaleb(-precision)
    rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return format(rounded, "f")


def _exponent_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return repr(value)


def format_number(value: float, precision: int) -> str:
    """
    Format a number with at most ``precision`` decimal digits.

    Trailing zeros and a dangling decimal point are removed, and a negative
    zero is written as ``0``.

    Examples:
        >>> format_number(62.800000000000004, 2)
        '62.8'
        >>> format_number(-0.0001, 2)
        '0'
    """
    fixed = to_fixed(value, precision)
    if "e" in fixed:
        return fixed
    if precision > 0:
        trimmed = _TRAILING_ZEROS_RE.sub("", fixed)
    else:
        trimmed = _ZERO_FRACTION_RE.sub("", fixed)
    return "0" if trimmed == "-0" else trimmed


def clamp(n: float, lo: float, hi: float) -> float:
    """Clamp ``n`` into ``[lo, hi]``."""
    return min(hi, max(lo, n))


def clamp01(n: float) -> float:
    """Clamp ``n`` into ``[0, 1]``."""
    return clamp(n, 0.0, 1.0)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(x + 0.5)


def to_hex2(n: float) -> str:
    """Two lowercase hex digits for a channel value in 0-255."""
    return f"{int(clamp(round_half_up(n), 0, 255)):02x}"


def finite_or_zero(x: float) -> float:
    """``x`` unchanged if finite, else ``0.0`` (undefined components)."""
    return x if math.isfinite(x) else 0.0
