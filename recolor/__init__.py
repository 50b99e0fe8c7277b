# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Recolor -- CSS color notation converter.

Finds color declarations in CSS-like text and rewrites each color into
OKLCH, OKLab, CIELCH, CIELAB, RGB, HSL or hex, leaving everything else in
the text untouched.

Quick start::

    from recolor import ConversionOptions, TargetFormat, convert_text

    result = convert_text(css, ConversionOptions(target_format=TargetFormat.OKLCH))
    result.output         # Rewritten text
    result.error_colors   # Tokens that could not be converted
"""

from __future__ import annotations

__version__ = "1.0.0"

from recolor.convert import convert_region, convert_text
from recolor.schema import (
    ConversionOptions,
    ConversionResult,
    DeclarationMatch,
    Edit,
    TargetFormat,
)

__all__ = [
    # Core API
    "convert_text",
    "convert_region",
    # Types (commonly needed)
    "ConversionOptions",
    "ConversionResult",
    "TargetFormat",
    "DeclarationMatch",
    "Edit",
    # Version
    "__version__",
]
