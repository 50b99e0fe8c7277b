# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Schema definitions for color conversion.

All types in this module are immutable (frozen dataclasses).
A conversion never mutates its options; per-token changes produce copies.
"""

from recolor.schema.conversion import (
    MAX_PRECISION,
    MIN_PRECISION,
    ConversionOptions,
    ConversionResult,
    Coordinates,
    DeclarationMatch,
    Edit,
    TargetFormat,
)

__all__ = [
    # Options
    "TargetFormat",
    "ConversionOptions",
    "MIN_PRECISION",
    "MAX_PRECISION",
    # Scan and edit types
    "DeclarationMatch",
    "Edit",
    "Coordinates",
    # Result
    "ConversionResult",
]
