# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Conversion core for recolor.

Matches color declarations in text, converts each color token and splices
the results back. All operations are pure and hold no shared state.
"""

from recolor.convert.text import convert_region, convert_text

__all__ = ["convert_text", "convert_region"]
