# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Exception types.

Token-level failures (``UnparseableToken``, ``UnrenderableColor``) are
recovered by ``convert_text`` and reported through
``ConversionResult.error_colors``; they never escape a conversion call.
"""

from __future__ import annotations


class RecolorError(Exception):
    """Base class for all recolor errors."""


class UnparseableToken(RecolorError):
    """A matched color token is not a color the library understands."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Cannot parse color '{token}'")
        self.token = token


class UnrenderableColor(RecolorError):
    """A parsed color could not be converted to the requested space."""

    def __init__(self, space: str) -> None:
        super().__init__(f"Cannot convert color to {space}")
        self.space = space


class SettingsError(RecolorError):
    """The settings source is unreadable or holds invalid values."""
