# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""Tests for alpha explicitness classification."""

import pytest

from recolor.convert.alpha import had_explicit_alpha


class TestExplicitAlpha:
    """Tokens that spell out their alpha channel."""

    @pytest.mark.parametrize(
        "token",
        [
            "rgb(10 20 30 / 50%)",
            "hsl(240 10% 98% / 1)",
            "oklch(62% 0.1 30 / 0.5)",
            "color(display-p3 1 0.5 0 / 0.75)",
            "rgba(10, 20, 30, 0.5)",
            "RGBA(10, 20, 30, 0.5)",
            "hsla(0, 0%, 0%, 1)",
            "rgba(10 20 30)",
            "#abcd",
            "#AABBCCDD",
            "transparent",
            "TransParent",
            "  transparent  ",
        ],
    )
    def test_explicit(self, token):
        assert had_explicit_alpha(token) is True


class TestImplicitAlpha:
    """Tokens whose alpha defaults to opaque."""

    @pytest.mark.parametrize(
        "token",
        [
            "rgb(10 20 30)",
            "hsl(240 10% 98%)",
            "#abc",
            "#aabbcc",
            "red",
            "rebeccapurple",
            "oklch(62% 0.1 30)",
        ],
    )
    def test_implicit(self, token):
        assert had_explicit_alpha(token) is False

    def test_rgb_with_fourth_comma_value_is_not_explicit(self):
        """Only the function name is inspected for legacy comma forms."""
        assert had_explicit_alpha("rgb(10, 20, 30, 0.5)") is False
        assert had_explicit_alpha("hsl(0, 0%, 0%, 0.5)") is False

    def test_hex_with_odd_digit_count_is_not_alpha(self):
        assert had_explicit_alpha("#abcde") is False
