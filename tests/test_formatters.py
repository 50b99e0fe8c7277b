# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""Tests for rendering colors in each target format."""

import re

import pytest

from recolor.convert import formatters
from recolor.convert.colorspace import parse_color
from recolor.convert.formatters import format_color
from recolor.errors import UnrenderableColor
from recolor.schema import ConversionOptions, TargetFormat


def render(token, target, precision=2, use_opacity=True, explicit=False):
    options = ConversionOptions(
        target_format=target,
        precision=precision,
        use_opacity=use_opacity,
        had_explicit_alpha=explicit,
    )
    return format_color(parse_color(token), options)


class BrokenColor:

    def space(self):
        return "srgb"

    def convert(self, space):
        raise ValueError("conversion failed")


class TestNumericConventions:
    """Each format writes its components in the agreed units."""

    def test_oklch_lightness_is_percent(self):
        assert render("red", TargetFormat.OKLCH) == "oklch(62.8% 0.26 29.23)"

    def test_oklab_raw(self):
        assert render("red", TargetFormat.OKLAB) == "oklab(0.63 0.22 0.13)"

    def test_lab_raw_cie_units(self):
        assert re.fullmatch(r"lab\(54\.\d+ 80\.\d+ 69\.\d+\)", render("red", TargetFormat.LAB))

    def test_lch_raw(self):
        assert re.fullmatch(r"lch\(54\.\d+ 106\.\d+ 40\.\d+\)", render("red", TargetFormat.LCH))

    def test_rgb_integer_channels(self):
        assert render("red", TargetFormat.RGB) == "rgb(255 0 0)"
        assert render("hsl(240 10% 98%)", TargetFormat.RGB) == "rgb(249 249 250)"

    def test_rgb_channels_clamped(self):
        assert render("color(display-p3 0 1 0)", TargetFormat.RGB) == "rgb(0 255 0)"

    def test_hsl_percentages(self):
        assert render("red", TargetFormat.HSL) == "hsl(0 100% 50%)"

    def test_hex_lowercase(self):
        assert render("#FF8800", TargetFormat.HEX) == "#ff8800"
        assert render("rgb(10 20 30)", TargetFormat.HEX) == "#0a141e"

    def test_precision(self):
        assert render("red", TargetFormat.OKLCH, precision=0) == "oklch(63% 0 29)"
        assert render("red", TargetFormat.OKLCH, precision=3) == "oklch(62.796% 0.258 29.234)"


class TestUndefinedHue:
    """A missing hue renders as 0."""

    def test_none_hue(self):
        assert render("oklch(50% 0.1 none)", TargetFormat.OKLCH) == "oklch(50% 0.1 0)"

    def test_none_hue_in_hsl(self):
        assert render("hsl(none 0% 50%)", TargetFormat.HSL) == "hsl(0 0% 50%)"

    def test_gray_has_finite_output(self):
        out = render("#808080", TargetFormat.OKLCH)
        assert re.fullmatch(r"oklch\([\d.]+% 0 [\d.]+\)", out)


class TestAlphaPolicy:
    """Alpha below 1 is always written; '/ 1' only when explicit and wanted."""

    @pytest.mark.parametrize("use_opacity", [True, False])
    def test_translucent_always_written(self, use_opacity):
        out = render("hsl(240 10% 98% / 0.5)", TargetFormat.RGB, use_opacity=use_opacity)
        assert out == "rgb(249 249 250 / 0.5)"

    def test_opaque_explicit_with_opacity(self):
        out = render("hsl(240 10% 98% / 1)", TargetFormat.RGB, use_opacity=True, explicit=True)
        assert out == "rgb(249 249 250 / 1)"

    def test_opaque_explicit_without_opacity(self):
        out = render("hsl(240 10% 98% / 1)", TargetFormat.RGB, use_opacity=False, explicit=True)
        assert out == "rgb(249 249 250)"

    def test_opaque_implicit_never_written(self):
        out = render("hsl(240 10% 98%)", TargetFormat.OKLCH, use_opacity=True, explicit=False)
        assert "/" not in out

    def test_alpha_uses_precision(self):
        out = render("rgb(0 0 0 / 0.3333)", TargetFormat.OKLAB, precision=2)
        assert out.endswith(" / 0.33)")

    def test_hex_translucent(self):
        assert render("rgba(0, 0, 0, 0.5)", TargetFormat.HEX) == "#00000080"
        assert render("transparent", TargetFormat.HEX, explicit=True) == "#00000000"

    def test_hex_opaque_explicit(self):
        token = "rgba(10, 20, 30, 1)"
        assert render(token, TargetFormat.HEX, use_opacity=True, explicit=True) == "#0a141eff"
        assert render(token, TargetFormat.HEX, use_opacity=False, explicit=True) == "#0a141e"
        assert render(token, TargetFormat.HEX, use_opacity=True, explicit=False) == "#0a141e"

    @pytest.mark.parametrize("target", list(TargetFormat))
    def test_every_format_keeps_translucency(self, target):
        out = render("rgb(10 20 30 / 0.25)", target, use_opacity=False)
        if target is TargetFormat.HEX:
            assert len(out) == 9
        else:
            assert out.endswith(" / 0.25)")


class TestRenderFailure:

    def test_raises_unrenderable(self):
        with pytest.raises(UnrenderableColor, match="oklch"):
            format_color(BrokenColor(), ConversionOptions())

    def test_arithmetic_failure_while_writing(self, monkeypatch):
        def overflow(coords, options):
            raise OverflowError("too large")

        monkeypatch.setitem(formatters._FORMATTERS, TargetFormat.LAB, overflow)
        with pytest.raises(UnrenderableColor, match="lab"):
            render("red", TargetFormat.LAB)


class TestHugeComponents:
    """Components past 1e21 are written in exponent form."""

    def test_lab_lightness(self):
        assert render("lab(1e30 0 0)", TargetFormat.LAB, precision=6) == "lab(1e+30 0 0)"

    def test_hsl_hue(self):
        out = render("hsl(1e30 50% 50%)", TargetFormat.HSL)
        assert re.fullmatch(r"hsl\(\d(\.\d+)?e\+\d+ 50% 50%\)", out)
