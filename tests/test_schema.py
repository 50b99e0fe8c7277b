# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""Tests for schema types."""

import dataclasses
import json

import pytest

from recolor.schema import (
    ConversionOptions,
    ConversionResult,
    DeclarationMatch,
    Edit,
    TargetFormat,
)


class TestTargetFormat:

    def test_values(self):
        assert [f.value for f in TargetFormat] == [
            "oklch", "oklab", "lch", "lab", "rgb", "hsl", "hex",
        ]

    def test_parse_case_insensitive(self):
        assert TargetFormat.parse("OKLCH") is TargetFormat.OKLCH
        assert TargetFormat.parse(" hex ") is TargetFormat.HEX
        assert TargetFormat.parse(TargetFormat.LAB) is TargetFormat.LAB

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown target format"):
            TargetFormat.parse("cmyk")

    def test_labels(self):
        assert TargetFormat.OKLCH.label == "oklch()"
        assert TargetFormat.HEX.label == "#rrggbb[aa]"
        assert TargetFormat.LAB.description == "CIELAB"


class TestConversionOptions:

    def test_defaults(self):
        o = ConversionOptions()
        assert o.target_format is TargetFormat.OKLCH
        assert o.precision == 2
        assert o.use_opacity is True
        assert o.had_explicit_alpha is False

    @pytest.mark.parametrize("precision", [-1, 7])
    def test_invalid_precision(self, precision):
        with pytest.raises(ValueError, match="Precision"):
            ConversionOptions(precision=precision)

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="target_format"):
            ConversionOptions(target_format="oklch")

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ConversionOptions().precision = 3

    def test_with_explicit_alpha_copies(self):
        base = ConversionOptions(target_format=TargetFormat.HEX, precision=4)
        merged = base.with_explicit_alpha(True)
        assert merged.had_explicit_alpha is True
        assert merged.target_format is TargetFormat.HEX
        assert merged.precision == 4
        assert base.had_explicit_alpha is False


class TestDeclarationMatch:

    def test_offsets(self):
        m = DeclarationMatch(full_text="--c: red", color_token="red", start=10)
        assert m.end == 18
        assert m.token_start == 15


class TestEdit:

    def test_empty_range_allowed(self):
        assert Edit(3, 3, "x").end == 3


class TestConversionResult:

    def test_flags(self):
        assert not ConversionResult(output="x").changed
        assert not ConversionResult(output="x").has_errors
        r = ConversionResult(output="y", edits_applied=2, error_colors=("lab(bad)",))
        assert r.changed
        assert r.has_errors

    def test_to_dict(self):
        r = ConversionResult(output="y", edits_applied=1, error_colors=("a", "a"))
        assert r.to_dict() == {"output": "y", "edits_applied": 1, "error_colors": ["a", "a"]}
        assert "output" not in r.to_dict(include_output=False)

    def test_json_roundtrip(self):
        r = ConversionResult(output="--c: #fff;", edits_applied=1, error_colors=("x",))
        assert ConversionResult.from_dict(json.loads(r.to_json())) == r
