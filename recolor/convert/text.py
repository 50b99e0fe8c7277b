# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Text conversion: the single pass that ties the pipeline together.

    text -> matches -> (parsed color, alpha flag) -> replacement -> edits -> text

A conversion is pure. Token failures are collected in the result, never
raised, so one bad value cannot stop the rest of the text from converting.
"""

from __future__ import annotations

import logging

from recolor.convert.alpha import had_explicit_alpha
from recolor.convert.colorspace import parse_color
from recolor.convert.edits import apply_edits, sort_edits
from recolor.convert.formatters import format_color
from recolor.convert.matcher import find_declaration_colors
from recolor.errors import UnparseableToken, UnrenderableColor
from recolor.schema import ConversionOptions, ConversionResult, DeclarationMatch, Edit

logger = logging.getLogger(__name__)


def convert_text(text: str, options: ConversionOptions) -> ConversionResult:
    """
    Rewrite every color declaration in ``text`` into the target format.

    Only the color token of each declaration changes; property names,
    whitespace, ``!important``, comments and terminators are kept verbatim.

    Args:
        text: CSS or CSS-like source
        options: Target format, precision and opacity policy. The
            ``had_explicit_alpha`` field is ignored and recomputed for
            every token.

    Returns:
        ConversionResult with the rewritten text, the number of
        declarations rewritten and the tokens that failed, in order.

    Example:
        >>> from recolor.schema import ConversionOptions, TargetFormat
        >>> convert_text("a { color: #ff0000; }", ConversionOptions(
        ...     target_format=TargetFormat.RGB)).output
        'a { color: rgb(255 0 0); }'
    """
    matches = find_declaration_colors(text)
    if not matches:
        return ConversionResult(output=text)

    errors: list[str] = []
    edits: list[Edit] = []

    for match in matches:
        try:
            converted = _convert_token(match.color_token, options)
        except (UnparseableToken, UnrenderableColor) as exc:
            logger.debug("Skipping %r at %d: %s", match.color_token, match.start, exc)
            errors.append(match.color_token)
            continue
        edits.append(_replace_token(match, converted))

    if not edits:
        return ConversionResult(output=text, error_colors=tuple(errors))

    logger.debug("Applying %d edit(s), %d failure(s)", len(edits), len(errors))
    return ConversionResult(
        output=apply_edits(text, sort_edits(edits)),
        edits_applied=len(edits),
        error_colors=tuple(errors),
    )


def convert_region(
    text: str,
    start: int,
    end: int,
    options: ConversionOptions,
) -> ConversionResult:
    """
    Convert only ``text[start:end]`` and splice it back into ``text``.

    Offsets are clamped to the text. An empty region converts the whole
    text, the same as a command run with no selection.

    Returns:
        ConversionResult whose ``output`` is the full text.
    """
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    if start == end:
        return convert_text(text, options)

    region = convert_text(text[start:end], options)
    if not region.changed:
        return ConversionResult(output=text, error_colors=region.error_colors)
    return ConversionResult(
        output=apply_edits(text, [Edit(start, end, region.output)]),
        edits_applied=region.edits_applied,
        error_colors=region.error_colors,
    )


def _convert_token(token: str, options: ConversionOptions) -> str:
    parsed = parse_color(token)
    if parsed is None:
        raise UnparseableToken(token)
    return format_color(parsed, options.with_explicit_alpha(had_explicit_alpha(token)))


def _replace_token(match: DeclarationMatch, converted: str) -> Edit:
    # The color token is the tail of the match
    prefix = match.full_text[: len(match.full_text) - len(match.color_token)]
    return Edit(start=match.start, end=match.end, replacement=prefix + converted)
