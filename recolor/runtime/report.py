# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Reports for conversion results.

Turns a ConversionResult into a short human-readable status or a JSON
document. Truncation of long error lists happens here; the result itself
always keeps every failing token.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Sequence

from recolor.schema import ConversionResult

MAX_ERRORS_SHOWN = 80


class ReportFormat(Enum):
    """Output format for reports."""

    TEXT = "text"
    JSON = "json"


def status_of(result: ConversionResult) -> str:
    """
    Classify a result.

    Returns:
        ``converted`` if anything was rewritten, ``no_matches`` if no
        declaration was found, ``no_convertible_matches`` if declarations
        were found but every one failed.
    """
    if result.changed:
        return "converted"
    if result.has_errors:
        return "no_convertible_matches"
    return "no_matches"


def summarize_errors(
    error_colors: Sequence[str],
    max_shown: int = MAX_ERRORS_SHOWN,
) -> str:
    """
    One-line summary of failing tokens.

    Example:
        >>> summarize_errors(["lab(bad)", "#ggg"])
        'Cannot convert 2 color(s). lab(bad), #ggg'
    """
    shown = ", ".join(error_colors[:max_shown])
    return f"Cannot convert {len(error_colors)} color(s). {shown}"


_STATUS_MESSAGES = {
    "converted": "Converted {n} color declaration(s).",
    "no_matches": "No color declarations found.",
    "no_convertible_matches": "Found color declarations, but none could be converted.",
}


def to_report(
    result: ConversionResult,
    *,
    format: ReportFormat = ReportFormat.TEXT,
    max_shown: int = MAX_ERRORS_SHOWN,
) -> str:
    """Serialize a ConversionResult as a report (the rewritten text is omitted).

    Args:
        result: The result to report on.
        format: TEXT for a status line (plus an error summary line when
            tokens failed), JSON for a machine-readable document.
        max_shown: Maximum tokens listed in the TEXT error summary.

    Example (JSON)::

        {
          "status": "converted",
          "edits_applied": 3,
          "error_colors": ["lab(bad)"]
        }
    """
    status = status_of(result)

    if format == ReportFormat.JSON:
        data = {"status": status, **result.to_dict(include_output=False)}
        return json.dumps(data, indent=2)

    lines = [_STATUS_MESSAGES[status].format(n=result.edits_applied)]
    if result.has_errors:
        lines.append(summarize_errors(result.error_colors, max_shown))
    return "\n".join(lines)
