# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Index-based text splicing.

Edits are applied one after another on the progressively rewritten text.
Applying them from the highest start offset down keeps every offset that is
still pending valid, because a splice only shifts text to its right.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from recolor.schema import Edit


def sort_edits(edits: Iterable[Edit]) -> list[Edit]:
    """Order edits by descending start offset, the order ``apply_edits`` expects."""
    return sorted(edits, key=lambda e: e.start, reverse=True)


def apply_edits(text: str, edits: Sequence[Edit]) -> str:
    """
    Apply ``edits`` to ``text`` in the given order.

    The edits must be sorted by descending start (see ``sort_edits``) and
    must not overlap. Neither is checked: out-of-order or overlapping edits
    produce garbled text rather than an error.
    """
    out = text
    for e in edits:
        out = out[: e.start] + e.replacement + out[e.end :]
    return out
