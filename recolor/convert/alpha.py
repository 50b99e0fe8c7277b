# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Alpha explicitness of a source color token.

A token is alpha-explicit when its alpha channel was written out rather
than left to default to opaque. The renderer uses this to decide whether an
opaque result keeps a ``/ 1`` (or an ``ff`` hex byte).
"""

from __future__ import annotations

import re

_HEX_WITH_ALPHA_RE = re.compile(r"^#(?:[0-9a-fA-F]{4}|[0-9a-fA-F]{8})\b")
_LEGACY_ALPHA_FUNC_RE = re.compile(r"^(?:rgba|hsla)\(", re.IGNORECASE)


def had_explicit_alpha(token: str) -> bool:
    """
    Return True if ``token`` spelled out an alpha channel.

    Rules, first match wins:
    1. Any ``/`` (the Level 4 alpha slash, in any function form)
    2. A legacy alpha-bearing function name: ``rgba(`` or ``hsla(``
    3. A hex literal with 4 or 8 digits
    4. The keyword ``transparent``

    Only the function name is inspected for legacy forms, so
    ``rgb(10, 20, 30, 0.5)`` is not alpha-explicit.
    """
    t = token.strip()

    if "/" in t:
        return True

    if _LEGACY_ALPHA_FUNC_RE.match(t):
        return True

    if _HEX_WITH_ALPHA_RE.match(t):
        return True

    return t.lower() == "transparent"
