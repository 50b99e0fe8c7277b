# Copyright (c) 2026 Recolor
# SPDX-License-Identifier: MIT

"""
Declaration color matcher.

Finds ``<property>: <color>`` declarations in CSS-like text without parsing
the stylesheet. A declaration is accepted only when a ``;`` or ``}`` follows
the color value (after optional trailing tokens such as ``!important`` or a
comment), which keeps values like ``url(#fff)`` or ``"#fff"`` out.

Color alternatives, tried in order at each position:
1. Named CSS colors (plus ``transparent``)
2. Hex literals with 3, 4, 6 or 8 digits
3. Legacy numeric ``rgb()`` / ``rgba()``
4. Any color function with a flat argument list. Arguments are not
   checked here; the parser rejects what it does not understand.
"""

from __future__ import annotations

import re

from recolor.schema import DeclarationMatch


# =============================================================================
# Grammar
# =============================================================================

NAMED_COLORS: tuple[str, ...] = (
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "green", "greenyellow", "grey", "honeydew", "hotpink",
    "indianred", "indigo", "ivory", "khaki", "lavender", "lavenderblush",
    "lawngreen", "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
    "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "lime", "limegreen", "linen", "magenta", "maroon", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab", "orange",
    "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "purple", "rebeccapurple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna",
    "silver", "skyblue", "slateblue", "slategray", "slategrey", "snow",
    "springgreen", "steelblue", "tan", "teal", "thistle", "tomato",
    "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
    "yellowgreen", "transparent",
)

# Longest first, and a name must end the token: "blueviolet" is never "blue"
_NAMED_COLOR = (
    "(?:"
    + "|".join(sorted(NAMED_COLORS, key=len, reverse=True))
    + r")(?![\w-])"
)

_HEX_COLOR = r"#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})\b"

_RGB_COLOR = (
    r"rgba?\(\s*\d{1,3}(?:\s*,\s*|\s+)\d{1,3}(?:\s*,\s*|\s+)\d{1,3}"
    r"(?:\s*(?:/|,)\s*\d?\.?\d+%?)?\s*\)"
)

_FUNCTION_COLOR = r"(?:rgb|rgba|hsl|hsla|hwb|lab|lch|oklab|oklch|color)\([^)]*\)"

_PROP_NAME = r"(?:--[a-z0-9_-]+|[a-z-]+)"

DECLARATION_RE = re.compile(
    rf"{_PROP_NAME}\s*:\s*"
    rf"({_NAMED_COLOR}|{_HEX_COLOR}|{_RGB_COLOR}|{_FUNCTION_COLOR})"
    r"(?=[^;}]*?[;}])",
    re.IGNORECASE | re.ASCII,
)


# =============================================================================
# Scan
# =============================================================================


def find_declaration_colors(text: str) -> list[DeclarationMatch]:
    """
    Find every color declaration in ``text``.

    Args:
        text: CSS or CSS-like source

    Returns:
        Matches ordered by start offset. Matches never overlap, and each
        ``color_token`` is the tail of its ``full_text``.
    """
    return [
        DeclarationMatch(full_text=m.group(0), color_token=m.group(1), start=m.start())
        for m in DECLARATION_RE.finditer(text)
    ]
