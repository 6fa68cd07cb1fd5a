"""
rainbowvis Color Specs
======================

Color specs are strings in one of two forms:

- A 6-digit hex color, optionally prefixed with ``#`` (``"ff8000"``, ``"#FF8000"``)
- A case-insensitive HTML color name from :data:`HTML_COLORS` (``"red"``, ``"Gray"``)

>>> from rainbowvis.colors import parse_color, rgb_to_hex
>>> parse_color("Orange")
(255, 128, 0)
>>> rgb_to_hex(parse_color("#00FF00"))
'00ff00'
"""

from .table import HTML_COLORS, lookup, color_names
from .parse import (
    HEX_COLOR_PATTERN,
    is_hex_color,
    hex_to_rgb,
    rgb_to_hex,
    format_channel,
    parse_color,
)

__all__ = [
    "HTML_COLORS",
    "lookup",
    "color_names",
    "HEX_COLOR_PATTERN",
    "is_hex_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "format_channel",
    "parse_color",
]
