"""
rainbowvis - Number to Color Mapping
====================================

Maps numbers in a configurable range to colors by linear interpolation
across a spectrum of two or more colors. Useful for heatmaps, gauges and
charts.

Key Features
------------
- Color specs as 6-digit hex strings (``"ff8000"``, ``"#FF8000"``) or HTML color names
- Any number of spectrum colors, spread evenly over the range
- Out-of-range numbers clamp to the end colors
- Vectorized evaluation of many numbers at once with NumPy

Quick Start
-----------
>>> from rainbowvis import Rainbow
>>>
>>> rainbow = Rainbow()
>>> rainbow.color_at(0)
'ff0000'
>>> rainbow.set_spectrum(["red", "blue"])
>>> rainbow.color_at(50)
'800080'
>>> rainbow.set_number_range(-1.0, 1.0)
>>> rainbow.colors_at([-1.0, 0.0, 1.0])
['ff0000', '800080', '0000ff']
"""

from .rainbow import Rainbow, build_segments
from .gradients.color_gradient import ColorGradient
from .colors import HTML_COLORS, lookup, color_names, parse_color, rgb_to_hex, hex_to_rgb, is_hex_color
from .errors import RainbowError, InvalidColorError, InvalidRangeError, TooFewColorsError

__version__ = "1.0.0"

__all__ = [
    "Rainbow",
    "build_segments",
    "ColorGradient",
    # colors
    "HTML_COLORS",
    "lookup",
    "color_names",
    "parse_color",
    "rgb_to_hex",
    "hex_to_rgb",
    "is_hex_color",
    # errors
    "RainbowError",
    "InvalidColorError",
    "InvalidRangeError",
    "TooFewColorsError",
]
