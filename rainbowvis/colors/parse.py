"""Conversion between color specs, RGB tuples and hex strings."""

import re
from typing import Any

from ..errors import InvalidColorError
from ..types.color_types import RGB
from .table import lookup

HEX_COLOR_PATTERN = re.compile(r"^#?[0-9a-fA-F]{6}$")


def is_hex_color(spec: str) -> bool:
    return HEX_COLOR_PATTERN.fullmatch(spec) is not None


def hex_to_rgb(spec: str) -> RGB:
    """
    Decode a 6-digit hex color, with or without a leading ``#``.

    ``spec`` must already satisfy :func:`is_hex_color`.
    """
    digits = spec.lstrip("#")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_channel(value: int) -> str:
    """Format one channel as exactly two lowercase hex digits."""
    return f"{value:02x}"


def rgb_to_hex(rgb: RGB) -> str:
    """Encode an (r, g, b) tuple as 6 lowercase hex digits without ``#``."""
    return "".join(format_channel(channel) for channel in rgb)


def parse_color(spec: Any) -> RGB:
    """
    Resolve a color spec to an (r, g, b) tuple.

    Args:
        spec: Hex string (``"ff8000"`` or ``"#FF8000"``) or a named color

    Returns:
        (r, g, b) with each channel in [0, 255]

    Raises:
        InvalidColorError: If ``spec`` is not a string, not a hex color and
            not a known color name
    """
    if not isinstance(spec, str):
        raise InvalidColorError(spec)
    if is_hex_color(spec):
        return hex_to_rgb(spec)
    rgb = lookup(spec)
    if rgb is None:
        raise InvalidColorError(spec)
    return rgb
