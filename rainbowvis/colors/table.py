"""Named HTML colors recognized wherever a color spec is accepted."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..types.color_types import RGB

HTML_COLORS: Mapping[str, RGB] = MappingProxyType({
    "black": (0x00, 0x00, 0x00),
    "navy": (0x00, 0x00, 0x80),
    "blue": (0x00, 0x00, 0xff),
    "green": (0x00, 0x80, 0x00),
    "teal": (0x00, 0x80, 0x80),
    "lime": (0x00, 0xff, 0x00),
    "aqua": (0x00, 0xff, 0xff),
    "maroon": (0x80, 0x00, 0x00),
    "purple": (0x80, 0x00, 0x80),
    "olive": (0x80, 0x80, 0x00),
    "grey": (0x80, 0x80, 0x80),
    "gray": (0x80, 0x80, 0x80),
    "silver": (0xc0, 0xc0, 0xc0),
    "red": (0xff, 0x00, 0x00),
    "fuchsia": (0xff, 0x00, 0xff),
    "orange": (0xff, 0x80, 0x00),
    "yellow": (0xff, 0xff, 0x00),
    "white": (0xff, 0xff, 0xff),
})


def lookup(name: str) -> Optional[RGB]:
    """
    Look up a color by name, ignoring case.

    Args:
        name: Color name such as ``"red"`` or ``"Gray"``

    Returns:
        The (r, g, b) tuple, or None if the name is not in the table
    """
    return HTML_COLORS.get(name.lower())


def color_names() -> Tuple[str, ...]:
    return tuple(sorted(HTML_COLORS))
