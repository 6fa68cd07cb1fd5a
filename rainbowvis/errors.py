"""Exceptions raised for invalid colors, ranges and spectra."""

from __future__ import annotations
from typing import Any, Optional

from .types.color_types import Number


class RainbowError(ValueError):
    """Base class for all rainbowvis input errors."""


class InvalidColorError(RainbowError):
    """A color spec is neither a 6-digit hex string nor a known color name."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        super().__init__(f"Invalid color: {spec!r}")


class InvalidRangeError(RainbowError):
    """A number range whose maximum is not strictly greater than its minimum."""

    def __init__(self, minimum: Number, maximum: Number, reason: Optional[str] = None) -> None:
        self.minimum = minimum
        self.maximum = maximum
        if reason is None:
            reason = f"max ({maximum}) must be greater than min ({minimum})"
        super().__init__(f"Invalid number range ({minimum}, {maximum}): {reason}")


class TooFewColorsError(RainbowError):
    """A spectrum with fewer than two colors."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"A spectrum needs at least 2 colors, got {count}")
