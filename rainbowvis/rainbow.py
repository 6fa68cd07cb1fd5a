"""
Rainbow
=======

Maps numbers in a range to colors along a spectrum of two or more colors.

The range is split into ``len(spectrum) - 1`` equal-width segments, and
segment ``i`` is a :class:`ColorGradient` from ``spectrum[i]`` to
``spectrum[i + 1]``.

>>> rainbow = Rainbow()
>>> rainbow.color_at(0)
'ff0000'
>>> rainbow.set_spectrum(["navy", "white", "#c00000"])
>>> rainbow.set_number_range(-10, 10)
>>> rainbow.color_at(10)
'c00000'
"""

from __future__ import annotations

import math
import warnings
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors.parse import parse_color, rgb_to_hex
from .defaults import DEFAULT_NUMBER_RANGE, DEFAULT_SPECTRUM
from .errors import InvalidRangeError, RainbowError, TooFewColorsError
from .gradients.color_gradient import ColorGradient, validate_range
from .types.color_types import NUM_CHANNELS, RGB, ColorSpec, Number, Spectrum
from .utils.num_utils import as_float


def build_segments(
    spectrum: Sequence[ColorSpec],
    range_min: float,
    range_max: float,
) -> Tuple[ColorGradient, ...]:
    """
    Build the equal-width segments covering [range_min, range_max].

    Raises:
        TooFewColorsError: If the spectrum has fewer than 2 colors
        InvalidColorError: If any color spec cannot be resolved
        InvalidRangeError: If the range is too narrow to split into segments
    """
    if len(spectrum) < 2:
        raise TooFewColorsError(len(spectrum))

    # Resolve every spec first so a bad color is reported before any range error
    for spec in spectrum:
        parse_color(spec)

    count = len(spectrum) - 1
    increment = (range_max - range_min) / count
    bounds = [range_min + increment * i for i in range(count + 1)]
    if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
        raise InvalidRangeError(
            range_min, range_max, f"range is too narrow to split into {count} segments"
        )
    return tuple(
        ColorGradient(spectrum[i], spectrum[i + 1], bounds[i], bounds[i + 1])
        for i in range(count)
    )


class Rainbow:
    """
    Piecewise-linear color scale over a number range.

    Args:
        spectrum: Colors to interpolate between, defaults to
            red, yellow, lime, blue
        number_range: (min, max) of the scale, defaults to (0, 100)

    Raises:
        TooFewColorsError, InvalidColorError, InvalidRangeError: If a
            supplied ``spectrum`` or ``number_range`` is invalid
    """

    __slots__ = ('_range_min', '_range_max', '_spectrum', '_segments')

    def __init__(
        self,
        spectrum: Optional[Spectrum] = None,
        number_range: Optional[Tuple[Number, Number]] = None,
    ) -> None:
        self._range_min, self._range_max = DEFAULT_NUMBER_RANGE
        self._spectrum: Tuple[ColorSpec, ...] = DEFAULT_SPECTRUM
        try:
            self._segments = build_segments(self._spectrum, self._range_min, self._range_max)
        except RainbowError as e:
            raise AssertionError(f"Default rainbow settings are invalid: {e}") from e

        if number_range is not None:
            self.set_number_range(*number_range)
        if spectrum is not None:
            self.set_spectrum(spectrum)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def spectrum(self) -> Tuple[ColorSpec, ...]:
        return self._spectrum

    @property
    def number_range(self) -> Tuple[float, float]:
        return (self._range_min, self._range_max)

    @property
    def segments(self) -> Tuple[ColorGradient, ...]:
        return self._segments

    # ------------------ SETTERS ------------------
    def set_spectrum(self, colors: Spectrum) -> None:
        """
        Replace the spectrum and rebuild every segment.

        Args:
            colors: Sequence of two or more color specs

        Raises:
            TypeError: If ``colors`` is a single string
            TooFewColorsError: If fewer than 2 colors are given
            InvalidColorError: If any color spec cannot be resolved
        """
        if isinstance(colors, str):
            raise TypeError("colors must be a sequence of color specs, not a single string")
        spectrum = tuple(colors)
        segments = build_segments(spectrum, self._range_min, self._range_max)

        if len({segment.start_color for segment in segments} | {segments[-1].end_color}) == 1:
            warnings.warn(
                f"All colors in spectrum {spectrum!r} are identical; every number maps to the same color",
                UserWarning,
                stacklevel=2,
            )

        self._spectrum = spectrum
        self._segments = segments

    def set_number_range(self, minimum: Number, maximum: Number) -> None:
        """
        Set the number range and rebuild every segment over it.

        Raises:
            InvalidRangeError: If ``maximum <= minimum``, the range is not
                finite, or it is too narrow to split into segments
        """
        range_min, range_max = validate_range(minimum, maximum)
        segments = build_segments(self._spectrum, range_min, range_max)
        self._range_min, self._range_max = range_min, range_max
        self._segments = segments

    # ------------------ EVALUATION ------------------
    def _segment_index(self, number: float) -> int:
        # Only the lower bound is clamped here; numbers above the range land in
        # the last segment, which clamps them itself.
        count = len(self._segments)
        width = (self._range_max - self._range_min) / count
        position = (max(number, self._range_min) - self._range_min) / width
        if position >= count:
            return count - 1
        return min(math.floor(position), count - 1)

    def _segment_for(self, number: float) -> ColorGradient:
        if len(self._segments) == 1:
            return self._segments[0]
        return self._segments[self._segment_index(number)]

    def rgb_at(self, number: Number) -> RGB:
        num = as_float(number)
        return self._segment_for(num).rgb_at(num)

    def color_at(self, number: Number) -> str:
        """
        Get the color corresponding to ``number``.

        Args:
            number: Any number; values outside the range map to the
                nearest end color

        Returns:
            6 lowercase hex digits, no ``#`` prefix
        """
        num = as_float(number)
        return self._segment_for(num).color_at(num)

    colour_at = color_at

    def colors_at(self, numbers: Union[Iterable[Number], NDArray]) -> List[str]:
        """
        Vectorized :meth:`color_at`.

        Args:
            numbers: 1D array-like of numbers

        Returns:
            List of hex colors, one per input number
        """
        arr = np.atleast_1d(np.asarray(numbers, dtype=float))
        if arr.ndim != 1:
            raise ValueError("numbers must be 1-dimensional")
        if np.isnan(arr).any():
            raise ValueError("Cannot map NaN to a color")

        count = len(self._segments)
        if count == 1:
            indices = np.zeros(arr.shape, dtype=np.int64)
        else:
            width = (self._range_max - self._range_min) / count
            positions = (np.maximum(arr, self._range_min) - self._range_min) / width
            indices = np.minimum(np.floor(np.minimum(positions, count)), count - 1).astype(np.int64)

        channels = np.empty((arr.shape[0], NUM_CHANNELS), dtype=np.int64)
        for i, segment in enumerate(self._segments):
            mask = indices == i
            if mask.any():
                channels[mask] = segment.channels_at(arr[mask])
        return [rgb_to_hex(tuple(row)) for row in channels.tolist()]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(spectrum={list(self._spectrum)!r}, "
            f"number_range=({self._range_min}, {self._range_max}))"
        )
