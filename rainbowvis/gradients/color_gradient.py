from __future__ import annotations

import math
from typing import Iterable, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.parse import parse_color, rgb_to_hex
from ..defaults import DEFAULT_GRADIENT_END, DEFAULT_GRADIENT_START, DEFAULT_NUMBER_RANGE
from ..errors import InvalidRangeError
from ..types.color_types import RGB, ColorSpec, Number
from ..utils.num_utils import (
    as_float,
    clamp,
    np_round_half_away_from_zero,
    round_half_away_from_zero,
)


def validate_range(minimum: Number, maximum: Number) -> Tuple[float, float]:
    """
    Return the range as floats.

    Raises:
        InvalidRangeError: Unless max > min and both bounds and their
            difference are finite floats
    """
    # `not >` also rejects NaN bounds
    if not maximum > minimum:
        raise InvalidRangeError(minimum, maximum)
    try:
        range_min, range_max = float(minimum), float(maximum)
    except OverflowError:
        raise InvalidRangeError(minimum, maximum, "range is not representable as floats") from None
    if not (math.isfinite(range_min) and math.isfinite(range_max) and math.isfinite(range_max - range_min)):
        raise InvalidRangeError(minimum, maximum, "range is not representable as floats")
    return range_min, range_max


class ColorGradient:
    """
    Linear interpolation between two RGB colors over a number range.

    Numbers outside the range are clamped to it, so ``color_at`` always
    returns a color between ``start_color`` and ``end_color``.

    Each of the three channels is interpolated independently as::

        start + (end - start) * (n - range_min) / (range_max - range_min)

    and rounded half away from zero.
    """

    __slots__ = ('_start_color', '_end_color', '_range_min', '_range_max')

    def __init__(
        self,
        start: ColorSpec = DEFAULT_GRADIENT_START,
        end: ColorSpec = DEFAULT_GRADIENT_END,
        range_min: Number = DEFAULT_NUMBER_RANGE[0],
        range_max: Number = DEFAULT_NUMBER_RANGE[1],
    ) -> None:
        self.set_gradient(start, end)
        self.set_range(range_min, range_max)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def start_color(self) -> RGB:
        return self._start_color

    @property
    def end_color(self) -> RGB:
        return self._end_color

    @property
    def range_min(self) -> float:
        return self._range_min

    @property
    def range_max(self) -> float:
        return self._range_max

    # ------------------ SETTERS ------------------
    def set_gradient(self, start: ColorSpec, end: ColorSpec) -> None:
        """
        Set both endpoint colors.

        Raises:
            InvalidColorError: If either spec cannot be resolved. Neither
                endpoint is changed in that case.
        """
        start_color = parse_color(start)
        end_color = parse_color(end)
        self._start_color = start_color
        self._end_color = end_color

    def set_range(self, minimum: Number, maximum: Number) -> None:
        """
        Set the number range the gradient is stretched over.

        Raises:
            InvalidRangeError: If ``maximum <= minimum`` or the range is not finite
        """
        self._range_min, self._range_max = validate_range(minimum, maximum)

    # ------------------ EVALUATION ------------------
    def _channel_at(self, number: float, channel_start: int, channel_end: int) -> int:
        span = self._range_max - self._range_min
        value = channel_start + (channel_end - channel_start) * (number - self._range_min) / span
        return round_half_away_from_zero(value)

    def rgb_at(self, number: Number) -> RGB:
        """Return the interpolated (r, g, b) tuple for ``number``."""
        num = clamp(as_float(number), self._range_min, self._range_max)
        r, g, b = (
            self._channel_at(num, s, e)
            for s, e in zip(self._start_color, self._end_color)
        )
        return (r, g, b)

    def color_at(self, number: Number) -> str:
        """
        Get the color corresponding to ``number``.

        Returns:
            6 lowercase hex digits, no ``#`` prefix
        """
        return rgb_to_hex(self.rgb_at(number))

    colour_at = color_at

    def channels_at(self, numbers: Union[Iterable[Number], NDArray]) -> NDArray:
        """
        Vectorized :meth:`rgb_at`.

        Args:
            numbers: 1D array-like of numbers

        Returns:
            int64 array of shape (N, 3), one row per input number
        """
        arr = np.atleast_1d(np.asarray(numbers, dtype=float))
        if arr.ndim != 1:
            raise ValueError("numbers must be 1-dimensional")
        if np.isnan(arr).any():
            raise ValueError("Cannot map NaN to a color")

        clamped = np.clip(arr, self._range_min, self._range_max)
        start = np.array(self._start_color, dtype=float)
        end = np.array(self._end_color, dtype=float)
        span = self._range_max - self._range_min
        values = start + (end - start) * (clamped - self._range_min)[:, None] / span
        return np_round_half_away_from_zero(values)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({rgb_to_hex(self._start_color)!r}, "
            f"{rgb_to_hex(self._end_color)!r}, {self._range_min}, {self._range_max})"
        )
