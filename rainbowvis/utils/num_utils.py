import math
import numpy as np
from numpy import ndarray as NDArray


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the fraction rather than adding 0.5, which can round up on its own
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def np_round_half_away_from_zero(values: NDArray) -> NDArray:
    """Vectorized :func:`round_half_away_from_zero`, returns an int64 array."""
    values = np.asarray(values, dtype=float)
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    whole = whole + (magnitude - whole >= 0.5)
    return (np.sign(values) * whole).astype(np.int64)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to the inclusive range [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def as_float(value: float) -> float:
    """
    Convert a number to a Python float for color lookup.

    NumPy scalars such as ``float32`` are widened so the interpolation always
    runs in double precision. Integers too large for a float become +/-inf.

    Raises:
        ValueError: If the value is NaN
    """
    try:
        result = float(value)
    except OverflowError:
        result = math.inf if value > 0 else -math.inf
    if math.isnan(result):
        raise ValueError("Cannot map NaN to a color")
    return result
