from __future__ import annotations
from typing import Sequence, Tuple, Union

Number = Union[int, float]
RGB = Tuple[int, int, int]
ColorSpec = str
Spectrum = Sequence[ColorSpec]

NUM_CHANNELS = 3
