# No dependencies
from typing import Tuple

DEFAULT_NUMBER_RANGE: Tuple[float, float] = (0.0, 100.0)
DEFAULT_SPECTRUM: Tuple[str, ...] = ("red", "yellow", "lime", "blue")

# Endpoints of a ColorGradient that has not been given colors yet
DEFAULT_GRADIENT_START = "ff0000"
DEFAULT_GRADIENT_END = "0000ff"
