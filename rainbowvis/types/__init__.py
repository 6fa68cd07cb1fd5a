from .color_types import Number, RGB, ColorSpec, Spectrum, NUM_CHANNELS

__all__ = ["Number", "RGB", "ColorSpec", "Spectrum", "NUM_CHANNELS"]
