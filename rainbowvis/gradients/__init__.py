from .color_gradient import ColorGradient, validate_range

__all__ = ["ColorGradient", "validate_range"]
