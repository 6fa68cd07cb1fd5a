from .num_utils import (
    round_half_away_from_zero,
    np_round_half_away_from_zero,
    clamp,
    as_float,
)

__all__ = [
    "round_half_away_from_zero",
    "np_round_half_away_from_zero",
    "clamp",
    "as_float",
]
