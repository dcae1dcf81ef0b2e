# Utility functions for ndvec

from .helpers import (
    FLOAT32_MAX, round_to_float32, fits_float32,
    ieee_divide, ieee_remainder, integer_bounds,
)

__all__ = [
    "FLOAT32_MAX", "round_to_float32", "fits_float32",
    "ieee_divide", "ieee_remainder", "integer_bounds",
]
