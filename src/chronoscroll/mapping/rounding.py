"""Rounding shared by the weight calculator and the interpolator."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))
