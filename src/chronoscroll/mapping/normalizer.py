"""
Position Normalizer
===================

Accumulates segment weights into positions and rescales them into
[margin_start, 1 - margin_end].

Formula:
    accumulated[0] = 0
    accumulated[i] = accumulated[i-1] + weight[i-1]
    position[i]    = margin_start + accumulated[i] / total * (1 - margin_start - margin_end)

A single grid year has nothing to accumulate and maps to position 0.0.
"""

from typing import Sequence

import numpy as np


def accumulate_weights(weights: Sequence[float]) -> np.ndarray:
    """
    Running total of segment weights, one entry per grid year.

    Args:
        weights: Non-negative segment weights (len = grid years - 1)

    Returns:
        Array of len(weights) + 1, starting at 0.0

    Raises:
        ValueError: If any weight is negative or not finite
    """
    values = np.asarray(weights, dtype=np.float64)
    if values.size and (not np.all(np.isfinite(values)) or np.any(values < 0)):
        raise ValueError("Segment weights must be finite and non-negative")
    return np.concatenate(([0.0], np.cumsum(values)))


def normalize_positions(
    weights: Sequence[float],
    margin_start: float = 0.02,
    margin_end: float = 0.02,
) -> np.ndarray:
    """
    Convert segment weights into normalized grid positions.

    Args:
        weights: Non-negative segment weights
        margin_start: Position of the first grid year
        margin_end: Distance of the last grid year from 1.0

    Returns:
        Array of positions, one per grid year, non-decreasing

    Raises:
        ValueError: If the margins overlap, or several grid years carry
            zero total weight
    """
    if margin_start < 0 or margin_end < 0 or margin_start + margin_end >= 1.0:
        raise ValueError(
            f"Invalid margins: start={margin_start}, end={margin_end}"
        )

    accumulated = accumulate_weights(weights)
    if accumulated.size == 1:
        return np.zeros(1)

    total = accumulated[-1]
    if total <= 0:
        raise ValueError("Cannot normalize a grid whose segments all have zero weight")

    usable_range = 1.0 - margin_start - margin_end
    return margin_start + (accumulated / total) * usable_range
