"""
Segment Weight Calculator
=========================

Assigns each span between consecutive grid years the amount of scroll
distance it should consume, before normalization.

Algorithm (per segment prev_year -> year):
    1. Gap compression:   weight = sqrt(|year - prev_year|)
    2. Midpoint sampling: mid = round((prev_year + year) / 2), count entity
       intervals and milestone envelopes with start <= mid <= end
    3. Density emphasis (>= 1 entity active):
           multiplier = density_base + density_per_entity * count
       and, if the shortest active entity lasts < short_duration_threshold:
           multiplier *= max(1, duration_bonus_max - duration / duration_bonus_divisor)
    4. Milestone emphasis (no entity active, >= 1 milestone active):
           multiplier = milestone_base + milestone_per_entity * count
    5. weight *= multiplier

Density and milestone emphasis are mutually exclusive: entities win.

Defaults:
    density_base=4, density_per_entity=1.5, short_duration_threshold=100,
    duration_bonus_max=4, duration_bonus_divisor=33, milestone_base=40,
    milestone_per_entity=20

These are tuned by eye against the rendered timeline. They have no
derivation; keep them as configuration.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from chronoscroll.config import WeightConfig
from chronoscroll.mapping.rounding import round_half_up
from chronoscroll.models.interval import Interval
from chronoscroll.models.segment import Emphasis, Segment


logger = logging.getLogger(__name__)


@dataclass
class WeightParameters:
    """
    Multipliers for segment weighting.

    Loaded from configuration file.
    """

    # Entity density
    density_base: float = 4.0
    density_per_entity: float = 1.5

    # Short-duration bonus
    short_duration_threshold: float = 100
    duration_bonus_max: float = 4.0
    duration_bonus_divisor: float = 33.0

    # Milestone emphasis
    milestone_base: float = 40.0
    milestone_per_entity: float = 20.0

    @classmethod
    def from_config(cls, config: WeightConfig) -> "WeightParameters":
        """Build parameters from the weights section of Settings."""
        return cls(
            density_base=config.density_base,
            density_per_entity=config.density_per_entity,
            short_duration_threshold=config.short_duration_threshold,
            duration_bonus_max=config.duration_bonus_max,
            duration_bonus_divisor=config.duration_bonus_divisor,
            milestone_base=config.milestone_base,
            milestone_per_entity=config.milestone_per_entity,
        )


def _as_bounds(intervals: Sequence[Interval]) -> Tuple[np.ndarray, np.ndarray]:
    starts = np.array([i.start for i in intervals], dtype=np.float64)
    ends = np.array([i.end for i in intervals], dtype=np.float64)
    return starts, ends


def _active_mask(mids: np.ndarray, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Boolean (segments x intervals) matrix of start <= mid <= end."""
    return (starts[None, :] <= mids[:, None]) & (mids[:, None] <= ends[None, :])


class SegmentWeightCalculator:
    """
    Computes weighted segments over a year grid.

    Attributes:
        parameters: Multipliers and thresholds

    Example:
        calculator = SegmentWeightCalculator(WeightParameters())
        segments = calculator.compute(grid, entity_intervals, milestone_intervals)
        weights = [s.weight for s in segments]
    """

    def __init__(self, parameters: Optional[WeightParameters] = None) -> None:
        """
        Initialize the calculator.

        Args:
            parameters: Multipliers; defaults to the tuned values
        """
        self.parameters = parameters or WeightParameters()

    def duration_bonus(self, shortest_duration: float) -> float:
        """
        Extra multiplier for short-lived entities.

        Returns 1.0 at or above the threshold. Below it, grows linearly as
        duration shrinks, reaching duration_bonus_max at zero.
        """
        p = self.parameters
        if shortest_duration >= p.short_duration_threshold:
            return 1.0
        return max(1.0, p.duration_bonus_max - shortest_duration / p.duration_bonus_divisor)

    def multiplier(
        self,
        active_entities: int,
        shortest_duration: Optional[float],
        active_milestones: int,
    ) -> Tuple[Emphasis, float]:
        """
        Pick the emphasis and multiplier for one segment.

        Args:
            active_entities: Entity intervals covering the midpoint
            shortest_duration: Shortest active entity duration (None if none)
            active_milestones: Milestone envelopes covering the midpoint

        Returns:
            Tuple of (emphasis, multiplier)
        """
        p = self.parameters

        if active_entities > 0:
            factor = p.density_base + p.density_per_entity * active_entities
            if shortest_duration is not None:
                factor *= self.duration_bonus(shortest_duration)
            return Emphasis.DENSITY, factor

        if active_milestones > 0:
            return Emphasis.MILESTONE, p.milestone_base + p.milestone_per_entity * active_milestones

        return Emphasis.NONE, 1.0

    def compute(
        self,
        grid: Sequence[int],
        entity_intervals: Sequence[Interval],
        milestone_intervals: Sequence[Interval],
    ) -> List[Segment]:
        """
        Weight every segment of the grid.

        Args:
            grid: Strictly increasing grid years
            entity_intervals: Entity ranges for density
            milestone_intervals: Milestone display envelopes

        Returns:
            len(grid) - 1 segments in grid order
        """
        if len(grid) < 2:
            return []

        prev_years = grid[:-1]
        years = grid[1:]
        mids = np.array(
            [round_half_up((a + b) / 2) for a, b in zip(prev_years, years)],
            dtype=np.float64,
        )

        entity_starts, entity_ends = _as_bounds(entity_intervals)
        entity_mask = _active_mask(mids, entity_starts, entity_ends)
        entity_counts = entity_mask.sum(axis=1)
        durations = entity_ends - entity_starts
        shortest = np.min(
            np.where(entity_mask, durations[None, :], np.inf),
            axis=1,
            initial=np.inf,
        )

        milestone_starts, milestone_ends = _as_bounds(milestone_intervals)
        milestone_counts = _active_mask(mids, milestone_starts, milestone_ends).sum(axis=1)

        segments: List[Segment] = []
        for i, (prev_year, year) in enumerate(zip(prev_years, years)):
            count = int(entity_counts[i])
            shortest_duration = int(shortest[i]) if count > 0 else None
            milestone_count = int(milestone_counts[i])

            emphasis, factor = self.multiplier(count, shortest_duration, milestone_count)
            weight = math.sqrt(abs(year - prev_year)) * factor

            segment = Segment(
                start_year=prev_year,
                end_year=year,
                midpoint=int(mids[i]),
                active_entities=count,
                active_milestones=milestone_count,
                shortest_duration=shortest_duration,
                emphasis=emphasis,
                multiplier=factor,
                weight=weight,
            )
            logger.debug(f"{segment!r}")
            segments.append(segment)

        return segments
