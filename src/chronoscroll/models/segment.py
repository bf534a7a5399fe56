"""
Segment Models
==============

Data models for the weighted grid produced during a mapping build.

These are diagnostic records: the interpolator only needs the final
positions, but segments explain why each span got the scroll share it did.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Emphasis(str, Enum):
    """
    Which multiplier was applied to a segment.

    Exactly one applies per segment. Entity density takes precedence over
    milestone emphasis.

    Attributes:
        NONE: Empty gap, square-root compression only
        DENSITY: At least one entity active at the midpoint
        MILESTONE: No entity active, at least one milestone envelope active
    """

    NONE = "NONE"
    DENSITY = "DENSITY"
    MILESTONE = "MILESTONE"


@dataclass(frozen=True, slots=True)
class Segment:
    """
    Span between two consecutive grid years.

    Attributes:
        start_year: Earlier grid year
        end_year: Later grid year
        midpoint: Year sampled for activity
        active_entities: Entity intervals covering the midpoint
        active_milestones: Milestone envelopes covering the midpoint
        shortest_duration: Duration of the shortest active entity, if any
        emphasis: Which multiplier was applied
        multiplier: Combined multiplier (1.0 for NONE)
        weight: sqrt(gap) * multiplier
    """

    start_year: int
    end_year: int
    midpoint: int
    active_entities: int
    active_milestones: int
    shortest_duration: Optional[int]
    emphasis: Emphasis
    multiplier: float
    weight: float

    @property
    def gap(self) -> int:
        return self.end_year - self.start_year

    def __repr__(self) -> str:
        return (
            f"Segment({self.start_year}..{self.end_year}, "
            f"{self.emphasis.value}, x{self.multiplier:.2f}, "
            f"w={self.weight:.3f})"
        )

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "start_year": self.start_year,
            "end_year": self.end_year,
            "midpoint": self.midpoint,
            "active_entities": self.active_entities,
            "active_milestones": self.active_milestones,
            "shortest_duration": self.shortest_duration,
            "emphasis": self.emphasis.value,
            "multiplier": round(self.multiplier, 4),
            "weight": round(self.weight, 4),
        }


@dataclass(frozen=True, slots=True)
class Waypoint:
    """A (year, normalized position) pair in the lookup table."""

    year: int
    position: float
