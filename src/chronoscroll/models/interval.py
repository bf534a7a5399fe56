"""
Interval Models
===============

Narrow value types the mapping engine reads from its inputs.

Core Concepts:
    - Interval: closed year range [start, end] during which something is active
    - DatedEntity: an already-resolved date triple for one source record
    - Event: a transient (year, kind) boundary marker used to build the grid

Years are proleptic integers: negative for BC, positive for AD. The engine
does not special-case year 0.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from chronoscroll.exceptions import InvalidIntervalError


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Closed year range.

    Attributes:
        start: First active year
        end: Last active year (inclusive, >= start)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.end < self.start:
            raise InvalidIntervalError(
                f"Interval ends before it starts: start={self.start}, end={self.end}"
            )

    @property
    def duration(self) -> int:
        """Length in years (0 for a single-year interval)."""
        return self.end - self.start

    def contains(self, year: float) -> bool:
        """True if year falls inside the closed range."""
        return self.start <= year <= self.end


@dataclass(frozen=True, slots=True)
class DatedEntity:
    """
    Resolved date range of one source record.

    The record itself (names, images, descriptions) stays with the caller;
    only the fields below are ever read by the engine.

    Attributes:
        id: Stable identifier of the source record
        start: First year, or None if the record is undated
        end: Last year, or None for an open range
        is_writing_date: True when the range is the writing date fallback
    """

    id: str
    start: Optional[int]
    end: Optional[int]
    is_writing_date: bool = False

    @property
    def is_dated(self) -> bool:
        return self.start is not None

    def interval(self) -> Optional[Interval]:
        """
        Build the density interval for this entity.

        Returns:
            Interval, or None if the entity is undated. A missing end
            collapses to a single-year interval.

        A single-year interval adds waypoints to the grid but is active
        only in a segment whose rounded midpoint lands on that year. That
        happens for a one-year segment ending there and never otherwise,
        so an open-ended record usually gets no density emphasis and no
        short-duration bonus.

        Raises:
            InvalidIntervalError: If end < start
        """
        if self.start is None:
            return None
        end = self.end if self.end is not None else self.start
        return Interval(start=self.start, end=end)


class EventKind(str, Enum):
    """
    Kind of interval boundary.

    Attributes:
        START: Entity range begins
        END: Entity range ends
        MILESTONE_START: Milestone display envelope begins
        MILESTONE_END: Milestone display envelope ends
    """

    START = "start"
    END = "end"
    MILESTONE_START = "milestone-start"
    MILESTONE_END = "milestone-end"


@dataclass(frozen=True, slots=True)
class Event:
    """A boundary year and what kind of boundary it is."""

    year: int
    kind: EventKind
