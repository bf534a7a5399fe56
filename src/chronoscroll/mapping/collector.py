"""
Interval Collector
==================

Extracts comparable date ranges from entities and milestones.

Output:
    - events: two boundary events per dated entity and per milestone
    - entity_intervals: ranges used for density queries
    - milestone_intervals: display envelopes used for milestone emphasis

Undated entities (start is None) contribute nothing here. The view layer
may still place them by other means.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from chronoscroll.models.interval import DatedEntity, Event, EventKind, Interval
from chronoscroll.models.records import Milestone


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CollectedIntervals:
    """
    Everything the grid builder and weight calculator need from the inputs.

    Attributes:
        events: Boundary events, grouped entities first then milestones
        entity_intervals: One interval per dated entity
        milestone_intervals: One display envelope per milestone
        undated_count: Entities skipped for lack of a start year
    """

    events: Tuple[Event, ...]
    entity_intervals: Tuple[Interval, ...]
    milestone_intervals: Tuple[Interval, ...]
    undated_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.events


def collect_intervals(
    entities: Iterable[DatedEntity],
    milestones: Iterable[Milestone],
) -> CollectedIntervals:
    """
    Collect boundary events and density intervals.

    Args:
        entities: Resolved date triples
        milestones: Milestone records (display envelope is used)

    Returns:
        CollectedIntervals

    Raises:
        InvalidIntervalError: If any range ends before it starts
    """
    events: List[Event] = []
    entity_intervals: List[Interval] = []
    milestone_intervals: List[Interval] = []
    undated = 0

    for entity in entities:
        interval = entity.interval()
        if interval is None:
            undated += 1
            continue
        events.append(Event(year=interval.start, kind=EventKind.START))
        events.append(Event(year=interval.end, kind=EventKind.END))
        entity_intervals.append(interval)

    for milestone in milestones:
        envelope = milestone.interval
        events.append(Event(year=envelope.start, kind=EventKind.MILESTONE_START))
        events.append(Event(year=envelope.end, kind=EventKind.MILESTONE_END))
        milestone_intervals.append(envelope)

    if undated:
        logger.debug(f"Skipped {undated} undated entities")

    return CollectedIntervals(
        events=tuple(events),
        entity_intervals=tuple(entity_intervals),
        milestone_intervals=tuple(milestone_intervals),
        undated_count=undated,
    )
