"""
Event Timeline Builder
======================

Turns boundary events into the discretization grid: the sorted set of
distinct years, plus the current year as a mandatory waypoint so the
present day is always addressable.
"""

from typing import Iterable, Tuple

from chronoscroll.models.interval import Event


def build_year_grid(events: Iterable[Event], current_year: int) -> Tuple[int, ...]:
    """
    Build the strictly increasing grid of distinct years.

    An empty event list yields a single-year grid. The builder never gets
    that far: it substitutes the fallback identity mapping first.

    Args:
        events: Boundary events (any order, duplicates allowed)
        current_year: Present-day waypoint

    Returns:
        Tuple of distinct years in ascending order
    """
    years = {event.year for event in events}
    years.add(current_year)
    return tuple(sorted(years))
