"""
Mapping Builder
===============

Runs the build pipeline once for a loaded dataset:

    entities, milestones
        -> collect_intervals         (events + density intervals)
        -> build_year_grid           (distinct years + current year)
        -> SegmentWeightCalculator   (weighted segments)
        -> normalize_positions       (positions in [margin, 1 - margin])
        -> YearMapping               (immutable lookup table)

With nothing dated to map, the pipeline short-circuits to a linear
identity mapping over the configured fallback range.

Example:
    from chronoscroll.mapping import build_year_mapping

    mapping = build_year_mapping(books, milestones=[], current_year=2025)
    print(mapping.min_year, mapping.max_year)
"""

import datetime
import logging
from typing import Iterable, Optional, Union

from chronoscroll.catalog import MILESTONES
from chronoscroll.config import Settings, settings as default_settings
from chronoscroll.mapping.collector import collect_intervals
from chronoscroll.mapping.grid import build_year_grid
from chronoscroll.mapping.interpolator import YearMapping
from chronoscroll.mapping.normalizer import normalize_positions
from chronoscroll.mapping.weights import SegmentWeightCalculator, WeightParameters
from chronoscroll.models.interval import DatedEntity
from chronoscroll.models.records import BookRecord, Milestone


logger = logging.getLogger(__name__)


EntityInput = Union[DatedEntity, BookRecord]


def _resolve(entity: EntityInput) -> DatedEntity:
    if isinstance(entity, BookRecord):
        return entity.resolve_date()
    return entity


def build_year_mapping(
    entities: Iterable[EntityInput],
    milestones: Optional[Iterable[Milestone]] = None,
    current_year: Optional[int] = None,
    config: Optional[Settings] = None,
) -> YearMapping:
    """
    Build the position <-> year mapping for a dataset.

    Args:
        entities: Resolved date triples, or book records to resolve
        milestones: Milestone records. None uses the canonical catalogue;
            pass an empty list for no milestones.
        current_year: Present-day waypoint. None uses the wall clock.
        config: Settings to read margins and multipliers from. None uses
            the loaded global settings.

    Returns:
        YearMapping

    Raises:
        InvalidIntervalError: If any entity range ends before it starts
    """
    config = config or default_settings

    if milestones is None:
        milestones = MILESTONES
    if current_year is None:
        current_year = datetime.date.today().year

    collected = collect_intervals(
        (_resolve(entity) for entity in entities),
        milestones,
    )

    if collected.is_empty:
        logger.warning(
            f"No dated entities or milestones, using identity mapping "
            f"{config.mapping.fallback_min_year}..{config.mapping.fallback_max_year}"
        )
        return YearMapping.identity(
            config.mapping.fallback_min_year,
            config.mapping.fallback_max_year,
        )

    grid = build_year_grid(collected.events, current_year)

    calculator = SegmentWeightCalculator(WeightParameters.from_config(config.weights))
    segments = calculator.compute(
        grid,
        collected.entity_intervals,
        collected.milestone_intervals,
    )

    positions = normalize_positions(
        [segment.weight for segment in segments],
        margin_start=config.mapping.margin_start,
        margin_end=config.mapping.margin_end,
    )

    mapping = YearMapping(years=grid, positions=positions, segments=tuple(segments))

    logger.info(
        f"Built year mapping: {mapping.min_year}..{mapping.max_year}, "
        f"entities={len(collected.entity_intervals)}, "
        f"milestones={len(collected.milestone_intervals)}, "
        f"undated={collected.undated_count}, waypoints={len(mapping)}"
    )

    return mapping
