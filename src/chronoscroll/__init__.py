"""
chronoscroll
============

Temporal scroll-mapping engine for scroll-driven historical timelines.

Maps a normalized scroll position in [0, 1] to a calendar year on a
non-uniform scale: long empty gaps compress to a quick scroll, while dense
or short-lived periods stretch to take more scroll distance.

Components:
    - models: Input records, intervals, segments
    - mapping: Interval collection, grid, weights, normalization, lookup
    - catalog: Built-in eras and canonization milestones
    - eras: Era lookup for a year
    - formatting: BC/AD display strings
    - config: YAML/env configuration and logging setup

Example:
    from chronoscroll import build_year_mapping, settings, setup_logging
    from chronoscroll.models import BookRecord

    setup_logging(settings)

    books = [BookRecord.model_validate(raw) for raw in records]
    mapping = build_year_mapping(books)

    year = mapping.scroll_to_year(0.42)
"""

__version__ = "0.1.0"

from chronoscroll.config import Settings, load_config, settings, setup_logging
from chronoscroll.exceptions import (
    ChronoscrollError,
    InvalidIntervalError,
    MappingNotBuiltError,
)
from chronoscroll.mapping import TimelineMapper, YearMapping, build_year_mapping

__all__ = [
    "__version__",
    "Settings",
    "load_config",
    "settings",
    "setup_logging",
    "build_year_mapping",
    "TimelineMapper",
    "YearMapping",
    "ChronoscrollError",
    "InvalidIntervalError",
    "MappingNotBuiltError",
]
