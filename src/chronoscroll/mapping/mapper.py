"""
Timeline Mapper
===============

Holder for the current YearMapping of a view.

The view layer keeps one mapper for its lifetime and calls build() on every
dataset (re)load. Each build replaces the held mapping with a new immutable
one; readers that grabbed the previous mapping keep a consistent table.

Example:
    from chronoscroll.mapping import TimelineMapper

    mapper = TimelineMapper()
    mapper.build(books)

    year = mapper.scroll_to_year(progress)
"""

import logging
from typing import Iterable, Optional

from chronoscroll.config import Settings
from chronoscroll.exceptions import MappingNotBuiltError
from chronoscroll.mapping.builder import EntityInput, build_year_mapping
from chronoscroll.mapping.interpolator import YearMapping
from chronoscroll.models.records import Milestone


logger = logging.getLogger(__name__)


class TimelineMapper:
    """
    Builds and holds the mapping for the loaded dataset.

    Attributes:
        config: Settings passed to every build (None = global settings)
        _mapping: Current mapping, None until the first build
    """

    def __init__(self, config: Optional[Settings] = None) -> None:
        """Initialize an empty mapper."""
        self.config = config
        self._mapping: Optional[YearMapping] = None
        self._build_count: int = 0

    def build(
        self,
        entities: Iterable[EntityInput],
        milestones: Optional[Iterable[Milestone]] = None,
        current_year: Optional[int] = None,
    ) -> YearMapping:
        """
        Build a mapping for a freshly loaded dataset and hold it.

        Args:
            entities: Resolved date triples or book records
            milestones: Milestone records (None = canonical catalogue)
            current_year: Present-day waypoint (None = wall clock)

        Returns:
            The new mapping
        """
        mapping = build_year_mapping(
            entities,
            milestones=milestones,
            current_year=current_year,
            config=self.config,
        )
        if self._mapping is not None:
            logger.info(f"Replacing {self._mapping!r} with {mapping!r}")
        self._mapping = mapping
        self._build_count += 1
        return mapping

    @property
    def is_built(self) -> bool:
        return self._mapping is not None

    @property
    def build_count(self) -> int:
        """Number of builds since creation."""
        return self._build_count

    @property
    def mapping(self) -> YearMapping:
        """
        The current mapping.

        Raises:
            MappingNotBuiltError: If build() has not been called
        """
        if self._mapping is None:
            raise MappingNotBuiltError("TimelineMapper queried before build()")
        return self._mapping

    def scroll_to_year(self, position: float) -> int:
        return self.mapping.scroll_to_year(position)

    def year_to_scroll(self, year: float) -> float:
        return self.mapping.year_to_scroll(year)

    def clear(self) -> None:
        """Drop the current mapping (dataset unloaded)."""
        self._mapping = None
        logger.info("TimelineMapper cleared")
