"""
Bidirectional Interpolator
==========================

The immutable mapping result: a table of (year, position) waypoints and
the two lookups over it.

Queries:
    scroll_to_year(position): clamp to [0, 1], bracket by position,
        interpolate linearly, round half-up to a whole year
    year_to_scroll(year): exact grid match if possible, else bracket by
        year and interpolate linearly

Both sorted views (by position, by year) are built once at construction.
Lookups are binary searches over them and give the same results as a
linear scan for the first bracketing pair.

Out-of-range inputs, infinities included, clamp to the table extremes.
Only NaN is rejected.

Example:
    mapping = build_year_mapping(entities)

    year = mapping.scroll_to_year(0.5)
    position = mapping.year_to_scroll(-586)
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np

from chronoscroll.mapping.rounding import round_half_up
from chronoscroll.models.segment import Segment, Waypoint


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.array(values, copy=True)
    values.setflags(write=False)
    return values


def _require_number(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{name} must be a number, got NaN")
    return value


@dataclass(frozen=True, eq=False)
class YearMapping:
    """
    Position <-> year lookup table for one dataset.

    Constructed once per dataset load and never mutated. Safe to share
    between any number of readers.

    Attributes:
        years: Grid years, strictly increasing (read-only array)
        positions: Normalized position per grid year (read-only array)
        segments: Weighted segments that produced the positions
        is_fallback: True for the identity mapping used for empty datasets
    """

    years: np.ndarray
    positions: np.ndarray
    segments: Tuple[Segment, ...] = ()
    is_fallback: bool = False

    # Sorted views, built in __post_init__
    _position_keys: np.ndarray = field(init=False, repr=False)
    _position_years: np.ndarray = field(init=False, repr=False)
    _year_keys: np.ndarray = field(init=False, repr=False)
    _year_positions: np.ndarray = field(init=False, repr=False)
    _exact: Dict[int, float] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the table and build the sorted views."""
        raw_years = np.asarray(self.years)
        if raw_years.dtype.kind == "f" and np.any(np.mod(raw_years, 1) != 0):
            raise ValueError("Grid years must be whole numbers")
        years = raw_years.astype(np.int64)
        positions = np.asarray(self.positions, dtype=np.float64)

        if years.ndim != 1 or years.size == 0:
            raise ValueError("Mapping table needs at least one grid year")
        if years.shape != positions.shape:
            raise ValueError(
                f"Table size mismatch: {years.size} years, {positions.size} positions"
            )
        if np.any(np.diff(years) <= 0):
            raise ValueError("Grid years must be strictly increasing")
        if np.any(np.diff(positions) < 0):
            raise ValueError("Positions must not decrease with year")

        # Stable sorts: equal positions keep grid order
        by_position = np.argsort(positions, kind="stable")
        by_year = np.argsort(years, kind="stable")

        object.__setattr__(self, "years", _frozen(years))
        object.__setattr__(self, "positions", _frozen(positions))
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "_position_keys", _frozen(positions[by_position]))
        object.__setattr__(self, "_position_years", _frozen(years[by_position]))
        object.__setattr__(self, "_year_keys", _frozen(years[by_year]))
        object.__setattr__(self, "_year_positions", _frozen(positions[by_year]))
        object.__setattr__(
            self,
            "_exact",
            {int(y): float(p) for y, p in zip(years, positions)},
        )

    @classmethod
    def identity(cls, min_year: int, max_year: int) -> "YearMapping":
        """
        Linear mapping of [0, 1] onto [min_year, max_year].

        Used when there is nothing dated to map.
        """
        return cls(
            years=np.array([min_year, max_year]),
            positions=np.array([0.0, 1.0]),
            is_fallback=True,
        )

    # -------------------------------------------------------------------------
    # Table access
    # -------------------------------------------------------------------------

    @property
    def min_year(self) -> int:
        return int(self._year_keys[0])

    @property
    def max_year(self) -> int:
        return int(self._year_keys[-1])

    @property
    def waypoints(self) -> Tuple[Waypoint, ...]:
        """Table rows in year order."""
        return tuple(
            Waypoint(year=int(y), position=float(p))
            for y, p in zip(self._year_keys, self._year_positions)
        )

    def __len__(self) -> int:
        return int(self.years.size)

    def position_of(self, year: int) -> Optional[float]:
        """Stored position of a grid year, or None if year is not on the grid."""
        return self._exact.get(year)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def scroll_to_year(self, position: float) -> int:
        """
        Convert a normalized scroll position to a year.

        Args:
            position: Scroll progress; clamped to [0, 1]

        Returns:
            Interpolated year, rounded half-up

        Raises:
            ValueError: If position is NaN
        """
        position = _require_number("position", position)
        position = max(0.0, min(1.0, position))

        keys = self._position_keys
        years = self._position_years

        if position <= keys[0]:
            return int(years[0])
        if position >= keys[-1]:
            return int(years[-1])

        # keys[i] <= position < keys[i + 1]
        i = int(np.searchsorted(keys, position, side="right")) - 1
        pos1, pos2 = float(keys[i]), float(keys[i + 1])
        year1, year2 = int(years[i]), int(years[i + 1])

        t = (position - pos1) / (pos2 - pos1)
        return round_half_up(year1 + t * (year2 - year1))

    def year_to_scroll(self, year: float) -> float:
        """
        Convert a year to a normalized scroll position.

        Args:
            year: Calendar year; clamped to [min_year, max_year]

        Returns:
            Position in [0, 1]

        Raises:
            ValueError: If year is NaN
        """
        year = _require_number("year", year)

        if year.is_integer():
            exact = self._exact.get(int(year))
            if exact is not None:
                return exact

        keys = self._year_keys
        positions = self._year_positions

        if year <= keys[0]:
            return float(positions[0])
        if year >= keys[-1]:
            return float(positions[-1])

        i = int(np.searchsorted(keys, year, side="right")) - 1
        year1, year2 = float(keys[i]), float(keys[i + 1])
        pos1, pos2 = float(positions[i]), float(positions[i + 1])

        t = (year - year1) / (year2 - year1)
        return pos1 + t * (pos2 - pos1)

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "min_year": self.min_year,
            "max_year": self.max_year,
            "is_fallback": self.is_fallback,
            "waypoints": [
                {"year": w.year, "position": round(w.position, 6)}
                for w in self.waypoints
            ],
        }

    def __repr__(self) -> str:
        return (
            f"YearMapping({self.min_year}..{self.max_year}, "
            f"waypoints={len(self)}, fallback={self.is_fallback})"
        )
