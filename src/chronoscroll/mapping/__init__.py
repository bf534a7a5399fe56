"""
Mapping Module
==============

The temporal scroll-mapping engine.

Components (build order):
    - collect_intervals: Events and density intervals from inputs
    - build_year_grid: Distinct grid years plus the present day
    - SegmentWeightCalculator: Scroll weight per grid segment
    - normalize_positions: Weights to positions in [margin, 1 - margin]
    - YearMapping: Immutable bidirectional lookup

Entry points:
    - build_year_mapping: One-shot build for a dataset
    - TimelineMapper: Holder that rebuilds on dataset reload
"""

from chronoscroll.mapping.builder import build_year_mapping
from chronoscroll.mapping.collector import CollectedIntervals, collect_intervals
from chronoscroll.mapping.grid import build_year_grid
from chronoscroll.mapping.interpolator import YearMapping
from chronoscroll.mapping.mapper import TimelineMapper
from chronoscroll.mapping.normalizer import accumulate_weights, normalize_positions
from chronoscroll.mapping.weights import SegmentWeightCalculator, WeightParameters

__all__ = [
    "build_year_mapping",
    "CollectedIntervals",
    "collect_intervals",
    "build_year_grid",
    "SegmentWeightCalculator",
    "WeightParameters",
    "accumulate_weights",
    "normalize_positions",
    "YearMapping",
    "TimelineMapper",
]
