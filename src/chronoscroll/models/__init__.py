"""
Data Models
===========

Value types for chronoscroll.

This module re-exports all data models for convenient access.

Models:
    Input:
        - BookRecord: Schema for raw book records
        - Milestone: Milestone record with display envelope
        - DatedEntity: Resolved date triple read by the engine

    Build:
        - Interval: Closed year range
        - Event, EventKind: Transient grid boundaries
        - Segment, Emphasis: Weighted span between grid years
        - Waypoint: Year/position pair in the lookup table
"""

from chronoscroll.models.interval import DatedEntity, Event, EventKind, Interval
from chronoscroll.models.records import BookRecord, Milestone
from chronoscroll.models.segment import Emphasis, Segment, Waypoint

__all__ = [
    # Input
    "BookRecord",
    "Milestone",
    "DatedEntity",
    # Build
    "Interval",
    "Event",
    "EventKind",
    "Emphasis",
    "Segment",
    "Waypoint",
]
