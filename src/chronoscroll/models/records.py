"""
Source Record Schemas
=====================

Pydantic models for the book and milestone records supplied by the data
collaborator.

Input Contract (one book record):
    {
        "id": "genesis",
        "name": "Genesis",
        "dateEventsStart": -4000,
        "dateEventsEnd": -1805,
        "dateWrittenStart": -1440,
        "dateWrittenEnd": -1400
    }

Records may carry any number of presentation fields (images, summaries,
colours). Those are ignored here and never reach the mapping engine.

Example:
    from chronoscroll.models import BookRecord

    record = BookRecord.model_validate(raw)
    entity = record.resolve_date()
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chronoscroll.models.interval import DatedEntity, Interval


class BookRecord(BaseModel):
    """
    Schema for a book record.

    The events date describes when the narrated events happen. When it is
    unknown the writing date is used instead.

    Attributes:
        id: Stable identifier
        name: Display name (not used by the engine)
        date_events_start: First year of narrated events
        date_events_end: Last year of narrated events
        date_written_start: First year of composition
        date_written_end: Last year of composition
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., description="Stable record identifier")

    name: Optional[str] = Field(default=None, description="Display name")

    date_events_start: Optional[int] = Field(default=None, alias="dateEventsStart")
    date_events_end: Optional[int] = Field(default=None, alias="dateEventsEnd")
    date_written_start: Optional[int] = Field(default=None, alias="dateWrittenStart")
    date_written_end: Optional[int] = Field(default=None, alias="dateWrittenEnd")

    def resolve_date(self) -> DatedEntity:
        """
        Pick the date range used for timeline placement.

        Returns:
            DatedEntity with the events range, or the writing range
            (is_writing_date=True) when the events start is unknown
        """
        if self.date_events_start is not None:
            return DatedEntity(
                id=self.id,
                start=self.date_events_start,
                end=self.date_events_end,
                is_writing_date=False,
            )
        return DatedEntity(
            id=self.id,
            start=self.date_written_start,
            end=self.date_written_end,
            is_writing_date=True,
        )


class Milestone(BaseModel):
    """
    Point-in-time historical event with a wider display envelope.

    The envelope [display_start, display_end] is used only for pacing; the
    canonical year is what the view layer shows.

    Attributes:
        id: Stable identifier
        year: Canonical year of the event
        name: Display name
        description: Display text
        display_start: First year of the pacing envelope
        display_end: Last year of the pacing envelope
        is_large_milestone: Rendered as a standalone card instead of a tick
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    year: int
    name: str
    description: str = ""
    display_start: int = Field(..., alias="displayStart")
    display_end: int = Field(..., alias="displayEnd")
    is_large_milestone: bool = Field(default=False, alias="isLargeMilestone")

    @model_validator(mode="after")
    def validate_envelope(self) -> "Milestone":
        """Envelope must be ordered."""
        if self.display_end < self.display_start:
            raise ValueError(
                f"Milestone {self.id!r} display envelope ends before it starts"
            )
        return self

    @property
    def interval(self) -> Interval:
        """Display envelope as an Interval."""
        return Interval(start=self.display_start, end=self.display_end)
