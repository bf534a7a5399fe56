"""
Catalogue
=========

Built-in reference data for the biblical timeline: era boundaries and
the canonization milestones.

Eras:
    Half-open [start, end) year ranges. The Church Age runs up to the year
    after the present, so it depends on the current year. Wisdom Literature
    has no dates and collects undated books.

Milestones:
    Canonization history from the early Church to Trent. The display
    envelope is wider than the canonical year and drives pacing only.
"""

import datetime
from dataclasses import dataclass
from typing import Optional, Tuple

from chronoscroll.models.records import Milestone


@dataclass(frozen=True, slots=True)
class Era:
    """
    Named period of biblical history.

    Attributes:
        id: Stable identifier (also used as CSS class by the view layer)
        name: Display name
        start: First year (inclusive), None for undated eras
        end: End year (exclusive), None for undated eras
    """

    id: str
    name: str
    start: Optional[int]
    end: Optional[int]

    @property
    def is_dated(self) -> bool:
        return self.start is not None

    def contains(self, year: int) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start <= year < self.end


PRIMEVAL = "primeval"
PATRIARCHS = "patriarchs"
EXODUS = "exodus"
JUDGES = "judges"
UNITED_KINGDOM = "united-kingdom"
DIVIDED_KINGDOM = "divided-kingdom"
EXILE = "exile"
POST_EXILE = "post-exile"
INTERTESTAMENTAL = "intertestamental"
GOSPELS = "gospels"
APOSTOLIC = "apostolic"
CHURCH_AGE = "church-age"
WISDOM = "wisdom"


def default_eras(current_year: Optional[int] = None) -> Tuple[Era, ...]:
    """
    Era catalogue in chronological order, Wisdom last.

    Args:
        current_year: Present year (None = wall clock); the Church Age
            ends the year after it
    """
    if current_year is None:
        current_year = datetime.date.today().year

    return (
        Era(PRIMEVAL, "Primeval History", -4000, -2100),
        Era(PATRIARCHS, "Patriarchal Era", -2100, -1450),
        Era(EXODUS, "Exodus & Conquest", -1450, -1380),
        Era(JUDGES, "Age of Judges", -1380, -1050),
        Era(UNITED_KINGDOM, "United Kingdom", -1050, -930),
        Era(DIVIDED_KINGDOM, "Divided Kingdom", -930, -586),
        Era(EXILE, "Babylonian Exile", -586, -538),
        Era(POST_EXILE, "Post-Exile", -538, -400),
        Era(INTERTESTAMENTAL, "Intertestamental", -400, -5),
        Era(GOSPELS, "Life of Christ", -5, 33),
        Era(APOSTOLIC, "Apostolic Age", 33, 100),
        Era(CHURCH_AGE, "Age of the Church", 100, current_year + 1),
        Era(WISDOM, "Wisdom Literature", None, None),
    )


MILESTONES: Tuple[Milestone, ...] = (
    Milestone(
        id="living-tradition",
        year=100,
        name="The Living Tradition",
        description=(
            "Before these books were formally collected into the \"Bible\", "
            "their importance was preserved through Apostolic Tradition, the "
            "living teaching handed down from the Apostles."
        ),
        display_start=96,
        display_end=382,
        is_large_milestone=True,
    ),
    Milestone(
        id="rome-382",
        year=382,
        name="Council of Rome",
        description="Pope Damasus I promulgates the 73-book canon",
        display_start=370,
        display_end=393,
    ),
    Milestone(
        id="hippo-393",
        year=393,
        name="Synod of Hippo",
        description="Augustine reaffirms the canon",
        display_start=388,
        display_end=397,
    ),
    Milestone(
        id="carthage-397",
        year=397,
        name="Council of Carthage",
        description="Formally accepts the Biblical canon",
        display_start=393,
        display_end=405,
    ),
    Milestone(
        id="innocent-405",
        year=405,
        name="Pope Innocent I",
        description="Sends authoritative canon list to Gaul",
        display_start=400,
        display_end=500,
    ),
    Milestone(
        id="trent-1546",
        year=1546,
        name="Council of Trent",
        description="Dogmatically defines the canon",
        display_start=1500,
        display_end=1650,
    ),
)
