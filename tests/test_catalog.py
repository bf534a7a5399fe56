"""
Catalogue, Era and Formatting Tests
===================================

Tests for the built-in reference data and display helpers.
"""

import pytest

from chronoscroll.catalog import MILESTONES, default_eras
from chronoscroll.eras import era_for_year
from chronoscroll.formatting import format_date_range, format_year, format_year_parts


@pytest.fixture
def eras(current_year):
    return default_eras(current_year)


class TestCatalogue:
    """Tests for the era and milestone catalogues."""

    def test_eras_are_contiguous(self, eras):
        dated = [era for era in eras if era.is_dated]
        for earlier, later in zip(dated, dated[1:]):
            assert earlier.end == later.start

    def test_church_age_runs_past_present(self, eras, current_year):
        church = next(era for era in eras if era.id == "church-age")
        assert church.end == current_year + 1

    def test_milestones(self):
        assert [m.year for m in MILESTONES] == [100, 382, 393, 397, 405, 1546]
        assert [m.id for m in MILESTONES if m.is_large_milestone] == ["living-tradition"]
        for milestone in MILESTONES:
            assert milestone.display_start <= milestone.display_end


class TestEraForYear:
    """Tests for era_for_year."""

    @pytest.mark.parametrize(
        "year, era_id",
        [
            (-4000, "primeval"),
            (-2100, "patriarchs"),
            (-1000, "united-kingdom"),
            (-586, "exile"),
            (-5, "gospels"),
            (33, "apostolic"),
            (382, "church-age"),
            (2025, "church-age"),
        ],
    )
    def test_lookup(self, eras, year, era_id):
        assert era_for_year(year, eras).id == era_id

    def test_undated_is_wisdom(self, eras):
        assert era_for_year(None, eras).id == "wisdom"

    def test_before_first_era(self, eras):
        assert era_for_year(-5000, eras).id == "primeval"

    def test_after_last_era(self, eras):
        assert era_for_year(3000, eras).id == "church-age"

    def test_default_catalogue(self):
        assert era_for_year(-1200).id == "judges"


class TestFormatting:
    """Tests for BC/AD formatting."""

    @pytest.mark.parametrize(
        "year, parts",
        [(-586, ("586", "BC")), (0, ("1", "BC")), (382, ("382", "AD")), (None, ("?", ""))],
    )
    def test_year_parts(self, year, parts):
        assert format_year_parts(year) == parts

    def test_format_year(self):
        assert format_year(-586) == "586 BC"
        assert format_year(None) == "?"

    @pytest.mark.parametrize(
        "start, end, text",
        [
            (-1000, -900, "1000–900 BC"),
            (-5, 33, "5 BC – 33 AD"),
            (70, 70, "70 AD"),
            (70, None, "70 AD"),
            (None, 95, "95 AD"),
            (None, None, "Unknown"),
            (382, 405, "382–405 AD"),
        ],
    )
    def test_date_range(self, start, end, text):
        assert format_date_range(start, end) == text
