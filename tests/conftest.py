"""
Test Configuration
==================

Pytest fixtures and test configuration for chronoscroll.
"""

import pytest


CURRENT_YEAR = 2025


@pytest.fixture
def current_year():
    """Fixed present-day year so tests do not depend on the wall clock."""
    return CURRENT_YEAR


@pytest.fixture
def default_settings():
    """Settings with every value at its default (ignores config.yaml and env)."""
    from chronoscroll.config import Settings

    return Settings()


@pytest.fixture
def scenario_entities():
    """
    Three books: A and B overlap, C is short and isolated.

        A [-1000, -900]
        B [-950, -850]
        C [500, 510]
    """
    from chronoscroll.models import DatedEntity

    return [
        DatedEntity(id="A", start=-1000, end=-900),
        DatedEntity(id="B", start=-950, end=-850),
        DatedEntity(id="C", start=500, end=510),
    ]


@pytest.fixture
def sample_book_record():
    """Provide a raw book record as it appears in books.json."""
    return {
        "id": "ruth",
        "name": "Ruth",
        "dateEventsStart": -1140,
        "dateEventsEnd": -1130,
        "dateWrittenStart": -1000,
        "dateWrittenEnd": -900,
        "image": "images/ruth.jpg",
        "summary": "A Moabite widow follows Naomi to Bethlehem.",
    }


@pytest.fixture
def sample_milestone():
    """Provide a raw milestone record."""
    return {
        "id": "trent-1546",
        "year": 1546,
        "name": "Council of Trent",
        "description": "Dogmatically defines the canon",
        "displayStart": 1500,
        "displayEnd": 1650,
    }
