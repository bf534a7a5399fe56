"""
Era Lookup
==========

Resolves which era a year belongs to.

Rules:
    - None (undated)            -> Wisdom Literature
    - first era with start <= year < end
    - otherwise: year < -2100   -> Primeval
                 year >= 100    -> Church Age
                 year >= 33     -> Apostolic
                 anything else  -> Wisdom Literature
"""

from typing import Dict, Optional, Sequence

from chronoscroll.catalog import APOSTOLIC, CHURCH_AGE, PRIMEVAL, WISDOM, Era, default_eras


def _by_id(eras: Sequence[Era]) -> Dict[str, Era]:
    return {era.id: era for era in eras}


def era_for_year(
    year: Optional[int],
    eras: Optional[Sequence[Era]] = None,
) -> Era:
    """
    Find the era for a year.

    Args:
        year: Calendar year, or None for an undated book
        eras: Era catalogue in lookup order (None = default catalogue)

    Returns:
        The matching Era

    Raises:
        KeyError: If a fallback era is needed but missing from a custom catalogue
    """
    if eras is None:
        eras = default_eras()
    index = _by_id(eras)

    if year is None:
        return index[WISDOM]

    for era in eras:
        if era.contains(year):
            return era

    if year < -2100:
        return index[PRIMEVAL]
    if year >= 100:
        return index[CHURCH_AGE]
    if year >= 33:
        return index[APOSTOLIC]
    return index[WISDOM]
