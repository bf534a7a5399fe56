"""
Year Formatting
===============

BC/AD display strings for years produced by the mapping.

There is no year 0 in the BC/AD calendar; it is shown as 1 BC.
"""

from typing import Optional, Tuple


def format_year_parts(year: Optional[int]) -> Tuple[str, str]:
    """
    Split a year into (number, suffix) for display.

    Examples:
        -586 -> ("586", "BC")
        0    -> ("1", "BC")
        382  -> ("382", "AD")
        None -> ("?", "")
    """
    if year is None:
        return "?", ""
    if year < 0:
        return str(abs(year)), "BC"
    if year == 0:
        return "1", "BC"
    return str(year), "AD"


def format_year(year: Optional[int]) -> str:
    number, suffix = format_year_parts(year)
    return f"{number} {suffix}".strip()


def format_date_range(start: Optional[int], end: Optional[int]) -> str:
    """
    Format a year range.

    Examples:
        (-1000, -900) -> "1000–900 BC"
        (-5, 33)      -> "5 BC – 33 AD"
        (70, 70)      -> "70 AD"
        (None, None)  -> "Unknown"
    """
    if start is None and end is None:
        return "Unknown"
    if start == end or end is None:
        return format_year(start)
    if start is None:
        return format_year(end)

    start_number, start_suffix = format_year_parts(start)
    end_number, end_suffix = format_year_parts(end)

    if start_suffix == end_suffix:
        return f"{start_number}–{end_number} {start_suffix}"

    return f"{format_year(start)} – {format_year(end)}"
