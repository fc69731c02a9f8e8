"""
Date-range helpers shared by the itinerary and calendar views.

Everything works on local calendar dates. Malformed or missing input never
raises: counts degrade to 0 and containment checks to False.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, None]


def parse_date(value: DateLike) -> Optional[date]:
    """
    Coerce an ISO date string, date or datetime into a date.

    Strings may carry a time part ("2026-03-01T10:00:00"); it is dropped.
    Returns None for anything that can't be read as a calendar date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug(f"Unsupported date value {value!r}")
        return None

    text = value.strip()
    if not text:
        return None
    # Keep only the calendar part of a timestamp
    text = text.split("T", 1)[0].split(" ", 1)[0]
    try:
        return date.fromisoformat(text)
    except ValueError:
        logger.debug(f"Malformed date string {value!r}")
        return None


def day_count(start: DateLike, end: DateLike) -> int:
    """Inclusive number of days in [start, end]; at least 1, or 0 on bad input."""
    start_day = parse_date(start)
    end_day = parse_date(end)
    if start_day is None or end_day is None:
        return 0
    return max(1, (end_day - start_day).days + 1)


def contains_day(day: DateLike, start: DateLike, end: DateLike) -> bool:
    day_value = parse_date(day)
    start_day = parse_date(start)
    end_day = parse_date(end)
    if day_value is None or start_day is None or end_day is None:
        return False
    return start_day <= day_value <= end_day


def ranges_overlap(a_start: DateLike, a_end: DateLike, b_start: DateLike, b_end: DateLike) -> bool:
    """True when two inclusive date ranges share at least one day."""
    bounds = [parse_date(v) for v in (a_start, a_end, b_start, b_end)]
    if any(b is None for b in bounds):
        return False
    a0, a1, b0, b1 = bounds
    return a0 <= b1 and b0 <= a1


def format_date(value: DateLike) -> str:
    """
    Human label like "Mar 1, 2026".

    Missing values give an empty string; unparsable strings are echoed back
    unchanged so the user still sees what was stored.
    """
    if value is None or value == "":
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
