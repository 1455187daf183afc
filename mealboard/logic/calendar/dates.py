"""Date helpers for the week calendar.

Calendar documents store a date-only string (YYYY-MM-DD). Every comparison goes
through normalize_date, which rebuilds a plain ``date`` from the year/month/day
components, so an entry stored for "2024-03-10" lands on March 10 whatever the
server's UTC offset is.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import List, Union

from mealboard.utilities.config import WEEK_STARTS_ON
from mealboard.utilities.constants import DATE_FORMAT, DAYS_IN_WEEK

DateLike = Union[date, datetime, str]

# YYYY-MM-DD, optionally with [T ]HH[:MM[:SS[.fff[fff]]]] and Z or an +HH:MM offset
_ISO_EXTENDED = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}(?::\d{2}(?::\d{2}(?:\.\d{3}(?:\d{3})?)?)?)?(?:Z|[+-]\d{2}:\d{2})?)?"
)

__all__ = [
    "normalize_date", "format_date_key", "start_of_week", "week_days", "shift_week",
    "is_same_day", "week_label", "DateLike",
]


def normalize_date(value: DateLike) -> date:
    """Strip time of day and timezone, keeping the value's own calendar day.

    Raises ValueError for strings that are not ISO dates/datetimes.
    """
    if isinstance(value, datetime):
        # wall-clock components, no conversion to local time
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not _ISO_EXTENDED.fullmatch(text):
            raise ValueError(f"Not an ISO date: {value!r}")
        if len(text) == 10:
            return datetime.strptime(text, DATE_FORMAT).date()
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        return date(parsed.year, parsed.month, parsed.day)
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date_key(value: DateLike) -> str:
    return normalize_date(value).strftime(DATE_FORMAT)


def start_of_week(value: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> date:
    """First day of the week containing value; week_starts_on uses 0 = Sunday .. 6 = Saturday."""
    day = normalize_date(value)
    sunday_based = (day.weekday() + 1) % 7
    return day - timedelta(days=(sunday_based - week_starts_on) % 7)


def week_days(pivot: DateLike, week_starts_on: int = WEEK_STARTS_ON) -> List[date]:
    start = start_of_week(pivot, week_starts_on)
    return [start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def shift_week(pivot: DateLike, weeks: int, week_starts_on: int = WEEK_STARTS_ON) -> date:
    """Move the pivot by whole weeks and snap to the start of that week."""
    return start_of_week(normalize_date(pivot) + timedelta(weeks=weeks), week_starts_on)


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return normalize_date(a) == normalize_date(b)


def week_label(start: date) -> str:
    """"March 10 - March 16, 2024"."""
    end = start + timedelta(days=DAYS_IN_WEEK - 1)
    return f"{start:%B} {start.day} - {end:%B} {end.day}, {end.year}"
