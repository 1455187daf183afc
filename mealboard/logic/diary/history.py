"""Diary: what was on the calendar before today, newest day first."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List

from mealboard.domain.CalendarEntry import CalendarEntry
from mealboard.logic.calendar.dates import format_date_key, normalize_date

__all__ = ["build_diary"]


def build_diary(entries: Iterable[CalendarEntry], today: date) -> List[Dict[str, Any]]:
    """Group resolved past entries by day: [{date, label, entries}], newest first."""
    cutoff = normalize_date(today)
    days: Dict[date, List[CalendarEntry]] = {}
    for entry in entries:
        if entry.menu is None:
            continue
        try:
            day = normalize_date(entry.date)
        except ValueError:
            continue
        if day < cutoff:
            days.setdefault(day, []).append(entry)
    return [
        {"date": format_date_key(day), "label": f"{day:%A}, {day:%B} {day.day}, {day.year}", "entries": days[day]}
        for day in sorted(days, reverse=True)
    ]
