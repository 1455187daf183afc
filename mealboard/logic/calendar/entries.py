"""Join calendar entries to their menus and bucket them into day cells."""
from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from mealboard.domain.CalendarEntry import CalendarEntry
from mealboard.events.event_helpers import publish_dangling_reference, publish_store_failure
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.logic.calendar.dates import normalize_date

logger = logging.getLogger(__name__)

__all__ = ["resolve_entry", "resolve_calendar_entries", "load_calendar_entries", "bucket_by_day", "entries_for_day"]


async def resolve_entry(repo: MealRepository, entry: CalendarEntry) -> Optional[CalendarEntry]:
    """Attach the referenced menu, or None when it cannot be resolved."""
    try:
        menu = await repo.get_menu(entry.menu_id)
    except DocumentNotFound:
        logger.warning("Menu with ID %s not found (calendar entry %s)", entry.menu_id, entry.id)
        publish_dangling_reference(entry.id, entry.menu_id, entry.date)
        return None
    except StoreError as e:
        logger.error("Error fetching menu %s: %s", entry.menu_id, e)
        publish_store_failure("get_menu", e)
        return None
    return entry.with_menu(menu)


async def resolve_calendar_entries(repo: MealRepository, entries: Iterable[CalendarEntry]) -> List[CalendarEntry]:
    """Resolve every entry concurrently; output keeps input order and drops dangling references."""
    resolved = await asyncio.gather(*(resolve_entry(repo, e) for e in entries))
    return [e for e in resolved if e is not None]


async def load_calendar_entries(repo: MealRepository) -> List[CalendarEntry]:
    """Fetch all stored entries and join them to menus. StoreError propagates for the listing itself."""
    entries = await repo.list_calendar_entries()
    return await resolve_calendar_entries(repo, entries)


def _entry_day(entry: CalendarEntry) -> Optional[date]:
    try:
        return normalize_date(entry.date)
    except ValueError:
        logger.warning("Calendar entry %s has an unreadable date %r", entry.id, entry.date)
        return None


def bucket_by_day(entries: Iterable[CalendarEntry], days: Iterable[date]) -> Dict[date, List[CalendarEntry]]:
    """Map each requested day to the entries whose normalized date equals it (entry order kept)."""
    buckets: Dict[date, List[CalendarEntry]] = {normalize_date(d): [] for d in days}
    for entry in entries:
        day = _entry_day(entry)
        if day in buckets:
            buckets[day].append(entry)
    return buckets


def entries_for_day(entries: Iterable[CalendarEntry], day: date) -> List[CalendarEntry]:
    target = normalize_date(day)
    return [e for e in entries if _entry_day(e) == target]
