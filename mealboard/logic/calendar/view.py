"""Week calendar state: loaded entries, the visible week, and add/delete flows.

Every store call is wrapped: a failure is logged, published as a diagnostic
event, and leaves the entries exactly as they were.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from mealboard.domain.CalendarEntry import CalendarEntry
from mealboard.events.event_helpers import (
    publish_dangling_reference, publish_entry_added, publish_entry_removed, publish_store_failure
)
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.logic.calendar.dates import (
    DateLike, format_date_key, normalize_date, shift_week, start_of_week, week_days, week_label
)
from mealboard.logic.calendar.entries import bucket_by_day, load_calendar_entries
from mealboard.utilities.config import WEEK_STARTS_ON

logger = logging.getLogger(__name__)


class CalendarView:
    def __init__(self, repo: MealRepository, pivot: Optional[DateLike] = None,
                 week_starts_on: int = WEEK_STARTS_ON, today: Optional[date] = None):
        self.repo = repo
        self.week_starts_on = week_starts_on
        self.today = normalize_date(today or date.today())
        self.current_week = start_of_week(pivot or self.today, week_starts_on)
        self.entries: List[CalendarEntry] = []
        self.is_loading = True

    # --- Loading ----------------------------------------------------------
    async def load(self) -> bool:
        self.is_loading = True
        try:
            self.entries = await load_calendar_entries(self.repo)
            return True
        except StoreError as e:
            logger.error("Error fetching calendar entries: %s", e)
            publish_store_failure("list_calendar_entries", e)
            return False
        finally:
            self.is_loading = False

    # --- Week navigation --------------------------------------------------
    @property
    def days(self) -> List[date]:
        return week_days(self.current_week, self.week_starts_on)

    @property
    def label(self) -> str:
        return week_label(self.current_week)

    def previous_week(self) -> date:
        self.current_week = shift_week(self.current_week, -1, self.week_starts_on)
        return self.current_week

    def next_week(self) -> date:
        self.current_week = shift_week(self.current_week, 1, self.week_starts_on)
        return self.current_week

    @property
    def previous_pivot(self) -> str:
        return format_date_key(shift_week(self.current_week, -1, self.week_starts_on))

    @property
    def next_pivot(self) -> str:
        return format_date_key(shift_week(self.current_week, 1, self.week_starts_on))

    def week_entries(self) -> List[CalendarEntry]:
        """Entries falling inside the visible week, in day order then entry order."""
        buckets = bucket_by_day(self.entries, self.days)
        return [e for day in self.days for e in buckets[day]]

    def day_cells(self) -> List[Dict[str, Any]]:
        buckets = bucket_by_day(self.entries, self.days)
        return [
            {
                "date": day,
                "key": format_date_key(day),
                "weekday": f"{day:%a}",
                "day_number": day.day,
                "is_today": day == self.today,
                "entries": buckets[day],
            }
            for day in self.days
        ]

    # --- Mutations --------------------------------------------------------
    async def add_entry(self, day: DateLike, menu_id: str) -> Optional[CalendarEntry]:
        """Create the entry, re-fetch its menu and append it; None when nothing was added."""
        try:
            entry = await self.repo.create_calendar_entry(normalize_date(day), menu_id)
        except StoreError as e:
            logger.error("Error saving calendar entry: %s", e)
            publish_store_failure("create_calendar_entry", e)
            return None
        try:
            menu = await self.repo.get_menu(menu_id)
        except DocumentNotFound:
            logger.warning("Calendar entry %s saved but menu %s no longer exists", entry.id, menu_id)
            publish_dangling_reference(entry.id, menu_id, entry.date)
            return None
        except StoreError as e:
            logger.error("Error fetching menu %s after saving entry %s: %s", menu_id, entry.id, e)
            publish_store_failure("get_menu", e)
            return None
        entry = entry.with_menu(menu)
        self.entries = [*self.entries, entry]
        publish_entry_added(entry.id, menu_id, entry.date)
        return entry

    async def delete_entry(self, entry_id: str) -> bool:
        try:
            await self.repo.delete_calendar_entry(entry_id)
        except StoreError as e:
            logger.error("Error deleting calendar entry %s: %s", entry_id, e)
            publish_store_failure("delete_calendar_entry", e)
            return False
        self.entries = [e for e in self.entries if e.id != entry_id]
        publish_entry_removed(entry_id)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week_start": format_date_key(self.current_week),
            "label": self.label,
            "previous": self.previous_pivot,
            "next": self.next_pivot,
            "days": [
                {
                    "date": cell["key"],
                    "is_today": cell["is_today"],
                    "entries": [
                        {"id": e.id, "date": e.date, "menuId": e.menu_id, "menu": e.menu.summary()}
                        for e in cell["entries"]
                    ],
                }
                for cell in self.day_cells()
            ],
        }
