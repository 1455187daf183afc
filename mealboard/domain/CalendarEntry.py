"""CalendarEntry domain entity: one date paired with one menu reference."""
from datetime import date
from typing import Optional

from mealboard.domain.Menu import Menu
from mealboard.logic.calendar.dates import format_date_key, normalize_date


class CalendarEntry:
    def __init__(self, id: str = "", date: str = "", menu_id: str = "", menu: Optional[Menu] = None):
        self.id = id
        self.date = date  # always YYYY-MM-DD as stored
        self.menu_id = menu_id
        # denormalized copy resolved at read time
        self.menu = menu

    def __str__(self) -> str:
        label = self.menu.name if self.menu else self.menu_id
        return f"{self.date}: {label}"

    __repr__ = __str__

    @property
    def day(self) -> date:
        return normalize_date(self.date)

    def with_menu(self, menu: Menu) -> "CalendarEntry":
        return CalendarEntry(self.id, self.date, self.menu_id, menu)

    @staticmethod
    def from_dict(data):
        '''Builds an entry from a stored calendar document (menu left unresolved).'''
        d = dict(data) if isinstance(data, dict) else {}
        raw_date = d.get("date") or ""
        try:
            stored = format_date_key(raw_date)
        except ValueError:
            stored = str(raw_date)
        return CalendarEntry(
            id=str(d.get("id") or ""),
            date=stored,
            menu_id=str(d.get("menuId") or ""),
        )

    def to_document(self):
        """Shape persisted in the calendar collection."""
        return {"date": self.date, "menuId": self.menu_id}

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "menuId": self.menu_id,
            "menu": self.menu.to_dict() if self.menu else None,
        }
