"""State of the add-menu picker shown over the calendar page."""
import logging
from datetime import date
from typing import List, Optional, Tuple

from mealboard.domain.Menu import Menu
from mealboard.events.event_helpers import publish_store_failure
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import StoreError
from mealboard.logic.calendar.dates import DateLike, normalize_date
from mealboard.logic.menus.search import filter_menus

logger = logging.getLogger(__name__)


class AddMenuPicker:
    """Single-select menu chooser for one calendar day.

    The picker loads the menu list on its own when opened; confirm is only
    possible once a menu is selected and yields the (date, menu_id) pair.
    """

    def __init__(self, repo: MealRepository, selected_date: DateLike):
        self.repo = repo
        self.selected_date: date = normalize_date(selected_date)
        self.menus: List[Menu] = []
        self.search_term = ""
        self.selected_menu_id = ""
        self.is_loading = True

    async def open(self) -> "AddMenuPicker":
        try:
            self.menus = await self.repo.list_menus()
        except StoreError as e:
            logger.error("Error fetching menus: %s", e)
            publish_store_failure("list_menus", e)
        finally:
            self.is_loading = False
        return self

    @property
    def filtered_menus(self) -> List[Menu]:
        return filter_menus(self.menus, self.search_term)

    def search(self, term: str) -> List[Menu]:
        self.search_term = term or ""
        return self.filtered_menus

    def select(self, menu_id: str) -> None:
        self.selected_menu_id = menu_id or ""

    @property
    def can_confirm(self) -> bool:
        return bool(self.selected_menu_id)

    @property
    def empty_message(self) -> str:
        return 'No menus match your search' if self.search_term else 'No menus available'

    def confirm(self) -> Optional[Tuple[date, str]]:
        """The (date, menu_id) to save, or None while nothing is selected."""
        if not self.can_confirm:
            return None
        return self.selected_date, self.selected_menu_id
