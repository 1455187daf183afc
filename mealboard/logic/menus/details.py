"""Menu details view: load one menu by id with explicit not-found and error states."""
import logging
from typing import Optional

from mealboard.domain.Menu import Menu
from mealboard.events.event_helpers import publish_store_failure
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import DocumentNotFound, StoreError

logger = logging.getLogger(__name__)

LOADING = "loading"
LOADED = "loaded"
NOT_FOUND = "not_found"
ERROR = "error"


class MenuDetailsView:
    def __init__(self, repo: MealRepository, menu_id: str):
        self.repo = repo
        self.menu_id = menu_id
        self.menu: Optional[Menu] = None
        self.state = LOADING
        self.error: Optional[str] = None

    async def load(self) -> "MenuDetailsView":
        try:
            self.menu = await self.repo.get_menu(self.menu_id)
            self.state = LOADED
        except DocumentNotFound:
            logger.error("Menu not found: %s", self.menu_id)
            self.state = NOT_FOUND
        except StoreError as e:
            logger.error("Error fetching menu %s: %s", self.menu_id, e)
            publish_store_failure("get_menu", e)
            self.state = ERROR
            self.error = str(e)
        return self

    @property
    def status_code(self) -> int:
        return {LOADED: 200, NOT_FOUND: 404, ERROR: 502}.get(self.state, 200)
