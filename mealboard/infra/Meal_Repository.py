"""Repository over the document store: the only place collection names and document shapes meet."""
import logging
from datetime import date
from typing import List, Optional, Union

from mealboard.domain.CalendarEntry import CalendarEntry
from mealboard.domain.Inventory import Inventory, InventoryItem
from mealboard.domain.Menu import Menu
from mealboard.domain.Recipe import Recipe
from mealboard.infra.document_store import DocumentStore
from mealboard.logic.calendar.dates import format_date_key
from mealboard.utilities.constants import CALENDAR, INVENTORY, MENUS, RECIPES

logger = logging.getLogger(__name__)


class MealRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_recipes(self) -> List[Recipe]:
        docs = await self.store.list(RECIPES)
        return [Recipe.from_dict(d) for d in docs]

    async def list_menus(self) -> List[Menu]:
        docs = await self.store.list(MENUS)
        return [Menu.from_dict(d) for d in docs]

    async def get_menu(self, menu_id: str) -> Menu:
        """Raises DocumentNotFound when the menu does not exist."""
        doc = await self.store.get(MENUS, menu_id)
        return Menu.from_dict(doc)

    async def list_calendar_entries(self) -> List[CalendarEntry]:
        """Stored entries in store order, menus not yet resolved."""
        docs = await self.store.list(CALENDAR)
        return [CalendarEntry.from_dict(d) for d in docs]

    async def create_calendar_entry(self, day: Union[date, str], menu_id: str) -> CalendarEntry:
        entry = CalendarEntry(date=format_date_key(day), menu_id=menu_id)
        entry.id = await self.store.create(CALENDAR, entry.to_document())
        logger.info("Calendar entry %s created for %s -> menu %s", entry.id, entry.date, menu_id)
        return entry

    async def delete_calendar_entry(self, entry_id: str) -> None:
        await self.store.delete(CALENDAR, entry_id)
        logger.info("Calendar entry %s deleted", entry_id)

    async def list_inventory(self) -> Inventory:
        docs = await self.store.list(INVENTORY)
        return Inventory([InventoryItem.from_dict(d) for d in docs])

    async def add_inventory_item(self, name: str, quantity: Optional[float], unit: str = "") -> InventoryItem:
        item = InventoryItem(name=name, quantity=quantity, unit=unit)
        item.id = await self.store.create(INVENTORY, {k: v for k, v in item.to_dict().items() if k != "id"})
        return item

    async def delete_inventory_item(self, item_id: str) -> None:
        await self.store.delete(INVENTORY, item_id)

    async def close(self) -> None:
        await self.store.close()
