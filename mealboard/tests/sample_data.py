"""Documents shared by the tests (kept small and deterministic)."""
import asyncio
import copy

from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.document_store import InMemoryDocumentStore
from mealboard.infra.errors import StoreError

CARBONARA = {
    "id": "r-carbonara",
    "name": "Spaghetti Carbonara",
    "description": "Roman pasta",
    "cuisine": "Italian",
    "category": "Dinner",
    "image": "https://img.test/carbonara.jpg",
    "prepTime": "10",
    "cookTime": "20",
    "servings": 2,
    "ingredients": [
        {"name": "spaghetti", "quantity": 200, "unit": "g"},
        {"name": "guanciale", "quantity": 100, "unit": "g"},
        {"name": "eggs", "quantity": 2, "unit": ""},
        "black pepper",
    ],
    "instructions": ["Boil the pasta.", "Crisp the guanciale.", "Toss with eggs."],
}

SALAD = {
    "id": "r-salad",
    "name": "Greek Salad",
    "description": "Fresh and quick",
    "cuisine": "Greek",
    "category": "Lunch",
    "image": "",
    "prepTime": "15",
    "cookTime": "",
    "servings": 2,
    "ingredients": [
        {"name": "tomatoes", "quantity": 3, "unit": ""},
        {"name": "feta", "quantity": 150, "unit": "g"},
    ],
    "instructions": ["Chop.", "Season."],
}

PANCAKES = {
    "id": "r-pancakes",
    "name": "Buttermilk Pancakes",
    "description": "Weekend breakfast",
    "cuisine": "American",
    "category": "Breakfast",
    "image": "https://img.test/pancakes.jpg",
    "prepTime": "10 min",
    "cookTime": "15",
    "servings": 4,
    "ingredients": ["200 g flour", "300 ml buttermilk", "2 eggs"],
    "instructions": ["Whisk.", "Cook."],
}

MENUS = [
    {"id": "m-italian", "name": "Italian Night", "description": "Pasta dinner", "recipes": [CARBONARA, SALAD]},
    {"id": "m-sunday", "name": "Lazy Sunday", "description": "Late breakfast", "recipes": [PANCAKES]},
    {"id": "m-empty", "name": "Leftovers", "description": "Whatever is in the fridge", "recipes": []},
]

CALENDAR = [
    {"id": "c-1", "date": "2024-03-10", "menuId": "m-italian"},
    {"id": "c-2", "date": "2024-03-12", "menuId": "m-sunday"},
    {"id": "c-dangling", "date": "2024-03-11", "menuId": "m-deleted"},
    {"id": "c-next-week", "date": "2024-03-18", "menuId": "m-sunday"},
]

INVENTORY = [
    {"id": "i-flour", "name": "flour", "quantity": 1000, "unit": "g"},
    {"id": "i-eggs", "name": "egg", "quantity": 3, "unit": ""},
    {"id": "i-spaghetti", "name": "spaghetti", "quantity": 500, "unit": "g"},
]


def seed():
    return copy.deepcopy({
        "recipes": [CARBONARA, SALAD, PANCAKES],
        "menus": MENUS,
        "calendar": CALENDAR,
        "inventory": INVENTORY,
    })


def make_repository(store_cls=InMemoryDocumentStore, **kwargs) -> MealRepository:
    return MealRepository(store_cls(seed(), **kwargs))


class FailingStore(InMemoryDocumentStore):
    """In-memory store whose chosen operations raise StoreError."""

    def __init__(self, seed=None, fail_on=("list", "get", "create", "delete")):
        super().__init__(seed)
        self.fail_on = set(fail_on)

    async def list(self, collection):
        if "list" in self.fail_on:
            raise StoreError("list unavailable", collection=collection)
        return await super().list(collection)

    async def get(self, collection, doc_id):
        if "get" in self.fail_on:
            raise StoreError("get unavailable", collection=collection, doc_id=doc_id)
        return await super().get(collection, doc_id)

    async def create(self, collection, data):
        if "create" in self.fail_on:
            raise StoreError("create unavailable", collection=collection)
        return await super().create(collection, data)

    async def delete(self, collection, doc_id):
        if "delete" in self.fail_on:
            raise StoreError("delete unavailable", collection=collection, doc_id=doc_id)
        return await super().delete(collection, doc_id)


class SlowMenuStore(InMemoryDocumentStore):
    """Delays menu lookups per id and records how many were in flight at once."""

    def __init__(self, seed=None, delays=None):
        super().__init__(seed)
        self.delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def get(self, collection, doc_id):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(doc_id, 0))
            return await super().get(collection, doc_id)
        finally:
            self.in_flight -= 1
