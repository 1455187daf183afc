"""Menu domain entity: a named collection of embedded recipe snapshots."""
from typing import List, Optional

from mealboard.domain.Recipe import Recipe


class Menu:
    def __init__(self, id: str = "", name: str = "", description: str = "",
                 recipes: Optional[List[Recipe]] = None):
        self.id = id
        self.name = name
        self.description = description
        # snapshots, not live references to documents in the recipes collection
        self.recipes = recipes[:] if recipes else []

    def __str__(self) -> str:
        return f"{self.name} ({len(self.recipes)} recipes)"

    __repr__ = __str__

    @property
    def total_minutes(self) -> int:
        return sum(r.total_minutes for r in self.recipes)

    @property
    def servings(self) -> Optional[int]:
        return self.recipes[0].servings if self.recipes else None

    @property
    def cover_image(self) -> Optional[str]:
        if self.recipes and self.recipes[0].image:
            return self.recipes[0].image
        return None

    def recipe_names(self) -> List[str]:
        return [r.name for r in self.recipes]

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Menu(
            id=str(d.get("id") or ""),
            name=d.get("name") or "",
            description=d.get("description") or "",
            recipes=[Recipe.from_dict(r) for r in d.get("recipes") or []],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "recipes": [r.to_dict() for r in self.recipes],
        }

    def summary(self):
        """Card-sized view used by the calendar and the menu picker."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "recipe_names": self.recipe_names(),
            "total_minutes": self.total_minutes,
            "servings": self.servings,
            "cover_image": self.cover_image,
        }
