"""Recipe domain entity: descriptive fields, timing, servings, ingredients, instructions."""
import re
from typing import List, Optional

from mealboard.domain.Ingredient import Ingredient

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def leading_minutes(value) -> int:
    """Integer prefix of a free-text time such as "15" or "20 min"; 0 when there is none."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


class Recipe:
    def __init__(self, id: str = "", name: str = "", description: str = "", cuisine: str = "",
                 category: str = "", image: str = "", prep_time: str = "", cook_time: str = "",
                 servings: Optional[int] = None, ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.description = description
        self.cuisine = cuisine
        self.category = category
        self.image = image
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.servings = servings
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []

    def __str__(self) -> str:
        return f"{self.name} - {self.cuisine or '?'} / {self.category or '?'} - serves {self.servings or '?'}"

    __repr__ = __str__

    @property
    def total_minutes(self) -> int:
        return leading_minutes(self.prep_time) + leading_minutes(self.cook_time)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        servings = d.get("servings")
        try:
            servings = int(servings) if servings not in (None, "") else None
        except (TypeError, ValueError):
            servings = None
        return Recipe(
            id=str(d.get("id") or ""),
            name=d.get("name") or "",
            description=d.get("description") or "",
            cuisine=d.get("cuisine") or "",
            category=d.get("category") or "",
            image=d.get("image") or "",
            prep_time=str(d.get("prepTime") or ""),
            cook_time=str(d.get("cookTime") or ""),
            servings=servings,
            ingredients=[Ingredient.from_value(i) for i in d.get("ingredients") or []],
            instructions=[str(s) for s in d.get("instructions") or [] if str(s).strip()],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "cuisine": self.cuisine,
            "category": self.category,
            "image": self.image,
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
        }
