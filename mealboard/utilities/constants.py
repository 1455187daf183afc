from typing import Final

# Calendar documents always carry the date in this fixed-width form
DATE_FORMAT: Final[str] = "%Y-%m-%d"

RECIPES: Final[str] = "recipes"
MENUS: Final[str] = "menus"
CALENDAR: Final[str] = "calendar"
INVENTORY: Final[str] = "inventory"
COLLECTIONS: Final[tuple[str, ...]] = (RECIPES, MENUS, CALENDAR, INVENTORY)

DAYS_IN_WEEK: Final[int] = 7

# Unit tokens recognised when a plain-text ingredient ("200 g flour") is normalized
KNOWN_UNITS: Final[frozenset[str]] = frozenset({
    "g", "gram", "grams", "kg", "mg",
    "ml", "l", "liter", "liters", "litre", "litres", "dl", "cl",
    "tsp", "teaspoon", "teaspoons", "tbsp", "tablespoon", "tablespoons",
    "cup", "cups", "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
    "pcs", "pc", "piece", "pieces", "clove", "cloves", "slice", "slices",
    "can", "cans", "pinch", "bunch", "handful",
})
