"""Client-side search over bulk-fetched menus and recipes."""
from typing import Iterable, List, Optional

from mealboard.domain.Menu import Menu
from mealboard.domain.Recipe import Recipe

__all__ = ["menu_matches", "filter_menus", "filter_recipes", "recipe_categories"]


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def menu_matches(menu: Menu, term: str) -> bool:
    """Case-insensitive substring match on name OR description OR any recipe name."""
    needle = (term or "").lower()
    return (
        _contains(menu.name, needle)
        or _contains(menu.description, needle)
        or any(_contains(r.name, needle) for r in menu.recipes)
    )


def filter_menus(menus: Iterable[Menu], term: str = "") -> List[Menu]:
    """An empty term keeps every menu."""
    return [m for m in menus if menu_matches(m, term)]


def filter_recipes(recipes: Iterable[Recipe], term: str = "", category: str = "") -> List[Recipe]:
    needle = (term or "").lower()
    result = []
    for r in recipes:
        if category and r.category.lower() != category.lower():
            continue
        if needle and not any(_contains(v, needle) for v in (r.name, r.description, r.cuisine, r.category)):
            continue
        result.append(r)
    return result


def recipe_categories(recipes: Iterable[Recipe]) -> List[str]:
    return sorted({r.category for r in recipes if r.category}, key=str.lower)
