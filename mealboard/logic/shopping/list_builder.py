"""Shopping list builder.

Provides build_shopping_list(entries, inventory): what the menus scheduled in a
week still need once the inventory is taken into account.
"""
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Tuple

from mealboard.domain.CalendarEntry import CalendarEntry
from mealboard.domain.Inventory import Inventory, normalize_key


def _round(value):
    if isinstance(value, float):
        value = round(value, 2)
        if value.is_integer():
            return int(value)
    return value


def build_shopping_list(entries: Iterable[CalendarEntry], inventory: Inventory) -> List[Dict[str, Any]]:
    """Compute missing ingredients for resolved calendar entries.

    Args:
        entries: calendar entries with their menu attached (dangling ones are skipped).
        inventory: current stock.

    Returns:
        Sorted list of dicts: { name, unit, required, have, missing }.
        Quantity-less ingredients ("salt") appear once with required=None,
        unless the inventory holds anything with that name.
    """
    required: "OrderedDict[Tuple[str, str], Dict[str, Any]]" = OrderedDict()
    unquantified: "OrderedDict[str, str]" = OrderedDict()

    for entry in entries:
        if entry.menu is None:
            continue
        for recipe in entry.menu.recipes:
            for ing in recipe.ingredients:
                if not ing.name:
                    continue
                key = normalize_key(ing.name)
                if ing.quantity is None:
                    unquantified.setdefault(key, ing.name)
                    continue
                slot = required.setdefault((key, ing.unit.lower()), {
                    "name": ing.name, "unit": ing.unit, "quantity": 0,
                })
                slot["quantity"] += ing.quantity

    stock = inventory.totals()
    shopping_list: List[Dict[str, Any]] = []
    for k, data in required.items():
        have = stock.get(k, 0)
        missing = data["quantity"] - have
        if missing > 0:
            shopping_list.append({
                "name": data["name"],
                "unit": data["unit"],
                "required": _round(data["quantity"]),
                "have": _round(have),
                "missing": _round(missing),
            })

    quantified_names = {k for k, _ in required}
    for key, name in unquantified.items():
        if key in quantified_names or inventory.has(name):
            continue
        shopping_list.append({"name": name, "unit": "", "required": None, "have": 0, "missing": None})

    shopping_list.sort(key=lambda x: (x["name"].lower(), x["unit"]))
    return shopping_list


__all__ = ['build_shopping_list']
