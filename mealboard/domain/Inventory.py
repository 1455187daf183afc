"""Inventory aggregate: stocked items (structured ingredients with a document id)."""
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from mealboard.domain.Ingredient import Ingredient, Number


def normalize_key(name: str) -> str:
    """Normalize an ingredient name for matching (case + basic plural handling)."""
    if not isinstance(name, str):
        return ""
    n = name.strip().lower()
    if n.endswith('ies') and len(n) > 3:
        n = n[:-3] + 'y'
    elif n.endswith('oes') and len(n) > 3:  # tomatoes -> tomato
        n = n[:-3] + 'o'
    elif n.endswith('es') and len(n) > 2 and n[-3] in 'sxz':  # boxes -> box
        n = n[:-2]
    elif n.endswith('s') and not n.endswith('ss') and len(n) > 1:
        n = n[:-1]
    return n


class InventoryItem(Ingredient):
    def __init__(self, id: str = "", name: str = "", quantity: Optional[Number] = None, unit: str = ""):
        super().__init__(name, quantity, unit)
        self.id = id

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        base = Ingredient.from_value(d)
        return InventoryItem(str(d.get("id") or ""), base.name, base.quantity, base.unit)

    def to_dict(self):
        return {"id": self.id, **super().to_dict()}


class Inventory:
    def __init__(self, items: Optional[List[InventoryItem]] = None):
        self.items: List[InventoryItem] = list(items) if items else []

    def add_item(self, item: InventoryItem):
        self.items.append(item)

    def remove_item(self, item_id: str) -> bool:
        before = len(self.items)
        self.items = [i for i in self.items if i.id != item_id]
        return len(self.items) != before

    def get_items(self):
        '''Returns items sorted by name.'''
        return sorted(self.items, key=lambda i: (i.name.lower(), i.unit))

    def totals(self) -> Dict[Tuple[str, str], Number]:
        """Stocked quantity per (normalized name, lowercased unit)."""
        stock: Dict[Tuple[str, str], Number] = defaultdict(int)
        for item in self.items:
            if item.quantity is None:
                continue
            stock[(normalize_key(item.name), item.unit.lower())] += item.quantity
        return dict(stock)

    def has(self, name: str) -> bool:
        key = normalize_key(name)
        return any(normalize_key(i.name) == key for i in self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.get_items())
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
