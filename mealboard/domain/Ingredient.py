"""Ingredient value: name, quantity, unit (structured form used everywhere)."""
import re
from typing import Optional, Union

from mealboard.utilities.constants import KNOWN_UNITS

Number = Union[int, float]

_LEADING_QTY = re.compile(r'^\s*(\d+/\d+|\d+(?:[.,]\d+)?)\s*(.*)$')


def _parse_quantity(raw) -> Optional[Number]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip().replace(',', '.')
    if '/' in text:
        num, _, den = text.partition('/')
        try:
            return float(num) / float(den)
        except (ValueError, ZeroDivisionError):
            return None
    try:
        value = float(text)
    except ValueError:
        return None
    return int(value) if value.is_integer() else value


def format_quantity(value: Optional[Number]) -> str:
    """Display form of a quantity: at most two decimals, whole numbers without ".0"."""
    if value is None:
        return ""
    if isinstance(value, float):
        value = round(value, 2)
        if value.is_integer():
            value = int(value)
    return str(value)


class Ingredient:
    def __init__(self, name: str = "", quantity: Optional[Number] = None, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        parts = [p for p in (format_quantity(self.quantity), self.unit, self.name) if p]
        return " ".join(parts)

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    @staticmethod
    def from_text(text: str) -> "Ingredient":
        '''Parses a plain-text ingredient such as "200 g flour" or "2 eggs".'''
        text = (text or "").strip()
        match = _LEADING_QTY.match(text)
        if not match:
            return Ingredient(name=text)
        quantity = _parse_quantity(match.group(1))
        rest = match.group(2).strip()
        unit = ""
        head, _, tail = rest.partition(" ")
        if head.lower().rstrip('.') in KNOWN_UNITS and tail.strip():
            unit = head.rstrip('.')
            rest = tail.strip()
        if rest.lower().startswith("of "):
            rest = rest[3:].strip()
        return Ingredient(name=rest, quantity=quantity, unit=unit)

    @staticmethod
    def from_value(value) -> "Ingredient":
        '''Accepts either stored shape (dict or plain string) and returns the structured form.'''
        if isinstance(value, Ingredient):
            return value
        if isinstance(value, str):
            return Ingredient.from_text(value)
        d = dict(value) if isinstance(value, dict) else {}
        # older documents used default_quantity
        qty = d.get("quantity", d.get("default_quantity"))
        return Ingredient(
            name=str(d.get("name") or "").strip(),
            quantity=_parse_quantity(qty),
            unit=str(d.get("unit") or "").strip(),
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}
