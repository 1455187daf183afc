"""Core application logic.

Subpackages:
- calendar: date normalization, week windows, entry join and the calendar view state
- menus: menu/recipe search, the add-menu picker and the menu details view
- shopping: shopping list for a calendar week
- diary: past calendar entries
"""
__all__ = ["calendar", "menus", "shopping", "diary"]
