"""
Input validation schemas using Pydantic for the JSON API.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from mealboard.logic.calendar.dates import normalize_date


class CalendarEntryInput(BaseModel):
    """Schema for assigning a menu to a calendar day."""
    date: str = Field(..., min_length=10, description="YYYY-MM-DD")
    menu_id: str = Field(..., min_length=1)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        """Accept any ISO date/datetime and keep only the calendar day."""
        try:
            return normalize_date(v).isoformat()
        except ValueError:
            raise ValueError('date must be an ISO date (YYYY-MM-DD)')

    @field_validator('menu_id')
    @classmethod
    def strip_whitespace(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('menu_id cannot be empty')
        return v

    @property
    def day(self) -> date:
        return normalize_date(self.date)


class InventoryItemInput(BaseModel):
    """Schema for adding an inventory item."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: Optional[float] = Field(None, ge=0, le=100000)
    unit: str = Field("", max_length=20)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip()

    @field_validator('unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('quantity')
    @classmethod
    def integral_quantity(cls, v):
        """Store whole numbers as int."""
        if v is not None and float(v).is_integer():
            return int(v)
        return v
