"""InventoryItem domain entity: name, category, quantity, unit, optional expiry date."""
from datetime import date
from typing import Any, Dict, Optional, Union

from kitchen.domain.Entity import Entity
from kitchen.utilities.constants import UNCATEGORIZED
from kitchen.utilities.dates import as_day, format_date, parse_optional_date

Number = Union[int, float]


class StockedItem(Entity):
    """Fields shared by pantry stock and shopping list entries."""

    def _init_stock(self, id: str, name: str, category: str, quantity: Number, unit: str):
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
            raise ValueError(f"Quantity must be a number, got {quantity!r}")
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        for label, text in (("name", name), ("category", category), ("unit", unit)):
            if not isinstance(text, str):
                raise ValueError(f"{type(self).__name__} {label} must be text, got {text!r}")
        self.id = id
        self.name = name
        self.category = category
        self.quantity = quantity
        self.unit = unit

    @property
    def display_category(self) -> str:
        '''Category used for grouping; the stored value is left untouched.'''
        return self.category or UNCATEGORIZED

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} ({self.display_category})"


class InventoryItem(StockedItem):
    FIELDS = ("name", "category", "quantity", "unit", "expiry_date")
    OPTIONAL = {"category": "", "expiry_date": None}

    def __init__(self, id: str, name: str, category: str, quantity: Number, unit: str,
                 expiry_date: Optional[date] = None):
        self._init_stock(id, name, category, quantity, unit)
        if expiry_date is not None and not isinstance(expiry_date, date):
            raise ValueError(f"Expiry date must be a date, got {type(expiry_date).__name__}")
        self.expiry_date = expiry_date

    def days_until_expiry(self, today: date) -> Optional[int]:
        if self.expiry_date is None:
            return None
        return (as_day(self.expiry_date) - today).days

    def __str__(self) -> str:
        text = super().__str__()
        if self.expiry_date:
            text += f" - Exp: {as_day(self.expiry_date).isoformat()}"
        return text

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "InventoryItem":
        return InventoryItem(
            id=str(data["id"]),
            name=data["name"],
            category=data["category"],
            quantity=data["quantity"],
            unit=data["unit"],
            expiry_date=parse_optional_date(data.get("expiryDate")),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "unit": self.unit,
        }
        # Absent expiry is omitted, matching the original storage format
        if self.expiry_date is not None:
            d["expiryDate"] = format_date(self.expiry_date)
        return d
