"""ShoppingItem domain entity: an entry on the shopping list (reuses the inventory item fields)."""
from typing import Any, Dict

from kitchen.domain.InventoryItem import Number, StockedItem


class ShoppingItem(StockedItem):
    FIELDS = ("name", "category", "quantity", "unit", "checked")
    OPTIONAL = {"category": "", "checked": False}

    def __init__(self, id: str, name: str, category: str, quantity: Number, unit: str,
                 checked: bool = False):
        self._init_stock(id, name, category, quantity, unit)
        if not isinstance(checked, bool):
            raise ValueError(f"checked must be true or false, got {checked!r}")
        self.checked = checked

    def __str__(self) -> str:
        mark = "[x]" if self.checked else "[ ]"
        return f"{mark} {super().__str__()}"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ShoppingItem":
        return ShoppingItem(
            id=str(data["id"]),
            name=data["name"],
            category=data["category"],
            quantity=data["quantity"],
            unit=data["unit"],
            checked=data["checked"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "unit": self.unit,
            "checked": self.checked,
        }
