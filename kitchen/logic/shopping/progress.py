"""Shopping list progress (checked vs total items)."""
from typing import Dict, Iterable, Union

from kitchen.domain.ShoppingItem import ShoppingItem


def shopping_progress(items: Iterable[ShoppingItem]) -> Dict[str, Union[int, float]]:
    items = list(items)
    total = len(items)
    checked = sum(1 for item in items if item.checked)
    percent = (checked / total) * 100 if total > 0 else 0
    return {"total": total, "checked": checked, "percent": percent}
