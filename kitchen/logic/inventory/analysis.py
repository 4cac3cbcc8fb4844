"""Inventory analysis helpers: expiry states, category grouping, text filtering.

Expiry states are derived on demand and never stored. Items without an expiry
date are excluded from every expiry-based result.
"""
from __future__ import annotations
from datetime import date as _date
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from kitchen.domain.InventoryItem import InventoryItem
from kitchen.utilities.config import EXPIRY_WARNING_DAYS

__all__ = [
    "classify_expiry", "expired_items", "expiring_within", "expiry_summary",
    "group_by_category", "filter_items",
]

T = TypeVar("T")


def classify_expiry(item: InventoryItem, today: _date, *, window: int | None = None) -> Optional[str]:
    """Return 'expired', 'expiring' (fewer than `window` days left) or 'fresh'; None without expiry date."""
    days_left = item.days_until_expiry(today)
    if days_left is None:
        return None
    if days_left < 0:
        return "expired"
    if days_left < (window if window is not None else EXPIRY_WARNING_DAYS):
        return "expiring"
    return "fresh"


def expired_items(items: Iterable[InventoryItem], today: _date) -> List[InventoryItem]:
    return [item for item in items if classify_expiry(item, today) == "expired"]


def expiring_within(items: Iterable[InventoryItem], days: int | None = None, today: _date | None = None) -> List[InventoryItem]:
    """Items that have not expired yet but will within `days` days, soonest first."""
    today = today or _date.today()
    window = days if days is not None else EXPIRY_WARNING_DAYS
    result = [item for item in items if classify_expiry(item, today, window=window) == "expiring"]
    result.sort(key=lambda i: (i.days_until_expiry(today), i.name))
    return result


def expiry_summary(items: Sequence[InventoryItem], today: _date, *, window: int | None = None) -> Dict[str, int]:
    counts = {"expired": 0, "expiring": 0, "fresh": 0, "no_expiry": 0}
    for item in items:
        state = classify_expiry(item, today, window=window)
        counts[state or "no_expiry"] += 1
    return counts


def group_by_category(items: Iterable[T]) -> Dict[str, List[T]]:
    """Group items by display category ('Uncategorized' when blank), keeping first-seen order."""
    groups: Dict[str, List[T]] = {}
    for item in items:
        groups.setdefault(item.display_category, []).append(item)
    return groups


def filter_items(items: Iterable[T], query: str) -> List[T]:
    """Case-insensitive substring filter on name or category."""
    q = (query or "").lower()
    return [item for item in items if q in item.name.lower() or q in item.category.lower()]
