from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from kitchen.api.deps import get_store
from kitchen.domain.InventoryItem import InventoryItem
from kitchen.logic.inventory.analysis import (
    classify_expiry, expired_items, expiring_within, expiry_summary, filter_items, group_by_category
)
from kitchen.store import KitchenStore
from kitchen.utilities.validators import InventoryItemInput, InventoryItemPatch, changes_from

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


def _item_view(item: InventoryItem, store: KitchenStore) -> Dict[str, Any]:
    today = store.today()
    view = item.to_dict()
    view["displayCategory"] = item.display_category
    view["status"] = classify_expiry(item, today, window=store.expiry_warning_days)
    view["daysLeft"] = item.days_until_expiry(today)
    return view


@router.get("")
def list_inventory(q: Optional[str] = Query(default=None), store: KitchenStore = Depends(get_store)):
    """Inventory grouped by category, optionally filtered by name or category text."""
    items = filter_items(store.inventory_items, q or "")
    groups = group_by_category(items)
    return {
        "count": len(items),
        "summary": expiry_summary(items, store.today(), window=store.expiry_warning_days),
        "groups": {cat: [_item_view(i, store) for i in members] for cat, members in groups.items()},
    }


@router.get("/expiring")
def list_expiring(days: Optional[int] = Query(default=None, ge=1), store: KitchenStore = Depends(get_store)):
    window = days if days is not None else store.expiry_warning_days
    items = expiring_within(store.inventory_items, window, store.today())
    return {"days": window, "count": len(items), "items": [_item_view(i, store) for i in items]}


@router.get("/expired")
def list_expired(store: KitchenStore = Depends(get_store)):
    items = expired_items(store.inventory_items, store.today())
    return {"count": len(items), "items": [_item_view(i, store) for i in items]}


@router.get("/{item_id}")
def get_inventory_item(item_id: str, store: KitchenStore = Depends(get_store)):
    item = store.get_inventory_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return _item_view(item, store)


@router.post("", status_code=201)
def add_inventory_item(body: InventoryItemInput, store: KitchenStore = Depends(get_store)):
    item = store.add_inventory_item(body.model_dump())
    return _item_view(item, store)


@router.patch("/{item_id}")
def update_inventory_item(item_id: str, body: InventoryItemPatch, store: KitchenStore = Depends(get_store)):
    store.update_inventory_item(item_id, changes_from(body, nullable=("expiry_date",)))
    return {"success": True}


@router.delete("/{item_id}")
def delete_inventory_item(item_id: str, store: KitchenStore = Depends(get_store)):
    store.delete_inventory_item(item_id)
    return {"success": True}
