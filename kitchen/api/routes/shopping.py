from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from kitchen.api.deps import get_store
from kitchen.logic.inventory.analysis import filter_items, group_by_category
from kitchen.logic.shopping.progress import shopping_progress
from kitchen.store import KitchenStore
from kitchen.utilities.validators import ShoppingItemInput, ShoppingItemPatch, changes_from

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


@router.get("")
def list_shopping(q: Optional[str] = Query(default=None), store: KitchenStore = Depends(get_store)):
    """Shopping list grouped by category with progress over the whole list."""
    everything = store.shopping_items
    items = filter_items(everything, q or "")
    return {
        "count": len(items),
        "progress": shopping_progress(everything),
        "groups": {cat: [i.to_dict() for i in members] for cat, members in group_by_category(items).items()},
    }


@router.get("/{item_id}")
def get_shopping_item(item_id: str, store: KitchenStore = Depends(get_store)):
    item = store.get_shopping_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Shopping item not found")
    return item.to_dict()


@router.post("", status_code=201)
def add_shopping_item(body: ShoppingItemInput, store: KitchenStore = Depends(get_store)):
    return store.add_shopping_item(body.model_dump()).to_dict()


@router.patch("/{item_id}")
def update_shopping_item(item_id: str, body: ShoppingItemPatch, store: KitchenStore = Depends(get_store)):
    store.update_shopping_item(item_id, changes_from(body))
    return {"success": True}


@router.post("/{item_id}/toggle")
def toggle_shopping_item(item_id: str, store: KitchenStore = Depends(get_store)):
    store.toggle_shopping_item(item_id)
    item = store.get_shopping_item(item_id)
    return {"success": True, "item": item.to_dict() if item else None}


@router.delete("/{item_id}")
def delete_shopping_item(item_id: str, store: KitchenStore = Depends(get_store)):
    store.delete_shopping_item(item_id)
    return {"success": True}
