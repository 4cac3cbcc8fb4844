from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from kitchen.api.deps import get_store
from kitchen.store import KitchenStore
from kitchen.utilities.validators import RecipeInput, RecipePatch, changes_from

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(q: Optional[str] = Query(default=None), store: KitchenStore = Depends(get_store)):
    """All recipes, or those matching the search text in name, description, tags or ingredients."""
    recipes = store.search_recipes(q or "")
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, store: KitchenStore = Depends(get_store)):
    recipe = store.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("", status_code=201)
def add_recipe(body: RecipeInput, store: KitchenStore = Depends(get_store)):
    return store.add_recipe(body.model_dump()).to_dict()


@router.patch("/{recipe_id}")
def update_recipe(recipe_id: str, body: RecipePatch, store: KitchenStore = Depends(get_store)):
    store.update_recipe(recipe_id, changes_from(body))
    return {"success": True}


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, store: KitchenStore = Depends(get_store)):
    store.delete_recipe(recipe_id)
    return {"success": True}
