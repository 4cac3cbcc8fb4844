"""Weekly planner helpers built on the kitchen store.

Weeks start on Monday. A day shows the first meal plan stored for it; slot
values are resolved through the store, so a deleted recipe shows as None.
"""
from __future__ import annotations
from datetime import date as _date, timedelta
from typing import Any, Dict, List, Optional

from kitchen.domain.MealPlan import MealPlan
from kitchen.store import KitchenStore
from kitchen.utilities.constants import MEAL_SLOTS
from kitchen.utilities.dates import DateLike, as_day

__all__ = ["week_start", "week_days", "set_meal", "week_overview"]


def week_start(day: DateLike) -> _date:
    d = as_day(day)
    return d - timedelta(days=d.weekday())


def week_days(start: DateLike) -> List[_date]:
    first = as_day(start)
    return [first + timedelta(days=i) for i in range(7)]


def set_meal(store: KitchenStore, day: DateLike, slot: str, recipe_id: Optional[str]) -> Optional[MealPlan]:
    """Assign (or clear, with recipe_id=None) one meal slot for a day.

    With a plan already on that day its meals are copied, the slot is set or
    removed, and the whole mapping is written back. Without one, a new plan is
    created only when a recipe is given. Returns the day's plan afterwards.
    """
    if slot not in MEAL_SLOTS:
        raise ValueError(f"Unknown meal slot: {slot!r}")
    existing = store.meal_plan_for(day)
    if existing is not None:
        store.update_meal_plan(existing.id, {"meals": existing.with_meal(slot, recipe_id)})
        return store.get_meal_plan(existing.id)
    if recipe_id:
        return store.add_meal_plan({"date": day, "meals": {slot: recipe_id}})
    return None


def _recipe_summary(store: KitchenStore, recipe_id: Optional[str]) -> Optional[Dict[str, Any]]:
    recipe = store.resolve_recipe(recipe_id)
    if recipe is None:
        return None
    return {"id": recipe.id, "name": recipe.name, "description": recipe.description}


def week_overview(store: KitchenStore, start: DateLike) -> List[Dict[str, Any]]:
    """One entry per day of the week beginning at `start` with resolved recipes."""
    days = []
    for day in week_days(start):
        plan = store.meal_plan_for(day)
        entry: Dict[str, Any] = {
            "date": day,
            "plan_id": plan.id if plan else None,
        }
        for slot in MEAL_SLOTS:
            entry[slot] = _recipe_summary(store, plan.recipe_id(slot) if plan else None)
        snacks = [_recipe_summary(store, rid) for rid in (plan.snacks if plan else [])]
        entry["snacks"] = [s for s in snacks if s is not None]
        days.append(entry)
    return days
