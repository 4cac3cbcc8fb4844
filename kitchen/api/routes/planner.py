from datetime import date as _date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from kitchen.api.deps import get_store
from kitchen.infra.pdf_utils import generate_pdf_for_week
from kitchen.logic.planner.week import set_meal, week_overview, week_start
from kitchen.store import KitchenStore
from kitchen.utilities.constants import MEAL_SLOTS
from kitchen.utilities.validators import MealPlanInput, MealPlanPatch, MealSlotInput, changes_from

router = APIRouter(prefix="/api/meal-plans", tags=["planner"])


def _serialize_week(overview: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [dict(day, date=day["date"].isoformat()) for day in overview]


@router.get("")
def list_meal_plans(store: KitchenStore = Depends(get_store)):
    plans = store.meal_plans
    return {"count": len(plans), "meal_plans": [p.to_dict() for p in plans]}


@router.get("/week")
def get_week(start: Optional[_date] = Query(default=None), store: KitchenStore = Depends(get_store)):
    """Week (Monday to Sunday) containing `start`, defaulting to the current week."""
    first = week_start(start or store.today())
    return {"start": first.isoformat(), "days": _serialize_week(week_overview(store, first))}


@router.get("/week/pdf")
def export_week_pdf(start: Optional[_date] = Query(default=None), store: KitchenStore = Depends(get_store)):
    first = week_start(start or store.today())
    pdf_bytes = generate_pdf_for_week(week_overview(store, first))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=meal_plan_{first.isoformat()}.pdf"
        },
    )


@router.get("/day/{day}")
def get_day(day: _date, store: KitchenStore = Depends(get_store)):
    plan = store.meal_plan_for(day)
    return {"date": day.isoformat(), "plan": plan.to_dict() if plan else None}


@router.put("/day/{day}/{slot}")
def put_day_slot(day: _date, slot: str, body: MealSlotInput, store: KitchenStore = Depends(get_store)):
    """Assign a recipe to a meal slot of a day, or clear it with recipe_id null."""
    if slot not in MEAL_SLOTS:
        raise HTTPException(status_code=400, detail=f"Invalid meal slot: {slot}")
    plan = set_meal(store, day, slot, body.recipe_id)
    return {"date": day.isoformat(), "plan": plan.to_dict() if plan else None}


@router.get("/{plan_id}")
def get_meal_plan(plan_id: str, store: KitchenStore = Depends(get_store)):
    plan = store.get_meal_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan.to_dict()


@router.post("", status_code=201)
def add_meal_plan(body: MealPlanInput, store: KitchenStore = Depends(get_store)):
    plan = store.add_meal_plan({"date": body.date, "meals": body.meals.to_meals()})
    return plan.to_dict()


@router.patch("/{plan_id}")
def update_meal_plan(plan_id: str, body: MealPlanPatch, store: KitchenStore = Depends(get_store)):
    changes = changes_from(body)
    if body.meals is not None:
        # Replaces the whole meals mapping
        changes["meals"] = body.meals.to_meals()
    store.update_meal_plan(plan_id, changes)
    return {"success": True}


@router.delete("/{plan_id}")
def delete_meal_plan(plan_id: str, store: KitchenStore = Depends(get_store)):
    store.delete_meal_plan(plan_id)
    return {"success": True}
