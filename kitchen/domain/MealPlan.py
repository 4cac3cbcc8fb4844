"""MealPlan domain entity: one calendar day and the recipes planned for it.

Slots hold recipe ids only. They are weak references: a slot may name a recipe
that was deleted since, and the store resolves such a slot to "no recipe".
"""
from datetime import date as _date
from typing import Any, Dict, List, Optional, Union

from kitchen.domain.Entity import Entity
from kitchen.utilities.constants import MEAL_SLOTS, SNACKS_SLOT
from kitchen.utilities.dates import DateLike, as_day, format_date, parse_date

Meals = Dict[str, Union[str, List[str]]]


def _clean_meals(meals: Optional[Dict[str, Any]]) -> Meals:
    if meals is not None and not isinstance(meals, dict):
        raise ValueError(f"Meals must be a mapping of slot to recipe id, got {meals!r}")
    clean: Meals = {}
    for slot, value in (meals or {}).items():
        if slot not in MEAL_SLOTS and slot != SNACKS_SLOT:
            raise ValueError(f"Unknown meal slot: {slot!r}")
        if value is None:
            continue
        if slot == SNACKS_SLOT:
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"Snacks must be a list of recipe ids, got {value!r}")
            clean[slot] = list(value)
        elif isinstance(value, str):
            clean[slot] = value
        else:
            raise ValueError(f"Meal slot {slot!r} takes one recipe id, got {value!r}")
    return clean


class MealPlan(Entity):
    FIELDS = ("date", "meals")
    OPTIONAL = {"meals": None}

    def __init__(self, id: str, date: DateLike, meals: Optional[Dict[str, Any]] = None):
        if not isinstance(date, _date):
            raise ValueError(f"Meal plan date must be a date, got {type(date).__name__}")
        self.id = id
        self.date = date
        self.meals = _clean_meals(meals)

    @property
    def day(self) -> _date:
        return as_day(self.date)

    def recipe_id(self, slot: str) -> Optional[str]:
        if slot not in MEAL_SLOTS:
            raise ValueError(f"Unknown meal slot: {slot!r}")
        return self.meals.get(slot)

    @property
    def snacks(self) -> List[str]:
        return list(self.meals.get(SNACKS_SLOT, []))

    def with_meal(self, slot: str, recipe_id: Optional[str]) -> Meals:
        '''
        Returns a copy of the meals mapping with one slot set, or removed when recipe_id is empty.
        '''
        if slot not in MEAL_SLOTS:
            raise ValueError(f"Unknown meal slot: {slot!r}")
        meals = {k: (list(v) if isinstance(v, list) else v) for k, v in self.meals.items()}
        if recipe_id:
            meals[slot] = recipe_id
        else:
            meals.pop(slot, None)
        return meals

    def __str__(self) -> str:
        planned = ", ".join(f"{k}: {v}" for k, v in self.meals.items()) or "nothing planned"
        return f"{self.day.isoformat()} - {planned}"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "MealPlan":
        return MealPlan(
            id=str(data["id"]),
            date=parse_date(data["date"]),
            meals=data.get("meals") or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": format_date(self.date),
            "meals": {k: (list(v) if isinstance(v, list) else v) for k, v in self.meals.items()},
        }
