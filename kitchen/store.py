"""Kitchen store: the single owner of recipes, meal plans, inventory and shopping items.

The store is constructed explicitly and handed to whatever needs it. It must be
initialised before use; any access before ``initialize()`` or after
``dispose()`` raises StoreNotInitializedError.

    store = KitchenStore(JsonFileStorage(DATA_DIR))
    with store:
        store.add_recipe({...})
"""
import logging
from datetime import date
from typing import Any, Callable, List, Mapping, Optional
from uuid import uuid4

from kitchen.domain.Collection import (
    InventoryCollection, MealPlanCollection, RecipeCollection, ShoppingCollection
)
from kitchen.domain.errors import StoreNotInitializedError
from kitchen.domain.InventoryItem import InventoryItem
from kitchen.domain.MealPlan import MealPlan
from kitchen.domain.Recipe import Recipe
from kitchen.domain.ShoppingItem import ShoppingItem
from kitchen.events.Event_Bus import EventBus
from kitchen.infra.Collection_Repository import CollectionRepository
from kitchen.infra.seed_data import (
    sample_inventory_items, sample_meal_plans, sample_recipes, sample_shopping_items
)
from kitchen.infra.storage import KeyValueStorage
from kitchen.utilities.config import EXPIRY_WARNING_DAYS
from kitchen.utilities.constants import (
    INVENTORY_ITEMS_KEY, MEAL_PLANS_KEY, RECIPES_KEY, SHOPPING_ITEMS_KEY
)
from kitchen.utilities.dates import DateLike

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid4().hex


class KitchenStore:
    def __init__(self, storage: KeyValueStorage, *,
                 id_factory: Optional[Callable[[], str]] = None,
                 clock: Optional[Callable[[], date]] = None,
                 event_bus: Optional[EventBus] = None,
                 expiry_warning_days: int = EXPIRY_WARNING_DAYS):
        self._storage = storage
        self._new_id = id_factory or new_id
        self._clock = clock or date.today
        self.events = event_bus or EventBus()
        self.expiry_warning_days = expiry_warning_days
        self._recipes: Optional[RecipeCollection] = None
        self._meal_plans: Optional[MealPlanCollection] = None
        self._inventory: Optional[InventoryCollection] = None
        self._shopping: Optional[ShoppingCollection] = None
        self._initialized = False

    # --- Lifecycle --------------------------------------------------------------
    def initialize(self) -> "KitchenStore":
        '''
        Loads all four collections (seeding any that were never saved).
        A malformed snapshot raises SnapshotError and leaves the store uninitialised.
        '''
        if self._initialized:
            return self
        today = self._clock()
        recipes = RecipeCollection(
            CollectionRepository(RECIPES_KEY, Recipe, sample_recipes),
            self._storage, self._new_id, self.events).load()
        meal_plans = MealPlanCollection(
            CollectionRepository(MEAL_PLANS_KEY, MealPlan, lambda: sample_meal_plans(today)),
            self._storage, self._new_id, self.events).load()
        inventory = InventoryCollection(
            CollectionRepository(INVENTORY_ITEMS_KEY, InventoryItem, lambda: sample_inventory_items(today)),
            self._storage, self._new_id, self.events,
            clock=self._clock, warning_days=self.expiry_warning_days).load()
        shopping = ShoppingCollection(
            CollectionRepository(SHOPPING_ITEMS_KEY, ShoppingItem, sample_shopping_items),
            self._storage, self._new_id, self.events).load()
        self._recipes, self._meal_plans = recipes, meal_plans
        self._inventory, self._shopping = inventory, shopping
        self._initialized = True
        logger.info("Kitchen store initialised: %d recipes, %d meal plans, %d inventory items, %d shopping items",
                    len(recipes), len(meal_plans), len(inventory), len(shopping))
        return self

    def dispose(self) -> None:
        self._recipes = self._meal_plans = self._inventory = self._shopping = None
        self._initialized = False
        logger.info("Kitchen store disposed")

    @property
    def initialized(self) -> bool:
        return self._initialized

    def __enter__(self) -> "KitchenStore":
        return self.initialize()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _require(self, collection):
        if not self._initialized or collection is None:
            raise StoreNotInitializedError("KitchenStore used outside initialize()/dispose()")
        return collection

    @property
    def recipe_collection(self) -> RecipeCollection:
        return self._require(self._recipes)

    @property
    def meal_plan_collection(self) -> MealPlanCollection:
        return self._require(self._meal_plans)

    @property
    def inventory_collection(self) -> InventoryCollection:
        return self._require(self._inventory)

    @property
    def shopping_collection(self) -> ShoppingCollection:
        return self._require(self._shopping)

    def today(self) -> date:
        return self._clock()

    # --- Recipes ----------------------------------------------------------------
    @property
    def recipes(self) -> List[Recipe]:
        return self.recipe_collection.items

    def get_recipe(self, id: str) -> Optional[Recipe]:
        return self.recipe_collection.get(id)

    def add_recipe(self, fields: Mapping[str, Any]) -> Recipe:
        return self.recipe_collection.add(fields)

    def update_recipe(self, id: str, changes: Mapping[str, Any]) -> None:
        self.recipe_collection.update(id, changes)

    def delete_recipe(self, id: str) -> None:
        self.recipe_collection.delete(id)

    def search_recipes(self, query: str) -> List[Recipe]:
        return self.recipe_collection.search(query)

    def resolve_recipe(self, recipe_id: Optional[str]) -> Optional[Recipe]:
        """Follow a weak recipe reference; empty or dangling ids resolve to None."""
        if not recipe_id:
            return None
        return self.recipe_collection.get(recipe_id)

    # --- Meal plans ---------------------------------------------------------------
    @property
    def meal_plans(self) -> List[MealPlan]:
        return self.meal_plan_collection.items

    def get_meal_plan(self, id: str) -> Optional[MealPlan]:
        return self.meal_plan_collection.get(id)

    def meal_plan_for(self, day: DateLike) -> Optional[MealPlan]:
        return self.meal_plan_collection.plan_for(day)

    def add_meal_plan(self, fields: Mapping[str, Any]) -> MealPlan:
        return self.meal_plan_collection.add(fields)

    def update_meal_plan(self, id: str, changes: Mapping[str, Any]) -> None:
        self.meal_plan_collection.update(id, changes)

    def delete_meal_plan(self, id: str) -> None:
        self.meal_plan_collection.delete(id)

    # --- Inventory ----------------------------------------------------------------
    @property
    def inventory_items(self) -> List[InventoryItem]:
        return self.inventory_collection.items

    def get_inventory_item(self, id: str) -> Optional[InventoryItem]:
        return self.inventory_collection.get(id)

    def add_inventory_item(self, fields: Mapping[str, Any]) -> InventoryItem:
        return self.inventory_collection.add(fields)

    def update_inventory_item(self, id: str, changes: Mapping[str, Any]) -> None:
        self.inventory_collection.update(id, changes)

    def delete_inventory_item(self, id: str) -> None:
        self.inventory_collection.delete(id)

    # --- Shopping list --------------------------------------------------------------
    @property
    def shopping_items(self) -> List[ShoppingItem]:
        return self.shopping_collection.items

    def get_shopping_item(self, id: str) -> Optional[ShoppingItem]:
        return self.shopping_collection.get(id)

    def add_shopping_item(self, fields: Mapping[str, Any]) -> ShoppingItem:
        return self.shopping_collection.add(fields)

    def update_shopping_item(self, id: str, changes: Mapping[str, Any]) -> None:
        self.shopping_collection.update(id, changes)

    def delete_shopping_item(self, id: str) -> None:
        self.shopping_collection.delete(id)

    def toggle_shopping_item(self, id: str) -> None:
        self.shopping_collection.toggle(id)
