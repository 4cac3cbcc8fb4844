"""In-memory entity collections synchronised to a key-value storage backend.

Every mutation builds the new list, swaps it in, then writes the whole
collection under its storage key before returning. Unknown ids on update,
delete and toggle are silent no-ops.
"""
import logging
import threading
from datetime import date
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

from kitchen.domain.Entity import Entity
from kitchen.domain.InventoryItem import InventoryItem
from kitchen.domain.MealPlan import MealPlan
from kitchen.domain.Recipe import Recipe
from kitchen.domain.ShoppingItem import ShoppingItem
from kitchen.events.Event_Bus import EventBus
from kitchen.events.event_helpers import publish_expired, publish_near_expiry, publish_store_changed
from kitchen.infra.Collection_Repository import CollectionRepository
from kitchen.infra.storage import KeyValueStorage
from kitchen.utilities.dates import DateLike, as_day

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class EntityCollection(Generic[E]):
    def __init__(self, repository: CollectionRepository, storage: KeyValueStorage,
                 new_id: Callable[[], str], bus: EventBus):
        self._repository = repository
        self._storage = storage
        self._new_id = new_id
        self._bus = bus
        self._items: List[E] = []
        # Held across compute, swap and save; sync routes run in a threadpool
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._repository.key

    @property
    def entity_cls(self):
        return self._repository.entity_cls

    # --- Loading / persistence ----------------------------------------------
    def load(self):
        '''
        Loads the stored snapshot, or seeds sample records and writes them when none exists.
        '''
        seeded = not self._repository.has_snapshot(self._storage)
        items = self._repository.load(self._storage)
        if seeded:
            self._commit(items)
        else:
            self._items = items
        return self

    def _commit(self, items: List[E]):
        self._items = items
        self._repository.save(self._storage, items)
        publish_store_changed(self._bus, self.key)

    # --- Reads ----------------------------------------------------------------
    @property
    def items(self) -> List[E]:
        '''
        Returns a snapshot of the records in insertion order.
        '''
        return list(self._items)

    def get(self, id: str) -> Optional[E]:
        for item in self._items:
            if item.id == id:
                return item
        return None

    def _index_of(self, id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == id:
                return i
        return -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._items))

    # --- Mutations ------------------------------------------------------------
    def _prepare(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(fields)

    def _after_change(self, item: E):
        pass

    def _unused_id(self) -> str:
        taken = {item.id for item in self._items}
        new_id = self._new_id()
        while new_id in taken:
            new_id = self._new_id()
        return new_id

    def add(self, fields: Mapping[str, Any]) -> E:
        '''
        Creates a record with a fresh id, appends it and persists the collection.
        '''
        with self._lock:
            item = self.entity_cls.create(self._unused_id(), self._prepare(fields))
            self._commit(self._items + [item])
            logger.debug(f"Added {self.key} record {item.id}")
            self._after_change(item)
        return item

    def update(self, id: str, changes: Mapping[str, Any]) -> None:
        '''
        Replaces the given top-level fields of a record; unknown ids are ignored.
        '''
        with self._lock:
            index = self._index_of(id)
            if index < 0:
                logger.debug(f"Update of missing {self.key} record {id} ignored")
                return
            item = self._items[index].merged(changes)
            items = list(self._items)
            items[index] = item
            self._commit(items)
            logger.debug(f"Updated {self.key} record {id}: {', '.join(changes)}")
            self._after_change(item)

    def delete(self, id: str) -> None:
        '''
        Removes a record if present; unknown ids are ignored.
        '''
        with self._lock:
            items = [item for item in self._items if item.id != id]
            if len(items) == len(self._items):
                logger.debug(f"Delete of missing {self.key} record {id} ignored")
                return
            self._commit(items)
            logger.debug(f"Deleted {self.key} record {id}")


class RecipeCollection(EntityCollection[Recipe]):
    def search(self, query: str) -> List[Recipe]:
        """Return recipes matching the query in collection order; a blank query returns all."""
        if not query or not query.strip():
            return self.items
        return [recipe for recipe in self._items if recipe.matches(query)]


class MealPlanCollection(EntityCollection[MealPlan]):
    def plan_for(self, day: DateLike) -> Optional[MealPlan]:
        '''
        Returns the first plan on the given calendar day; later plans for that day stay shadowed.
        '''
        target = as_day(day)
        for plan in self._items:
            if plan.day == target:
                return plan
        return None

    def plans_for(self, day: DateLike) -> List[MealPlan]:
        target = as_day(day)
        return [plan for plan in self._items if plan.day == target]


class InventoryCollection(EntityCollection[InventoryItem]):
    def __init__(self, repository: CollectionRepository, storage: KeyValueStorage,
                 new_id: Callable[[], str], bus: EventBus,
                 clock: Callable[[], date], warning_days: int):
        super().__init__(repository, storage, new_id, bus)
        self._clock = clock
        self._warning_days = warning_days

    def _after_change(self, item: InventoryItem):
        self._evaluate_item(item)

    def _evaluate_item(self, item: InventoryItem):
        days_left = item.days_until_expiry(self._clock())
        if days_left is None:
            return
        if days_left < 0:
            publish_expired(self._bus, item, days_left)
        elif days_left < self._warning_days:
            publish_near_expiry(self._bus, item, days_left, self._warning_days)


class ShoppingCollection(EntityCollection[ShoppingItem]):
    def _prepare(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        prepared = dict(fields)
        # New entries always start unchecked
        prepared["checked"] = False
        return prepared

    def toggle(self, id: str) -> None:
        '''
        Flips the checked flag of an item; unknown ids are ignored.
        '''
        with self._lock:
            item = self.get(id)
            if item is None:
                logger.debug(f"Toggle of missing shopping item {id} ignored")
                return
            self.update(id, {"checked": not item.checked})
