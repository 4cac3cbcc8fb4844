"""Collection snapshot persistence: one JSON array per storage key."""
import json
import logging
from typing import Callable, Generic, List, Type, TypeVar

from kitchen.domain.errors import SnapshotError
from kitchen.infra.storage import KeyValueStorage

logger = logging.getLogger(__name__)

E = TypeVar("E")


class CollectionRepository(Generic[E]):
    def __init__(self, key: str, entity_cls: Type[E], seed: Callable[[], List[E]]):
        self.key = key
        self.entity_cls = entity_cls
        self.seed = seed

    def has_snapshot(self, storage: KeyValueStorage) -> bool:
        return bool(storage.get(self.key))

    def load(self, storage: KeyValueStorage) -> List[E]:
        """Load the collection, falling back to the sample records only when no snapshot exists.

        An empty string counts as "no snapshot"; an explicit ``[]`` is a real,
        empty collection. Anything that does not decode raises SnapshotError.
        """
        raw = storage.get(self.key)
        if not raw:
            records = self.seed()
            logger.info(f"No snapshot for '{self.key}', seeded {len(records)} sample records")
            return records
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in '{self.key}' snapshot: {e}")
            raise SnapshotError(self.key, f"invalid JSON ({e})") from e
        if not isinstance(data, list):
            logger.error(f"Snapshot '{self.key}' is not a JSON array")
            raise SnapshotError(self.key, f"expected a JSON array, got {type(data).__name__}")
        records = []
        for index, entry in enumerate(data):
            try:
                records.append(self.entity_cls.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.error(f"Bad record #{index} in '{self.key}' snapshot: {e!r}")
                raise SnapshotError(self.key, f"record #{index} does not match the schema ({e!r})") from e
        ids = [r.id for r in records]
        if len(set(ids)) != len(ids):
            logger.error(f"Duplicate record ids in '{self.key}' snapshot")
            raise SnapshotError(self.key, "duplicate record ids")
        logger.info(f"Loaded {len(records)} records from '{self.key}'")
        return records

    def dumps(self, records: List[E]) -> str:
        return json.dumps([r.to_dict() for r in records], ensure_ascii=False)

    def save(self, storage: KeyValueStorage, records: List[E]) -> None:
        storage.set(self.key, self.dumps(records))
