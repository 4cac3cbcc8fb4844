"""Shared behaviour of the four stored record kinds.

Records are treated as values: the store never edits one in place, it builds a
replacement through ``merged`` and swaps it into the collection.
"""
from typing import Any, Dict, Mapping, Tuple


class Entity:
    # Mutable fields in constructor order (id excluded)
    FIELDS: Tuple[str, ...] = ()
    # Fields that may be omitted on create
    OPTIONAL: Dict[str, Any] = {}

    id: str

    @classmethod
    def create(cls, id: str, fields: Mapping[str, Any]):
        '''Builds a record from a field mapping, checking required fields are present.'''
        if "id" in fields:
            raise ValueError("'id' is assigned by the store and cannot be supplied")
        unknown = set(fields) - set(cls.FIELDS)
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(sorted(unknown))}")
        missing = [f for f in cls.FIELDS if f not in fields and f not in cls.OPTIONAL]
        if missing:
            raise ValueError(f"Missing {cls.__name__} field(s): {', '.join(missing)}")
        values = dict(cls.OPTIONAL)
        values.update(fields)
        return cls(id=id, **values)

    def fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def merged(self, changes: Mapping[str, Any]):
        '''Returns a copy with the given top-level fields replaced (shallow merge).'''
        if "id" in changes:
            raise ValueError("'id' cannot be changed")
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise ValueError(f"Unknown {type(self).__name__} field(s): {', '.join(sorted(unknown))}")
        values = self.fields()
        values.update(changes)
        return type(self)(id=self.id, **values)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id and self.fields() == other.fields()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, {self.__str__()})"
