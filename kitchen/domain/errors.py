"""Errors raised at the kitchen store boundary."""


class KitchenError(Exception):
    """Base class for kitchen store errors."""


class SnapshotError(KitchenError, ValueError):
    """A persisted collection snapshot could not be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Malformed snapshot for '{key}': {reason}")
        self.key = key
        self.reason = reason


class StoreNotInitializedError(KitchenError, RuntimeError):
    """The store was used before initialize() or after dispose()."""
