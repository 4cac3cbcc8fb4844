from fastapi import Request

from kitchen.domain.errors import StoreNotInitializedError
from kitchen.store import KitchenStore


def get_store(request: Request) -> KitchenStore:
    """FastAPI dependency: the store created by the app lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreNotInitializedError("No kitchen store attached to the application")
    return store
