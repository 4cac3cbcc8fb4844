from contextlib import asynccontextmanager
from typing import Callable, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kitchen.api.routes import inventory, planner, recipes, shopping
from kitchen.domain.errors import StoreNotInitializedError
from kitchen.infra.storage import JsonFileStorage
from kitchen.store import KitchenStore
from kitchen.utilities.config import DATA_DIR
from kitchen.utilities.logging_setup import APP_LOGGER

# Logging
logger = logging.getLogger(APP_LOGGER)


def default_store() -> KitchenStore:
    return KitchenStore(JsonFileStorage(DATA_DIR))


def create_app(store_factory: Optional[Callable[[], KitchenStore]] = None) -> FastAPI:
    """Build the API; the store is created at startup and disposed at shutdown."""
    factory = store_factory or default_store

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A malformed snapshot raises here and aborts startup
        store = factory().initialize()
        app.state.store = store
        logger.info("Kitchen store ready")
        try:
            yield
        finally:
            store.dispose()
            app.state.store = None

    app = FastAPI(title="Kitchen Assistant API", lifespan=lifespan)
    app.include_router(recipes.router)
    app.include_router(planner.router)
    app.include_router(inventory.router)
    app.include_router(shopping.router)

    @app.exception_handler(ValueError)
    async def _value_error(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(StoreNotInitializedError)
    async def _store_not_ready(request: Request, exc: StoreNotInitializedError):
        logger.error("Request %s reached an uninitialised store", request.url.path)
        return JSONResponse(status_code=503, content={"error": str(exc)})

    return app


app = create_app()
