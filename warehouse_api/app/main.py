"""
Main entrypoint for the Warehouse Inventory API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn warehouse_api.app.main:app

On startup the MongoDB store is opened (unless one was passed in) and
an empty product collection is seeded from the bundled JSON file.  A
seed failure propagates out of the startup hook, so the server never
starts accepting requests without data.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .api.routes import router
from .core.config import Settings, settings
from .core.db import ProductStore, open_store
from .core.logging_config import setup_logging
from .core.seed import seed_products

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def create_app(store: Optional[ProductStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ProductStore]
        Store to serve requests from.  When omitted, a MongoDB
        connection is opened from ``app_settings`` during startup.
    app_settings : Optional[Settings]
        Configuration; defaults to the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, docs_url="/swag")
    app.state.settings = cfg
    app.state.store = store
    app.state.mongo_client = None

    app.include_router(router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed input is a client error like any other bad field.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_errors(exc)},
        )

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.exception("Store error while handling %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Starlette re-raises after this handler, so the server logs the traceback.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": SERVER_ERROR_MESSAGE},
        )

    @app.on_event("startup")
    def startup_event() -> None:
        if app.state.store is None:
            client, opened_store = open_store(cfg)
            app.state.mongo_client = client
            app.state.store = opened_store
        if cfg.seed_on_startup:
            seed_products(app.state.store, cfg.seed_file)

    @app.on_event("shutdown")
    def shutdown_event() -> None:
        if app.state.mongo_client is not None:
            app.state.mongo_client.close()
            app.state.mongo_client = None
            logger.info("MongoDB connection closed")

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Return validation errors reduced to location and message."""
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
