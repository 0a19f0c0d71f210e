"""
Main entrypoint for the Service Catalog API.

This module assembles the FastAPI application: logging, CORS, the
request log middleware, the store and the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn service_catalog_api.app.main:app --reload

Settings and a store may be passed to ``create_app`` explicitly; the
test suite does this to get an isolated in‑memory store per test.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .api.v4.router import router as v4_router
from .core.config import BASE_PATH, Settings, settings
from .core.db import build_store, close_store, init_store
from .core.logging_config import setup_logging
from .stores import Store, StoreError


def create_app(app_settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Settings, optional
        Configuration to use; defaults to the module level ``settings``.
    store : Store, optional
        Store to serve from; defaults to the backend selected by
        ``app_settings.store_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.store = store if store is not None else build_store(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        query = f"?{request.url.query}" if request.url.query else ""
        logger.info("%s %s%s", request.method, request.url.path, query)
        return await call_next(request)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> Response:
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    app.include_router(v4_router, prefix=BASE_PATH)

    @app.on_event("startup")
    async def startup_event() -> None:
        await init_store(app.state.store, app_settings)
        logger.info(
            "Serving %s with the %s store", BASE_PATH, type(app.state.store).__name__
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await close_store(app.state.store)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
