"""
Main entrypoint for the Arsatoll API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn arsatoll_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.headers import failure_alert
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import IdentifierPresenceError, PersistenceError, ValidationError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _problem(request: Request, exc, status_code: int, title: str) -> JSONResponse:
    """Build the JSON error body and failure headers for ``exc``."""
    entity_name = exc.entity_name or ""
    body = {
        "title": title,
        "status": status_code,
        "entity_name": entity_name,
        "error_key": exc.error_key,
        "message": f"error.{exc.error_key}",
        "params": entity_name,
    }
    headers = failure_alert(request.app.state.settings.app_name, entity_name, exc.error_key)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate the application's errors into HTTP responses."""

    @app.exception_handler(IdentifierPresenceError)
    async def identifier_presence_handler(request: Request, exc: IdentifierPresenceError) -> JSONResponse:
        return _problem(request, exc, status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _problem(request, exc, status.HTTP_400_BAD_REQUEST, "Constraint violation")

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("Persistence failure on %s", request.url.path, exc_info=exc)
        return _problem(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  Its database handle
        is available as ``app.state.database``.
    """
    app_settings = app_settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings.database_url)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=app_settings.api_prefix)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    @app.on_event("startup")
    def startup_event() -> None:
        # Creates the database file if needed and brings the schema up
        # to date.
        app.state.database.init_db()
        logger.info("Database ready at %s", app.state.database.path)

    return app


app = create_app()
