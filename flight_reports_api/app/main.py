"""
Main entrypoint for the Flight Reports API.

This module assembles the FastAPI application: it sets up logging,
loads the flight catalog, opens the report store, installs CORS and
the domain exception handlers and mounts the API router under
``/api``.  ``create_app`` builds the app; an instance is created at
module import time as ``app`` so it can be served directly::

    uvicorn flight_reports_api.app.main:app --reload

With ``strict_catalog`` enabled a missing or invalid catalog makes
``create_app`` raise ``CatalogLoadError`` and no application is built.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import NotFoundError, ReportValidationError
from .core.logging_config import setup_logging
from .services.flight_service import FlightCatalog
from .services.report_service import ReportStore

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        logger.debug("%s %s: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(ReportValidationError)
    async def report_validation_handler(request: Request, exc: ReportValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    # Malformed bodies are client errors like a blank title, so they
    # share the 400 status instead of FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived module
        ``settings``.  Tests pass their own to point the service at
        temporary files.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    CatalogLoadError
        If the catalog cannot be loaded and ``strict_catalog`` is set.
    """
    cfg = app_settings or settings
    # Initialise logging before anything else so catalog and store
    # loading can report what they found.
    setup_logging(cfg.log_level, cfg.log_file or None)

    catalog = FlightCatalog.load(cfg.resolve_path(cfg.flights_path), strict=cfg.strict_catalog)
    report_store = ReportStore(cfg.resolve_path(cfg.reports_path), catalog)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)
    app.state.settings = cfg
    app.state.catalog = catalog
    app.state.report_store = report_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    logger.info(
        "%s ready: %d flights, %d reports", cfg.project_name, len(catalog), len(report_store)
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
