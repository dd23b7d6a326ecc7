"""FastAPI application factory and error mapping."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..container import Container, get_container
from ..domain.errors import StoreAccessError, ValidationError
from .routes import router

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": exc.message, "field": exc.field_name},
    )


async def _store_access_error(request: Request, exc: StoreAccessError) -> JSONResponse:
    logger.error(
        "Storage failure while serving request",
        extra={"path": request.url.path, "source": exc.source, "error": str(exc)},
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error while reading relationship data",
            "message": str(exc),
        },
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the HTTP application around a dependency container.

    Args:
        container: Container to resolve services from. Defaults to the
            process-wide container built from configuration.
    """
    app = FastAPI(title="kinroute")
    app.state.container = container or get_container()
    app.include_router(router)
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(StoreAccessError, _store_access_error)
    return app

