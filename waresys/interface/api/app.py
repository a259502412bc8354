"""FastAPI application."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from waresys.interface.api.routes import health, tags
from waresys.util.di.container import create_container, setup_di
from waresys.util.observability import instrument_fastapi


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed parameters and bodies as 400 Bad Request."""
    logfire.warn(
        "Request validation error",
        path=request.url.path,
        errors=str(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Waresys API",
        description="Warehouse tag registry: provisioning, classification and item linking of tags",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_exception_handler(
        RequestValidationError, request_validation_error_handler
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
