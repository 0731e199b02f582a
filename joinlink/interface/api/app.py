"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from joinlink.domain.error import StoreTransportError, StoreWriteError
from joinlink.domain.error import ValidationError as DomainValidationError
from joinlink.interface.api.routes import cron, health, invitations, visitor
from joinlink.interface.error import UnauthorizedError
from joinlink.util.di.container import create_container, setup_di
from joinlink.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def _error(status_code: int, message: str, **extra: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def register_error_handlers(app_instance: FastAPI) -> None:
    """Map domain and interface errors to JSON error bodies."""

    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logfire.info("Rejected malformed request body", path=request.url.path)
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app_instance.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app_instance.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        return _error(status.HTTP_401_UNAUTHORIZED, str(exc) or "Unauthorized")

    @app_instance.exception_handler(StoreTransportError)
    async def store_read_handler(request: Request, exc: StoreTransportError):
        logfire.error("Invitation store read failed", path=request.url.path, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error reading data")

    @app_instance.exception_handler(StoreWriteError)
    async def store_write_handler(request: Request, exc: StoreWriteError):
        logfire.error("Invitation store write failed", path=request.url.path, error=str(exc))
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Error saving data", details=str(exc)
        )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container is built when omitted

    Returns:
        Configured FastAPI application
    """
    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Joinlink",
        description="Redirects visitors to the current Slack workspace invitation",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(visitor.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(cron.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
