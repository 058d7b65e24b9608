"""FastAPI application."""

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster.config import Settings
from roster.domain.error import DomainError
from roster.interface.api.routes import health, invites, onboarding
from roster.interface.error import InterfaceError, status_for
from roster.util.di.container import create_container, setup_di
from roster.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def handle_error(
    request: Request, exc: DomainError | InterfaceError
) -> JSONResponse:
    """Render domain and interface errors as JSON responses."""
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Roster API",
        description="Backend API for Roster - club, company and player onboarding",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.email.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.add_exception_handler(DomainError, handle_error)
    app_instance.add_exception_handler(InterfaceError, handle_error)

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(onboarding.router)

    return app_instance


# Logfire must be configured before this module is imported (see start_app.py)
app = create_app()
