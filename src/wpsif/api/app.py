"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wpsif.api.routes import employees, employer, health, reference, session, sif
from wpsif.core.config import AppSettings, get_settings
from wpsif.core.exceptions import (
    EmployeeNotFoundError,
    EmptyPayrollError,
    GenerationBlockedError,
    ImportFormatError,
    SessionStoreError,
    SifEncodingError,
)
from wpsif.core.logging import configure_logging
from wpsif.core.protocols import ISessionStore
from wpsif.session import PayrollWorkspace, create_session_store


def create_app(
    settings: AppSettings | None = None,
    store: ISessionStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Wire the session workspace for the single active session."""
        configure_logging(settings)
        workspace = PayrollWorkspace(store if store is not None else create_session_store(settings))
        workspace.load()
        app.state.settings = settings
        app.state.workspace = workspace
        yield

    app = FastAPI(
        title="WPS SIF Workspace",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(reference.router)
    app.include_router(session.router, prefix="/session")
    app.include_router(employees.router, prefix="/employees")
    app.include_router(employer.router, prefix="/employer")
    app.include_router(sif.router, prefix="/sif")
    _register_error_handlers(app)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ImportFormatError)
    async def _import_format(request: Request, exc: ImportFormatError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "reason": exc.reason},
        )

    @app.exception_handler(GenerationBlockedError)
    async def _generation_blocked(request: Request, exc: GenerationBlockedError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.errors})

    @app.exception_handler(SifEncodingError)
    @app.exception_handler(EmptyPayrollError)
    async def _not_encodable(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": [str(exc)]})

    @app.exception_handler(EmployeeNotFoundError)
    async def _not_found(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SessionStoreError)
    async def _store_unavailable(request: Request, exc: SessionStoreError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": "Session storage unavailable"})
