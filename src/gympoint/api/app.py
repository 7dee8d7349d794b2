"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from gympoint.api.dependencies import (
    build_job_queue,
    close_job_queue,
    close_store,
    init_job_queue,
    init_store,
)
from gympoint.api.models import APIResponse
from gympoint.api.routes import registrations
from gympoint.config import Settings, get_settings
from gympoint.registrations import InvalidPeriodError, PastDateError
from gympoint.store import (
    PlanNotFoundError,
    RegistrationNotFoundError,
    StoreError,
    StudentNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from gympoint.jobs.queue import JobQueue

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    settings: Settings = app.state.settings
    init_store(settings.database_path)
    job_queue = app.state.job_queue
    if job_queue is None:
        job_queue = build_job_queue(settings)
    init_job_queue(job_queue)
    logger.info(
        "API started (database=%s, queue=%s)", settings.database_path, type(job_queue).__name__
    )

    yield
    # Shutdown
    close_job_queue()
    close_store()


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and store errors to enveloped JSON responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        message = "Validation error" if request.method == "PUT" else "Validation fails"
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, message)

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "This student does not exists")

    @app.exception_handler(PlanNotFoundError)
    async def plan_not_found_handler(_request: Request, _exc: PlanNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "This plan does not exists")

    @app.exception_handler(RegistrationNotFoundError)
    async def registration_not_found_handler(
        _request: Request, _exc: RegistrationNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Registration not found")

    @app.exception_handler(PastDateError)
    async def past_date_handler(_request: Request, _exc: PastDateError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, "Past dates are not permitted")

    @app.exception_handler(InvalidPeriodError)
    async def invalid_period_handler(
        _request: Request, exc: InvalidPeriodError
    ) -> JSONResponse:
        logger.info("Rejected out-of-range period: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, "Registration period is out of range")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "Database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Settings | None = None, job_queue: JobQueue | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Runtime settings. Defaults to the environment.
        job_queue: Queue to use instead of the one selected by settings.
    """
    app = FastAPI(
        title="Gympoint API",
        description="REST API for gym-membership registrations",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings or get_settings()
    app.state.job_queue = job_queue

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(registrations.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
