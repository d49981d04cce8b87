"""
Map storage failures to structured HTTP responses.

Handlers are registered on the app (see `install_error_handlers`) so a failed
query answers only its own request; other in-flight requests are untouched.
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CONNECTION_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.exceptions.PostgresConnectionError,
    asyncpg.exceptions.InterfaceError,
    asyncpg.exceptions.TooManyConnectionsError,
    asyncpg.exceptions.CannotConnectNowError,
    OSError,
    asyncio.TimeoutError,
)


def _error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def constraint_violation_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "db_constraint_violation method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
    )
    return _error_response(status.HTTP_409_CONFLICT, "Request conflicts with stored data.")


async def data_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "db_data_error method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, "Request data was rejected by the database.")


async def unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "db_unavailable method=%s path=%s error=%r",
        request.method,
        request.url.path,
        exc,
    )
    return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database is unavailable.")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        asyncpg.exceptions.IntegrityConstraintViolationError,
        constraint_violation_handler,
    )
    app.add_exception_handler(asyncpg.exceptions.DataError, data_error_handler)
    for exc_class in CONNECTION_ERRORS:
        app.add_exception_handler(exc_class, unavailable_handler)
