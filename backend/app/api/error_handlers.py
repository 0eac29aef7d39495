"""Error Handlers — global exception handlers for the Exercise Tracker API.

Invariants:
    - Every failure body is {success: false, status: <code>, message: <str>}
    - ExerciseTrackerError → its own http_status and message
    - RequestValidationError → 400 with the first field problem
    - HTTPException (Starlette) → its status and detail
    - Exception (catch-all) → 500 "Something went wrong", never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation (Pydantic), HTTP, catch-all
    - Client errors logged at warning, server errors at error with traceback
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ExerciseTrackerError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong"


def error_body(status_code: int, message: str) -> dict:
    """Uniform error envelope."""
    return {"success": False, "status": status_code, "message": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tracker_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_tracker_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all Exercise Tracker domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status": exc.http_status,
            },
            exc_info=exc if exc.http_status >= 500 else None,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                status.HTTP_400_BAD_REQUEST, _first_validation_message(exc),
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register Starlette HTTPException handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
        )
        message = exc.detail if isinstance(exc.detail, str) else DEFAULT_ERROR_MESSAGE
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR, DEFAULT_ERROR_MESSAGE,
            ),
        )


def _first_validation_message(exc: RequestValidationError) -> str:
    """Render the first Pydantic error as 'field: message'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc not in ("body", "query", "path"))
    return f"{field}: {first['msg']}" if field else first["msg"]
