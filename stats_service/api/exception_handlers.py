"""
Application-level exception handlers.

Renders every error response as ``{"error": "<message>"}``:
request validation failures become 400, HTTPExceptions keep their status,
and anything unhandled becomes a generic 500.

Dependencies: fastapi, starlette
System role: Error response shaping at the HTTP boundary
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stats_service.models.common import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_validation_errors(errors: list[dict]) -> str:
    """
    Flatten pydantic error dicts into one readable message.

    Args:
        errors: ``RequestValidationError.errors()``

    Returns:
        str: e.g. ``"header.userId: Field required; body.averageScore: Input should be greater than 0"``
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed input with 400 before any handler runs."""
    message = format_validation_errors(exc.errors())
    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"error": message},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException detail under the ``error`` key."""
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for store and infrastructure faults."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
