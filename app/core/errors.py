"""Centralized exception handlers rendering the standard error envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a JSON response carrying the error envelope."""
    body = ErrorResponse(error=message, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, by_alias=True),
        headers=headers,
    )


def _format_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a short human readable message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")
    )
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPExceptions (including unmatched routes) as error envelopes."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed with %s: %s", exc.status_code, exc.detail)
    return error_response(
        exc.status_code, str(exc.detail), getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Input shape failures are reported as 400, not FastAPI's default 422."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, _format_validation_error(exc)
    )


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Render a 429 envelope with the limiter's window headers."""
    logger.warning(
        "Rate limit %s exceeded by %s on %s",
        exc.detail,
        request.client.host if request.client else "unknown",
        request.url.path,
    )
    response = error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many requests from this IP, please try again later",
    )
    return request.app.state.limiter._inject_headers(
        response, request.state.view_rate_limit
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the full failure, return only a generic message."""
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
