"""Exception handlers: every error leaves the API as {"error", "message", "details"}.

Register with register_exception_handlers(app). Session-gated API routes
raise AuthenticationException (401); anything unexpected becomes a 500
whose message is only revealed in debug mode.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CountertopException,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Checked in order; unlisted domain errors are upstream failures.
_STATUS_BY_EXCEPTION: tuple[tuple[type[CountertopException], int], ...] = (
    (AuthenticationException, 401),
    (AuthorizationException, 403),
)
_UPSTREAM_FAILURE_STATUS = 503


def _error_response(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _countertop_exception_handler(
    request: Request, exc: CountertopException
) -> JSONResponse:
    status_code = next(
        (status for cls, status in _STATUS_BY_EXCEPTION if isinstance(exc, cls)),
        _UPSTREAM_FAILURE_STATUS,
    )
    if status_code == _UPSTREAM_FAILURE_STATUS:
        logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.details)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = exc.to_dict()
    return _error_response(
        status_code, body["error"], body["message"], body["details"], headers
    )


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, "HTTP_ERROR", exc.detail, headers=exc.headers)


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain, validation, HTTP and catch-all handlers to app."""
    app.add_exception_handler(CountertopException, _countertop_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
