"""Request timeout middleware.

The only deadline on outbound calls made while serving a request (session
refresh, directory lookup): the whole request is cancelled after
timeout_seconds. API paths get a JSON 504, pages a plain-text 504.
Raw ASGI (no BaseHTTPMiddleware).
"""

import asyncio
import json
from typing import Callable

from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

API_PATH_PREFIX = "/api/"


def _timeout_body(path: str, timeout_seconds: float) -> tuple[bytes, bytes]:
    """Return (content_type, body) for the 504 response."""
    if path.startswith(API_PATH_PREFIX):
        body = json.dumps(
            {
                "error": "GATEWAY_TIMEOUT",
                "message": f"Request timed out after {timeout_seconds} seconds",
                "details": {"timeout_seconds": timeout_seconds},
            }
        ).encode()
        return b"application/json", body
    return b"text/plain; charset=utf-8", b"The page took too long to load. Please try again."


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel request after timeout_seconds and answer 504 if nothing was sent yet."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            path = scope.get("path", "")
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                path,
            )
            if response_started:
                return
            content_type, body = _timeout_body(path, timeout_seconds)
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", content_type)],
            })
            await send({"type": "http.response.body", "body": body, "more_body": False})

    return asgi_app
