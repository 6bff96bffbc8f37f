"""Security headers middleware.

Adds response headers suited to the storefront pages: images may come
from the Supabase storage host, styles are inlined for per-tenant themes.
Storefronts are framed by nobody; HSTS is omitted on local hosts.
Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from app.core.constants import LOCAL_HOST_MARKERS
from app.middleware.request_id import get_header

HSTS_VALUE = "max-age=31536000; includeSubDomains"


def build_security_headers(image_origin: str | None = None) -> dict[str, str]:
    """Return the header set; image_origin (e.g. the Supabase URL) is allowed in img-src."""
    img_src = "'self' data:"
    if image_origin:
        img_src = f"{img_src} {image_origin.rstrip('/')}"
    return {
        "Content-Security-Policy": (
            f"default-src 'self'; img-src {img_src}; style-src 'self' 'unsafe-inline'; "
            "frame-ancestors 'none'"
        ),
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    }


def SecurityHeadersMiddleware(app: Callable, image_origin: str | None = None) -> Callable:
    """Set security headers on all responses without overriding ones already set."""
    header_list = [
        (k.lower().encode(), v.encode()) for k, v in build_security_headers(image_origin).items()
    ]
    hsts = (b"strict-transport-security", HSTS_VALUE.encode())

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        host = get_header(scope, "host") or ""
        extra = list(header_list)
        if not any(marker in host for marker in LOCAL_HOST_MARKERS):
            extra.append(hsts)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in extra:
                    if name_b not in seen:
                        headers.append((name_b, value_b))
                        seen.add(name_b)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
