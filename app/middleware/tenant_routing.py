"""Tenant routing middleware: session refresh, dashboard gate, material line resolution.

Runs once per request (framework asset paths bypass it). Session refresh
always runs first. Dashboard and admin paths are gated on a logged-in
user and never resolve a material line; every other path resolves the
Host header to a material line through the tenant cache and propagates
its branding to request state and response headers.

Nothing here may fail the request: session, lookup and header-writing
errors are logged and the request is served with reduced context.
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from app.application.dtos.session import SessionState
from app.application.interfaces.services import ISessionRefresher, ITenantResolver
from app.application.services.context_propagation import build_context, write_context
from app.core.config import get_settings
from app.core.constants import (
    AUTHENTICATED_PREFIXES,
    BYPASS_PATH_PREFIXES,
    DASHBOARD_HOME_PATH,
    INVITATIONS_PREFIX,
    LOCAL_HOST_MARKERS,
    LOGIN_NEXT_PARAM,
    LOGIN_PATH,
    MATERIAL_LINE_HEADERS,
    SIGNUP_PATH,
)
from app.core.tenant_context import set_material_line_context
from app.domain.entities.material_line import MaterialLine
from app.shared.context import set_current_user
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def is_bypassed_path(path: str) -> bool:
    """Return True for framework assets and any path with a file extension."""
    return path.startswith(BYPASS_PATH_PREFIXES) or "." in path


def is_authenticated_area(path: str) -> bool:
    """Return True for /dashboard and /admin (the prefix itself or anything under it)."""
    return any(path == prefix or path.startswith(f"{prefix}/") for prefix in AUTHENTICATED_PREFIXES)


def is_public_auth_path(path: str) -> bool:
    """Return True for the dashboard pages reachable without a session."""
    return path in (LOGIN_PATH, SIGNUP_PATH) or path.startswith(INVITATIONS_PREFIX)


def is_local_host(hostname: str) -> bool:
    """Return True for local development hosts (localhost / 127.0.0.1, any port)."""
    return any(marker in hostname for marker in LOCAL_HOST_MARKERS)


def effective_app_domain(hostname: str, app_domain: str) -> str:
    """Return the domain subdomains are resolved against.

    On local hosts the configured domain is replaced by the local base
    with the request's port kept, so acme.localhost:3000 resolves slug acme.
    """
    if not is_local_host(hostname):
        return app_domain
    base = "127.0.0.1" if "127.0.0.1" in hostname else "localhost"
    _, sep, port = hostname.rpartition(":")
    if sep and port.isdigit():
        return f"{base}:{port}"
    return base


def needs_resolution(hostname: str, domain: str) -> bool:
    """Return True when hostname may map to a material line.

    The bare app domain never does; on local hosts only dotted subdomains
    of the effective domain do (bare localhost:3000 is skipped).
    """
    if not hostname or hostname == domain:
        return False
    if is_local_host(hostname):
        return hostname.endswith(f".{domain}")
    return True


def login_redirect_url(request: Request) -> str:
    """Login URL carrying the requested path as the return target."""
    return str(
        request.url.replace(
            path=LOGIN_PATH,
            query=urlencode({LOGIN_NEXT_PARAM: request.url.path}),
        )
    )


class _TenantRoutingMiddleware(BaseHTTPMiddleware):
    """Session refresh + auth gate + material line resolution per request."""

    def __init__(
        self,
        app: Callable,
        tenant_resolver: ITenantResolver | None = None,
        session_refresher: ISessionRefresher | None = None,
    ) -> None:
        super().__init__(app)
        self._tenant_resolver = tenant_resolver
        self._session_refresher = session_refresher

    def _resolver(self, request: Request) -> ITenantResolver | None:
        if self._tenant_resolver is not None:
            return self._tenant_resolver
        return getattr(request.app.state, "tenant_resolver", None)

    def _refresher(self, request: Request) -> ISessionRefresher | None:
        if self._session_refresher is not None:
            return self._session_refresher
        return getattr(request.app.state, "session_refresher", None)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if is_bypassed_path(path):
            return await call_next(request)

        session = await self._refresh_session(request)
        request.state.user = session.user
        set_current_user(session.user)
        try:
            if is_authenticated_area(path):
                response = await self._dispatch_authenticated(request, session, call_next)
            else:
                response = await self._dispatch_public(request, call_next)
            self._apply_cookies(response, session)
            return response
        finally:
            set_current_user(None)
            set_material_line_context(None)

    async def _refresh_session(self, request: Request) -> SessionState:
        refresher = self._refresher(request)
        if refresher is None:
            return SessionState()
        try:
            return await refresher.refresh(request.cookies)
        except Exception:
            logger.exception("Session refresh failed; continuing without a session")
            return SessionState()

    async def _dispatch_authenticated(
        self, request: Request, session: SessionState, call_next: Callable
    ) -> Response:
        """Dashboard/admin branch. Material line resolution is skipped here."""
        path = request.url.path
        request.state.material_line_context = {}
        if is_public_auth_path(path):
            if session.is_authenticated and path in (LOGIN_PATH, SIGNUP_PATH):
                url = str(request.url.replace(path=DASHBOARD_HOME_PATH, query=""))
                return RedirectResponse(url, status_code=307)
            return await call_next(request)
        if not session.is_authenticated:
            return RedirectResponse(login_redirect_url(request), status_code=307)
        return await call_next(request)

    async def _dispatch_public(self, request: Request, call_next: Callable) -> Response:
        """Public branch: resolve the host, expose context downstream, stamp headers."""
        material_line = await self._resolve_material_line(request)
        context = build_context(material_line)
        request.state.material_line_context = context
        set_material_line_context(context)

        response = await call_next(request)
        if material_line is not None:
            try:
                write_context(response.headers, material_line)
            except Exception:
                logger.exception(
                    "Could not write material line headers for %s", material_line.id
                )
                for key in MATERIAL_LINE_HEADERS:
                    if key in response.headers:
                        del response.headers[key]
        return response

    async def _resolve_material_line(self, request: Request) -> MaterialLine | None:
        resolver = self._resolver(request)
        if resolver is None:
            return None
        hostname = request.headers.get("host", "")
        domain = effective_app_domain(hostname, get_settings().app_domain)
        if not needs_resolution(hostname, domain):
            return None
        try:
            return await resolver.get_or_resolve(hostname, domain)
        except Exception:
            logger.exception("Material line resolution failed for host %s", hostname)
            return None

    @staticmethod
    def _apply_cookies(response: Response, session: SessionState) -> None:
        if not session.cookies:
            return
        secure = get_settings().session_cookie_secure
        for cookie in session.cookies:
            if cookie.value is None:
                response.delete_cookie(cookie.name, path="/")
            else:
                response.set_cookie(
                    cookie.name,
                    cookie.value,
                    max_age=cookie.max_age,
                    path="/",
                    secure=secure,
                    httponly=True,
                    samesite="lax",
                )


def TenantRoutingMiddleware(
    app: Callable,
    tenant_resolver: ITenantResolver | None = None,
    session_refresher: ISessionRefresher | None = None,
) -> Callable:
    """Route each request through session refresh, the dashboard gate, or tenant resolution.

    Collaborators default to app.state.tenant_resolver / app.state.session_refresher
    (wired in lifespan); when absent the request proceeds anonymously with default branding.
    """
    return _TenantRoutingMiddleware(
        app,
        tenant_resolver=tenant_resolver,
        session_refresher=session_refresher,
    )
