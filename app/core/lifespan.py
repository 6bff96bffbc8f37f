"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (shared HTTP client, Supabase
clients, material line directory, tenant cache, session refresher).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.infrastructure.cache import InMemoryTenantCacheStore, TenantCache
from app.infrastructure.directory import SupabaseMaterialLineDirectory
from app.infrastructure.security import SessionRefresher
from app.infrastructure.supabase import SupabaseAuthClient, SupabaseRESTClient
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def wire_tenant_routing(app: FastAPI, http: httpx.AsyncClient, settings: Settings) -> None:
    """Attach tenant_resolver and session_refresher to app.state for the routing middleware."""
    api_key = settings.supabase_anon_key.get_secret_value()
    rest = SupabaseRESTClient(http, settings.supabase_url, api_key)
    auth = SupabaseAuthClient(http, settings.supabase_url, api_key)
    app.state.tenant_resolver = TenantCache(
        SupabaseMaterialLineDirectory(rest),
        InMemoryTenantCacheStore(),
    )
    app.state.session_refresher = SessionRefresher(
        auth,
        access_cookie=settings.session_access_cookie,
        refresh_cookie=settings.session_refresh_cookie,
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Without SUPABASE_URL nothing is wired: the routing middleware then
    serves every request anonymously with default branding.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.http_client = None
    app.state.tenant_resolver = None
    app.state.session_refresher = None
    if settings.supabase_enabled:
        # Shared HTTP client for Supabase REST and Auth (connection reuse).
        app.state.http_client = httpx.AsyncClient(timeout=settings.supabase_timeout_seconds)
        wire_tenant_routing(app, app.state.http_client, settings)
        logger.info("Tenant routing wired to %s", settings.supabase_url)
    else:
        logger.warning("SUPABASE_URL not set; tenant resolution and sessions disabled")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Supabase HTTP client closed")
