"""Pytest configuration and fixtures for the countertop visualizer.

Settings are pinned to APP_DOMAIN=example.com with Supabase disabled
before the app is imported; tests wire tenant routing explicitly with
httpx.MockTransport-backed Supabase clients or fakes.
"""

import os

os.environ["APP_DOMAIN"] = "example.com"
os.environ["SUPABASE_URL"] = ""
os.environ["SESSION_COOKIE_SECURE"] = "false"

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.application.dtos.session import SessionState  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.domain.entities.material_line import KitchenImage, MaterialLine  # noqa: E402
from app.infrastructure.cache import CacheEntry, TenantCache  # noqa: E402
from app.infrastructure.directory import SupabaseMaterialLineDirectory  # noqa: E402
from app.infrastructure.supabase import SupabaseRESTClient  # noqa: E402
from app.infrastructure.supabase.rest_client import _encode_filter_value  # noqa: E402

get_settings.cache_clear()

SUPABASE_URL = "https://project.supabase.co"

ACME_ROW: dict[str, Any] = {
    "id": "ml-acme",
    "organization_id": "org-1",
    "slug": "acme",
    "name": "Acme",
    "display_title": None,
    "custom_domain": "visualizer.acme-stone.com",
    "custom_domain_verified": True,
    "logo_url": "https://cdn.example.com/acme.png",
    "primary_color": "#ff0000",
    "accent_color": "#00ff00",
    "background_color": "#fafafa",
    "supabase_folder": "acme-org/acme",
}

ROGUE_ROW: dict[str, Any] = {
    **ACME_ROW,
    "id": "ml-rogue",
    "slug": "rogue",
    "name": "Rogue",
    "custom_domain": "unverified.example.net",
    "custom_domain_verified": False,
}

KITCHEN_ROWS: list[dict[str, Any]] = [
    {"id": "k1", "material_line_id": "ml-acme", "filename": "white-oak.jpg", "title": None, "order": 0},
    {"id": "k2", "material_line_id": "ml-acme", "filename": "modern_grey.jpg", "title": "Modern Grey", "order": 1},
]


class FakeClockStore:
    """TenantCacheStore with a manually advanced clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.entries: dict[str, CacheEntry] = {}
        self.clock = start

    def get(self, key: str) -> CacheEntry | None:
        return self.entries.get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        self.entries[key] = entry

    def now(self) -> float:
        return self.clock

    def advance(self, seconds: float) -> None:
        self.clock += seconds


class FakeSessionRefresher:
    """ISessionRefresher returning a fixed state and recording calls."""

    def __init__(self, state: SessionState | None = None) -> None:
        self.state = state or SessionState()
        self.calls = 0

    async def refresh(self, cookies) -> SessionState:
        self.calls += 1
        return self.state


def postgrest_handler(
    material_lines: list[dict[str, Any]],
    kitchen_images: list[dict[str, Any]] | None = None,
    calls: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Return a MockTransport handler emulating PostgREST eq. filters on two tables."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        table = request.url.path.rsplit("/", 1)[-1]
        rows = material_lines if table == "material_lines" else list(kitchen_images or [])
        for column, expr in request.url.params.items():
            if column in ("select", "order", "limit") or not expr.startswith("eq."):
                continue
            wanted = expr[3:]
            rows = [r for r in rows if _encode_filter_value(r.get(column)) == wanted]
        if "limit" in request.url.params:
            rows = rows[: int(request.url.params["limit"])]
        return httpx.Response(200, json=rows)

    return handler


def make_directory(handler: Callable[[httpx.Request], httpx.Response]) -> SupabaseMaterialLineDirectory:
    """Directory over a REST client whose HTTP goes to handler."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SupabaseMaterialLineDirectory(SupabaseRESTClient(http, SUPABASE_URL, "anon-key"))


@pytest.fixture
def acme() -> MaterialLine:
    """Resolved Acme material line entity."""
    return MaterialLine(
        id="ml-acme",
        organization_id="org-1",
        slug="acme",
        name="Acme",
        supabase_folder="acme-org/acme",
        logo_url="https://cdn.example.com/acme.png",
        primary_color="#ff0000",
        accent_color="#00ff00",
        background_color="#fafafa",
        kitchen_images=(
            KitchenImage(id="k1", filename="white-oak.jpg", order=0),
            KitchenImage(id="k2", filename="modern_grey.jpg", title="Modern Grey", order=1),
        ),
    )


@pytest.fixture
def directory_calls() -> list[httpx.Request]:
    """Requests the fake PostgREST saw."""
    return []


@pytest.fixture
def app(directory_calls: list[httpx.Request]) -> FastAPI:
    """Fresh app with tenant routing wired to a fake PostgREST holding Acme and Rogue."""
    from app.main import create_app

    application = create_app()
    directory = make_directory(
        postgrest_handler([ACME_ROW, ROGUE_ROW], KITCHEN_ROWS, calls=directory_calls)
    )
    application.state.tenant_resolver = TenantCache(directory, FakeClockStore())
    application.state.session_refresher = FakeSessionRefresher()
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the app (ASGI). Host comes from the request URL."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://example.com") as ac:
        yield ac
