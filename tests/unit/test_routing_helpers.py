"""Tests for the path and host classification used by the tenant routing middleware."""

import pytest

from app.middleware.tenant_routing import (
    effective_app_domain,
    is_authenticated_area,
    is_bypassed_path,
    is_local_host,
    is_public_auth_path,
    needs_resolution,
)


@pytest.mark.parametrize(
    "path",
    ["/_next/static/chunk.js", "/static/app.css", "/favicon.ico", "/logo.png", "/robots.txt"],
)
def test_asset_paths_bypass(path: str) -> None:
    assert is_bypassed_path(path)


@pytest.mark.parametrize("path", ["/", "/dashboard", "/api/v1/material-line"])
def test_page_paths_do_not_bypass(path: str) -> None:
    assert not is_bypassed_path(path)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/dashboard", True),
        ("/dashboard/organizations/123", True),
        ("/admin", True),
        ("/admin/organizations", True),
        ("/dashboards", False),
        ("/administrator", False),
        ("/", False),
    ],
)
def test_is_authenticated_area(path: str, expected: bool) -> None:
    assert is_authenticated_area(path) is expected


def test_public_auth_paths() -> None:
    assert is_public_auth_path("/dashboard/login")
    assert is_public_auth_path("/dashboard/signup")
    assert is_public_auth_path("/dashboard/invitations/abc123")
    assert not is_public_auth_path("/dashboard")
    assert not is_public_auth_path("/dashboard/organizations/1")


def test_is_local_host() -> None:
    assert is_local_host("localhost:3000")
    assert is_local_host("acme.localhost:3000")
    assert is_local_host("127.0.0.1:8000")
    assert not is_local_host("acme.example.com")


def test_effective_app_domain_keeps_local_port() -> None:
    assert effective_app_domain("acme.localhost:3000", "example.com") == "localhost:3000"
    assert effective_app_domain("acme.localhost", "example.com") == "localhost"
    assert effective_app_domain("127.0.0.1:8000", "example.com") == "127.0.0.1:8000"
    assert effective_app_domain("acme.example.com", "example.com") == "example.com"


def test_needs_resolution() -> None:
    assert not needs_resolution("", "example.com")
    assert not needs_resolution("example.com", "example.com")
    assert needs_resolution("acme.example.com", "example.com")
    assert needs_resolution("visualizer.acme-stone.com", "example.com")
    assert not needs_resolution("localhost:3000", "localhost:3000")
    assert needs_resolution("acme.localhost:3000", "localhost:3000")
