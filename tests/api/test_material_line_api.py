"""Tests for GET /api/v1/material-line."""

from httpx import AsyncClient


async def test_material_line_for_subdomain(client: AsyncClient) -> None:
    response = await client.get("http://acme.example.com/api/v1/material-line")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "ml-acme"
    assert data["slug"] == "acme"
    assert data["is_default"] is False
    assert [image["title"] for image in data["kitchen_images"]] == ["White Oak", "Modern Grey"]
    assert "--color-primary: #ff0000;" in data["theme_css"]


async def test_material_line_defaults_on_root_domain(client: AsyncClient) -> None:
    response = await client.get("http://example.com/api/v1/material-line")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "default"
    assert data["is_default"] is True
    assert data["name"] == "Countertop Visualizer"
    assert data["logo_url"] == "/AccentCountertopsLogo.png"
    assert data["kitchen_images"] == []
