"""Tests for branding: reading propagated context and theme color math."""

from dataclasses import replace

from app.application.dtos.material_line import DEFAULT_MATERIAL_LINE_CONFIG
from app.application.services.branding import (
    css_hex_color,
    darken_color,
    generate_theme_styles,
    kitchen_image_title,
    kitchen_image_url,
    lighten_color,
    material_line_from_headers,
    normalize_hex,
    parse_kitchen_images,
)
from app.application.services.context_propagation import build_context
from app.core.constants import (
    HEADER_KITCHEN_IMAGES,
    HEADER_MATERIAL_LINE_ID,
    HEADER_NAME,
)
from app.domain.entities.material_line import KitchenImage


def test_missing_material_line_id_returns_default_config() -> None:
    config = material_line_from_headers({HEADER_NAME: "Acme"})
    assert config is DEFAULT_MATERIAL_LINE_CONFIG
    assert config.is_default
    assert config.name == "Countertop Visualizer"
    assert config.primary_color == "#2563eb"
    assert config.supabase_folder == "accent-countertops"


def test_round_trip_through_context(acme) -> None:
    """What the router writes is what the reader sees."""
    config = material_line_from_headers(build_context(acme))
    assert config.id == "ml-acme"
    assert config.organization_id == "org-1"
    assert config.slug == "acme"
    assert config.name == "Acme"
    assert config.primary_color == "#ff0000"
    assert config.background_color == "#fafafa"
    assert config.kitchen_images == acme.kitchen_images
    assert not config.is_default


def test_name_is_percent_decoded() -> None:
    config = material_line_from_headers(
        {HEADER_MATERIAL_LINE_ID: "ml-1", HEADER_NAME: "Acme%20%26%20Sons"}
    )
    assert config.name == "Acme & Sons"


def test_missing_colors_and_logo_fall_back() -> None:
    config = material_line_from_headers({HEADER_MATERIAL_LINE_ID: "ml-1"})
    assert config.primary_color == "#2563eb"
    assert config.accent_color == "#f59e0b"
    assert config.background_color == "#ffffff"
    assert config.logo_url is None
    assert config.supabase_folder == "default"
    assert config.kitchen_images == ()


def test_malformed_kitchen_images_yield_empty_list() -> None:
    config = material_line_from_headers(
        {HEADER_MATERIAL_LINE_ID: "ml-1", HEADER_KITCHEN_IMAGES: "not json"}
    )
    assert config.kitchen_images == ()
    assert parse_kitchen_images('{"id": "k1"}') == ()


def test_parse_kitchen_images_skips_invalid_items_and_sorts() -> None:
    raw = '[{"id": "b", "filename": "b.jpg", "order": 2}, {"id": "x"}, {"id": "a", "filename": "a.jpg", "order": 1}]'
    images = parse_kitchen_images(raw)
    assert [image.id for image in images] == ["a", "b"]


def test_normalize_hex() -> None:
    assert normalize_hex("#abc") == "aabbcc"
    assert normalize_hex("abc") == "aabbcc"
    assert normalize_hex("#12345") == "012345"
    assert normalize_hex("1234567") == "123456"
    assert normalize_hex("zzz") == "000000"
    assert normalize_hex(None) == "000000"


def test_lighten_and_darken() -> None:
    assert lighten_color("#2563eb", 0.3) == "#6692f1"
    assert darken_color("#2563eb", 0.2) == "#1e4fbc"
    assert lighten_color("#ffffff", 0.5) == "#ffffff"
    assert darken_color("#000000", 0.5) == "#000000"


def test_lighten_and_darken_fall_back_for_empty_input() -> None:
    assert lighten_color("", 0.3) == "#2563eb"
    assert darken_color(None, 0.2) == "#1d4ed8"


def test_theme_styles_use_primary_for_accent() -> None:
    css = generate_theme_styles(DEFAULT_MATERIAL_LINE_CONFIG)
    assert css.startswith(":root {")
    assert "--color-primary: #2563eb;" in css
    assert "--color-primary-light: #6692f1;" in css
    assert "--color-primary-dark: #1e4fbc;" in css
    assert "--color-accent: #2563eb;" in css
    assert "--color-bg: #ffffff;" in css


def test_kitchen_image_title() -> None:
    assert kitchen_image_title(KitchenImage(id="1", filename="white-oak_1.jpg")) == "White Oak 1"
    assert kitchen_image_title(KitchenImage(id="2", filename="x.jpg", title=" Modern ")) == "Modern"


def test_kitchen_image_url() -> None:
    url = kitchen_image_url("https://p.supabase.co/", "acme-org/acme", "white oak.jpg")
    assert url == (
        "https://p.supabase.co/storage/v1/object/public/public-assets/"
        "acme-org/acme/kitchens/white%20oak.jpg"
    )


def test_css_hex_color_accepts_hex_literals_only() -> None:
    assert css_hex_color("#ff0000", "#2563eb") == "#ff0000"
    assert css_hex_color("abc", "#2563eb") == "#abc"
    assert css_hex_color("red", "#2563eb") == "#2563eb"
    assert css_hex_color(None, "#2563eb") == "#2563eb"


def test_theme_styles_never_emit_markup_from_stored_colors() -> None:
    """A color that is not a hex literal cannot break out of the <style> block."""
    config = replace(
        DEFAULT_MATERIAL_LINE_CONFIG,
        primary_color="red;}</style><script>alert(1)</script><style>",
        background_color="#fff;}</style><script>",
    )
    css = generate_theme_styles(config)
    assert "<" not in css
    assert "--color-primary: #2563eb;" in css
    assert "--color-bg: #ffffff;" in css
