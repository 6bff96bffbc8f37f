"""Branding: read the propagated material line context and derive theme CSS.

This is the consumer side of app.application.services.context_propagation.
Any header may be missing; the reader substitutes defaults and never raises.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from urllib.parse import quote, unquote

from app.application.dtos.material_line import (
    DEFAULT_MATERIAL_LINE_CONFIG,
    MaterialLineConfig,
)
from app.core.constants import (
    HEADER_ACCENT_COLOR,
    HEADER_BACKGROUND_COLOR,
    HEADER_FOLDER,
    HEADER_KITCHEN_IMAGES,
    HEADER_LOGO,
    HEADER_MATERIAL_LINE_ID,
    HEADER_NAME,
    HEADER_ORGANIZATION_ID,
    HEADER_PRIMARY_COLOR,
    HEADER_SLUG,
)
from app.domain.entities.material_line import KitchenImage
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

PUBLIC_ASSETS_BUCKET = "public-assets"

_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")
_CSS_HEX_COLOR_RE = re.compile(r"^#?[0-9A-Fa-f]{3,6}$")
_EXTENSION_RE = re.compile(r"\.[^.]+$")
_WORD_START_RE = re.compile(r"\b\w")


def _header_value(headers: Mapping[str, str], key: str, fallback: str) -> str:
    """Return the trimmed header value, or fallback when missing or blank."""
    value = headers.get(key)
    if value and value.strip():
        return value.strip()
    return fallback


def parse_kitchen_images(raw: str | None) -> tuple[KitchenImage, ...]:
    """Parse the kitchen images JSON array; malformed input yields an empty tuple."""
    if not raw:
        return ()
    try:
        items = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed kitchen images context")
        return ()
    if not isinstance(items, list):
        return ()
    images: list[KitchenImage] = []
    for item in items:
        if not isinstance(item, dict) or not item.get("id") or not item.get("filename"):
            continue
        images.append(
            KitchenImage(
                id=str(item["id"]),
                filename=str(item["filename"]),
                title=item.get("title") or None,
                order=item["order"] if isinstance(item.get("order"), int) else 0,
            )
        )
    return tuple(sorted(images, key=lambda image: image.order))


def material_line_from_headers(headers: Mapping[str, str]) -> MaterialLineConfig:
    """Build branding from propagated context; default config when no material line id.

    Args:
        headers: Request headers or the request-scoped context mapping
            (lowercase keys from app.core.constants).

    Returns:
        MaterialLineConfig with defaults filled in for missing values.
    """
    material_line_id = headers.get(HEADER_MATERIAL_LINE_ID)
    if not material_line_id or not material_line_id.strip():
        return DEFAULT_MATERIAL_LINE_CONFIG

    default = DEFAULT_MATERIAL_LINE_CONFIG
    return MaterialLineConfig(
        id=material_line_id.strip(),
        organization_id=_header_value(headers, HEADER_ORGANIZATION_ID, ""),
        slug=_header_value(headers, HEADER_SLUG, ""),
        name=unquote(_header_value(headers, HEADER_NAME, "")),
        logo_url=headers.get(HEADER_LOGO) or None,
        primary_color=_header_value(headers, HEADER_PRIMARY_COLOR, default.primary_color),
        accent_color=_header_value(headers, HEADER_ACCENT_COLOR, default.accent_color),
        background_color=_header_value(
            headers, HEADER_BACKGROUND_COLOR, default.background_color
        ),
        supabase_folder=_header_value(headers, HEADER_FOLDER, "default"),
        kitchen_images=parse_kitchen_images(headers.get(HEADER_KITCHEN_IMAGES)),
    )


def normalize_hex(value: str | None) -> str:
    """Return a 6-digit hex string without '#'.

    3-digit values are expanded; other lengths are left-padded with zeros
    and truncated to 6. Missing or non-hex input yields '000000'.
    """
    if not value or not isinstance(value, str):
        return "000000"
    normalized = value.replace("#", "").strip()
    if not _HEX_RE.match(normalized):
        return "000000"
    if len(normalized) == 3:
        return "".join(ch * 2 for ch in normalized)
    if len(normalized) != 6:
        return normalized.rjust(6, "0")[:6]
    return normalized


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _split_rgb(value: str) -> tuple[int, int, int]:
    num = int(normalize_hex(value), 16)
    return (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF


def _join_rgb(r: int, g: int, b: int) -> str:
    return f"#{(r << 16) | (g << 8) | b:06x}"


def lighten_color(value: str | None, percent: float) -> str:
    """Move each channel percent of the way towards white."""
    if not value:
        return DEFAULT_MATERIAL_LINE_CONFIG.primary_color
    r, g, b = _split_rgb(value)
    return _join_rgb(
        *(min(255, _round_half_up(c + (255 - c) * percent)) for c in (r, g, b))
    )


def darken_color(value: str | None, percent: float) -> str:
    """Scale each channel down by percent."""
    if not value:
        return "#1d4ed8"
    r, g, b = _split_rgb(value)
    return _join_rgb(
        *(max(0, _round_half_up(c * (1 - percent))) for c in (r, g, b))
    )


def css_hex_color(value: str | None, fallback: str) -> str:
    """Return value as a '#'-prefixed hex color, or fallback when it is not one."""
    if not value or not _CSS_HEX_COLOR_RE.match(value.strip()):
        return fallback
    return f"#{value.strip().lstrip('#')}"


def generate_theme_styles(config: MaterialLineConfig) -> str:
    """Return a CSS :root block with the material line's color variables.

    Accent variables follow the primary color; the storefront uses a single brand hue.
    Colors that are not hex literals are replaced by the defaults, since the
    result is inlined into a <style> element.
    """
    primary = css_hex_color(config.primary_color, DEFAULT_MATERIAL_LINE_CONFIG.primary_color)
    background = css_hex_color(
        config.background_color, DEFAULT_MATERIAL_LINE_CONFIG.background_color
    )
    primary_light = lighten_color(primary, 0.3)
    primary_dark = darken_color(primary, 0.2)
    bg_secondary = lighten_color(background, 0.02)
    return (
        ":root {\n"
        f"  --color-primary: {primary};\n"
        f"  --color-primary-light: {primary_light};\n"
        f"  --color-primary-dark: {primary_dark};\n"
        f"  --color-accent: {primary};\n"
        f"  --color-accent-light: {primary_light};\n"
        f"  --color-accent-dark: {primary_dark};\n"
        f"  --color-bg: {background};\n"
        f"  --color-bg-secondary: {bg_secondary};\n"
        f"  --color-bg-card: {background};\n"
        "}\n"
    )


def kitchen_image_title(image: KitchenImage) -> str:
    """Explicit title, else derived from the filename ('white-oak_1.jpg' -> 'White Oak 1')."""
    if image.title and image.title.strip():
        return image.title.strip()
    base = _EXTENSION_RE.sub("", image.filename)
    base = re.sub(r"[-_]", " ", base)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), base)


def kitchen_image_url(supabase_url: str, folder: str, filename: str) -> str:
    """Public storage URL for a kitchen image under {folder}/kitchens/."""
    path = quote(f"{folder}/kitchens/{filename}")
    return f"{supabase_url.rstrip('/')}/storage/v1/object/public/{PUBLIC_ASSETS_BUCKET}/{path}"
