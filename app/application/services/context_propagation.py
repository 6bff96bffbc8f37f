"""Material line context propagation.

Serializes a resolved material line into the flat string mapping the
rendering layer reads (HTTP header names from app.core.constants). Every
key is always present with a string value; null fields become "".
"""

from __future__ import annotations

import json
from collections.abc import MutableMapping
from urllib.parse import quote

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
from app.domain.entities.material_line import KitchenImage, MaterialLine

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


def encode_header_text(value: str) -> str:
    """Percent-encode free text so it is safe as a header value (encodeURIComponent rules)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def serialize_kitchen_images(images: tuple[KitchenImage, ...] | list[KitchenImage]) -> str:
    """Return a compact JSON array of {id, filename, title, order}."""
    return json.dumps(
        [
            {
                "id": image.id,
                "filename": image.filename,
                "title": image.title,
                "order": image.order,
            }
            for image in images
        ],
        separators=(",", ":"),
    )


def build_context(material_line: MaterialLine | None) -> dict[str, str]:
    """Return the propagated context for material_line; empty dict when None."""
    if material_line is None:
        return {}
    return {
        HEADER_MATERIAL_LINE_ID: material_line.id or "",
        HEADER_ORGANIZATION_ID: material_line.organization_id or "",
        HEADER_SLUG: material_line.slug or "",
        HEADER_NAME: encode_header_text(material_line.public_name or ""),
        HEADER_LOGO: material_line.logo_url or "",
        HEADER_PRIMARY_COLOR: material_line.primary_color or "",
        HEADER_ACCENT_COLOR: material_line.accent_color or "",
        HEADER_BACKGROUND_COLOR: material_line.background_color or "",
        HEADER_FOLDER: material_line.supabase_folder or "",
        HEADER_KITCHEN_IMAGES: serialize_kitchen_images(material_line.kitchen_images),
    }


def write_context(
    target: MutableMapping[str, str], material_line: MaterialLine | None
) -> None:
    """Write the propagated context onto target (e.g. response.headers).

    No-op when material_line is None so consumers fall back to default branding.
    """
    for key, value in build_context(material_line).items():
        target[key] = value
