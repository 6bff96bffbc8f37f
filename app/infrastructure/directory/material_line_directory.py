"""Material line directory: hostname -> material line against Supabase.

Subdomains of the app domain resolve by slug; any other non-root host
resolves by verified custom domain. Unverified custom domains never
resolve. Lookup failures are logged and reported as "no material line".
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from app.core.constants import (
    MAX_KITCHEN_IMAGES,
    TABLE_KITCHEN_IMAGES,
    TABLE_MATERIAL_LINES,
)
from app.domain.entities.material_line import KitchenImage, MaterialLine
from app.domain.exceptions import DirectoryUnavailableException
from app.infrastructure.supabase.rest_client import SupabaseRESTClient
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def slug_for_hostname(hostname: str, app_domain: str) -> str | None:
    """Return the subdomain label when hostname is {slug}.{app_domain}, else None."""
    suffix = f".{app_domain}"
    if not hostname.endswith(suffix):
        return None
    return hostname[: -len(suffix)]


def is_root_host(hostname: str, app_domain: str) -> bool:
    """Return True for the bare app domain and its www form (marketing host)."""
    return hostname in (app_domain, f"www.{app_domain}")


def _kitchen_image_from_row(row: dict[str, Any]) -> KitchenImage:
    return KitchenImage(
        id=str(row["id"]),
        filename=row["filename"],
        title=row.get("title"),
        order=int(row.get("order") or 0),
    )


def _material_line_from_row(row: dict[str, Any]) -> MaterialLine:
    return MaterialLine(
        id=str(row["id"]),
        organization_id=str(row["organization_id"]),
        slug=row["slug"],
        name=row["name"],
        supabase_folder=row.get("supabase_folder") or "",
        display_title=row.get("display_title"),
        custom_domain=row.get("custom_domain"),
        custom_domain_verified=row.get("custom_domain_verified") is True,
        logo_url=row.get("logo_url"),
        primary_color=row.get("primary_color"),
        accent_color=row.get("accent_color"),
        background_color=row.get("background_color"),
    )


class SupabaseMaterialLineDirectory:
    """Implements IMaterialLineDirectory over the material_lines and kitchen_images tables."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def resolve(self, hostname: str, app_domain: str) -> MaterialLine | None:
        """Return the material line served at hostname, or None.

        Never raises: directory outages and malformed rows are logged and
        treated as no match so page rendering proceeds with default branding.
        """
        try:
            return await self._lookup(hostname, app_domain)
        except DirectoryUnavailableException as e:
            logger.warning(
                "Material line lookup failed for host %s: %s (%s)",
                hostname,
                e.message,
                e.details.get("reason"),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed material line row for host %s: %r", hostname, e)
        return None

    async def _lookup(self, hostname: str, app_domain: str) -> MaterialLine | None:
        slug = slug_for_hostname(hostname, app_domain)
        if slug is not None:
            if not slug:
                return None
            row = await self._client.select_one(
                TABLE_MATERIAL_LINES, filters={"slug": slug}
            )
        elif not is_root_host(hostname, app_domain):
            row = await self._client.select_one(
                TABLE_MATERIAL_LINES,
                filters={"custom_domain": hostname, "custom_domain_verified": True},
            )
        else:
            return None

        if row is None:
            logger.debug("No material line for host %s", hostname)
            return None

        material_line = _material_line_from_row(row)
        if slug is None and not material_line.serves_custom_domain(hostname):
            logger.warning(
                "Directory returned unverified custom domain row for host %s; ignoring",
                hostname,
            )
            return None
        kitchen_images = await self._kitchen_images(material_line.id)
        return replace(material_line, kitchen_images=kitchen_images)

    async def _kitchen_images(self, material_line_id: str) -> tuple[KitchenImage, ...]:
        rows = await self._client.select(
            TABLE_KITCHEN_IMAGES,
            filters={"material_line_id": material_line_id},
            order="order.asc",
            limit=MAX_KITCHEN_IMAGES,
            columns="id,filename,title,order",
        )
        images: list[KitchenImage] = []
        for row in rows:
            try:
                images.append(_kitchen_image_from_row(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping malformed kitchen image %s for material line %s: %r",
                    row.get("id"),
                    material_line_id,
                    e,
                )
        return tuple(images)
