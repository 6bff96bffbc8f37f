"""Tenant directory: resolves request hostnames to material lines."""

from app.infrastructure.directory.material_line_directory import (
    SupabaseMaterialLineDirectory,
    is_root_host,
    slug_for_hostname,
)

__all__ = ["SupabaseMaterialLineDirectory", "is_root_host", "slug_for_hostname"]
