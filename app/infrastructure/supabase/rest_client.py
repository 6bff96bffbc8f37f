"""Thin Supabase PostgREST client (no supabase-py).

Reads rows from the tenant store over PostgREST v1 with the project's
anon key; row-level security on the server decides what is visible.
All HTTP calls use a shared httpx.AsyncClient so they do not block the
event loop.
"""

from __future__ import annotations

from typing import Any

import httpx

from app.domain.exceptions import DirectoryUnavailableException


def _encode_filter_value(value: Any) -> str:
    """Return the PostgREST literal for value (booleans and None lowercase)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SupabaseRESTClient:
    """Minimal select-only PostgREST client.

    Raises DirectoryUnavailableException on transport failures and non-2xx
    responses; callers decide whether that is fatal.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str,
        api_key: str,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, Any] | None = None,
        order: str | None = None,
        limit: int | None = None,
        columns: str = "*",
    ) -> list[dict[str, Any]]:
        """Return rows of table matching all equality filters.

        Args:
            table: Table name (e.g. material_lines).
            filters: Column -> value; each becomes column=eq.value.
            order: PostgREST order expression (e.g. "order.asc").
            limit: Maximum rows to return.
            columns: Select list.

        Returns:
            List of row dicts (possibly empty).

        Raises:
            DirectoryUnavailableException: If the request fails, returns non-2xx,
                or the body is not an array of objects.
        """
        params: dict[str, str] = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{_encode_filter_value(value)}"
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = str(limit)
        url = f"{self._base_url}/rest/v1/{table}"
        try:
            resp = await self._http.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise DirectoryUnavailableException(table, f"{type(e).__name__}: {e}") from e
        if resp.status_code < 200 or resp.status_code >= 300:
            raise DirectoryUnavailableException(table, f"HTTP {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as e:
            raise DirectoryUnavailableException(table, "invalid JSON body") from e
        if not isinstance(data, list):
            raise DirectoryUnavailableException(table, "expected a JSON array")
        if not all(isinstance(row, dict) for row in data):
            raise DirectoryUnavailableException(table, "expected an array of objects")
        return data

    async def select_one(
        self,
        table: str,
        *,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """Return the single matching row, or None when there is none."""
        rows = await self.select(table, filters=filters, limit=1, columns=columns)
        return rows[0] if rows else None
