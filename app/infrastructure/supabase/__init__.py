"""Supabase clients over plain httpx: PostgREST (tenant store) and Auth (sessions)."""

from app.infrastructure.supabase.auth_client import SupabaseAuthClient
from app.infrastructure.supabase.rest_client import SupabaseRESTClient

__all__ = ["SupabaseAuthClient", "SupabaseRESTClient"]
