"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The tenant cache TTL is deliberately not here; it is a
fixed constant in app.core.constants.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults so the app boots without a Supabase project;
    without supabase_url the directory and identity provider are not wired
    and every request is served with default branding and no user.
    """

    # App
    app_name: str = "countertop-visualizer"
    app_version: str = "1.0.0"
    debug: bool = False

    # Root domain the storefront subdomains hang off (e.g. example.com).
    app_domain: str = "localhost:3000"

    # Supabase (tenant directory + identity provider)
    supabase_url: str = ""
    supabase_anon_key: SecretStr = SecretStr("")
    supabase_timeout_seconds: float = 10.0

    # Session cookies (set by the identity provider flow)
    session_access_cookie: str = "sb-access-token"
    session_refresh_cookie: str = "sb-refresh-token"
    session_cookie_secure: bool = True

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_supabase(self) -> "Settings":
        """Validate that supabase_url, when set, is an http(s) URL with a key."""
        if self.supabase_url:
            if not self.supabase_url.startswith(("http://", "https://")):
                raise ValueError(
                    f"SUPABASE_URL must start with http:// or https://, got: {self.supabase_url!r}"
                )
            if not self.supabase_anon_key.get_secret_value():
                raise ValueError(
                    "SUPABASE_ANON_KEY is required when SUPABASE_URL is set."
                )
        if not self.app_domain:
            raise ValueError("APP_DOMAIN must not be empty.")
        return self

    @property
    def supabase_enabled(self) -> bool:
        """Return True when the Supabase project is configured."""
        return bool(self.supabase_url)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
