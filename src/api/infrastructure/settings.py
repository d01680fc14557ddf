"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Storefront rendering and client settings.

    Environment variables:
        SHOPFRONT_ENVIRONMENT: development or production (default: development)
        SHOPFRONT_LOG_LEVEL: Minimum level of emitted log events (default: INFO)
        SHOPFRONT_ROOT_DOMAIN: Platform marketing domain (default: shopfront.app)
        SHOPFRONT_LANDING_ALIASES: Extra landing hostnames (default: ["localhost"])
        SHOPFRONT_LOCAL_DEV_PORT: Port used for local landing redirects (default: 3000)
        SHOPFRONT_API_BASE_URL: Base URL of the storefront API
        SHOPFRONT_REQUEST_TIMEOUT_SECONDS: Outgoing request timeout (default: 10)
        SHOPFRONT_QUERY_STALE_SECONDS: Freshness window of prefetched queries (default: 60)
        SHOPFRONT_NOT_FOUND_REDIRECT_SECONDS: Countdown before leaving an unknown store (default: 5)
        SHOPFRONT_CACHE_MAX_AGE_SECONDS: Cache max-age of rendered pages (default: 30)
        SHOPFRONT_STALE_WHILE_REVALIDATE_SECONDS: Revalidation window (default: 120)
        SHOPFRONT_SITE_NAME: Site name used in SEO metadata (default: Shopfront)
        SHOPFRONT_CURRENCY: Currency used in product structured data (default: ARS)
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOPFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum level of emitted log events",
    )
    root_domain: str = Field(
        default="shopfront.app",
        description="Marketing domain of the platform",
    )
    landing_aliases: list[str] = Field(
        default_factory=lambda: ["localhost"],
        description="Additional hostnames that always show the landing page",
    )
    local_dev_port: int = Field(
        default=3000,
        description="Port of the local landing alias",
        ge=1,
        le=65535,
    )
    api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the storefront API",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for outgoing API requests",
        gt=0,
    )
    query_stale_seconds: float = Field(
        default=60.0,
        description="How long prefetched query results are considered fresh",
        ge=0,
    )
    not_found_redirect_seconds: int = Field(
        default=5,
        description="Countdown before an unknown store redirects to the landing domain",
    )
    cache_max_age_seconds: int = Field(
        default=30,
        description="Shared cache max-age of successfully rendered pages",
        ge=0,
    )
    stale_while_revalidate_seconds: int = Field(
        default=120,
        description="stale-while-revalidate window of rendered pages",
        ge=0,
    )
    site_name: str = Field(default="Shopfront", description="Platform display name")
    currency: str = Field(default="ARS", description="Product offer currency")
    client_scripts: list[str] = Field(
        default_factory=lambda: ["/assets/entry-client.js"],
        description="Client entry scripts injected into the HTML shell",
    )
    client_styles: list[str] = Field(
        default_factory=list,
        description="Stylesheets injected into the HTML shell",
    )

    @field_validator("root_domain")
    @classmethod
    def validate_root_domain(cls, value: str) -> str:
        """Normalize the root domain and reject empty values."""
        value = value.strip().lower().rstrip(".")
        if not value:
            raise ValueError("root_domain must not be empty")
        return value

    @model_validator(mode="after")
    def validate_redirect_countdown(self) -> "StorefrontSettings":
        """Validate the not-found countdown is positive."""
        if self.not_found_redirect_seconds < 1:
            raise ValueError(
                f"not_found_redirect_seconds ({self.not_found_redirect_seconds}) "
                "must be >= 1"
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def landing_hostnames(self) -> frozenset[str]:
        """Hostnames that are never tenant-scoped (lower-cased)."""
        names = {self.root_domain, f"www.{self.root_domain}"}
        names.update(alias.strip().lower() for alias in self.landing_aliases)
        return frozenset(name for name in names if name)


class SessionCookieSettings(BaseSettings):
    """Session credential cookie settings.

    Environment variables:
        SHOPFRONT_SESSION_COOKIE_NAME: Cookie carrying the bearer token (default: shopfront_token)
        SHOPFRONT_SESSION_MAX_AGE_DAYS: Cookie lifetime in days (default: 7)
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOPFRONT_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cookie_name: str = Field(
        default="shopfront_token",
        description="Name of the session cookie",
        min_length=1,
    )
    max_age_days: int = Field(
        default=7,
        description="Session cookie lifetime in days",
        ge=1,
        le=90,
    )

    @property
    def max_age_seconds(self) -> int:
        return self.max_age_days * 24 * 60 * 60


@lru_cache
def get_storefront_settings() -> StorefrontSettings:
    """Get cached storefront settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return StorefrontSettings()


@lru_cache
def get_session_cookie_settings() -> SessionCookieSettings:
    """Get cached session cookie settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return SessionCookieSettings()
