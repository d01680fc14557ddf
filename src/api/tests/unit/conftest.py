"""Unit test fixtures shared across bounded contexts."""

from __future__ import annotations

import pytest

from infrastructure.settings import SessionCookieSettings, StorefrontSettings
from tenancy.domain.value_objects import SocialLinks, TenantIdentity


@pytest.fixture
def storefront_settings() -> StorefrontSettings:
    """Provide storefront settings independent of the environment."""
    return StorefrontSettings(
        environment="development",
        root_domain="shopfront.app",
        landing_aliases=["localhost"],
        local_dev_port=3000,
        api_base_url="http://api.test/api",
        query_stale_seconds=60,
        not_found_redirect_seconds=5,
        site_name="Shopfront",
        currency="ARS",
        client_scripts=["/assets/entry-client.js"],
        client_styles=["/assets/app.css"],
    )


@pytest.fixture
def cookie_settings() -> SessionCookieSettings:
    """Provide session cookie settings independent of the environment."""
    return SessionCookieSettings(cookie_name="shopfront_token", max_age_days=7)


@pytest.fixture
def tenant() -> TenantIdentity:
    """A resolved tenant."""
    return TenantIdentity(
        id="tenant-1",
        name="La Tienda Feliz",
        slug="la-tienda-feliz",
        logo="/media/logo.png",
        banner="https://cdn.example.com/banner.png",
        favicon="/media/favicon.ico",
        social_links=SocialLinks(instagram="https://instagram.com/tienda"),
    )
