"""Dependency injection for the session context."""

from __future__ import annotations

from infrastructure.settings import (
    SessionCookieSettings,
    StorefrontSettings,
    get_session_cookie_settings,
    get_storefront_settings,
)
from session.application.observability import (
    AuthHydrationProbe,
    DefaultAuthHydrationProbe,
)


def get_session_cookie_settings_dep() -> SessionCookieSettings:
    """Dependency for session cookie settings."""
    return get_session_cookie_settings()


def get_storefront_settings_dep() -> StorefrontSettings:
    """Dependency for storefront settings."""
    return get_storefront_settings()


def get_auth_hydration_probe() -> AuthHydrationProbe:
    """Get AuthHydrationProbe instance.

    Returns:
        DefaultAuthHydrationProbe instance for observability
    """
    return DefaultAuthHydrationProbe()
