"""Shared infrastructure dependencies.

Provides ONLY raw transport resources (the shared HTTP connection pool).
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from infrastructure.settings import StorefrontSettings


def create_http_client(settings: StorefrontSettings) -> httpx.AsyncClient:
    """Create the application-scoped HTTP client for the storefront API.

    The client owns the connection pool and is closed by the application
    lifespan.
    """
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout_seconds,
        headers={"Accept": "application/json"},
    )


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the application-scoped HTTP client created by the lifespan.

    Returns:
        httpx.AsyncClient shared across requests.
    """
    return request.app.state.http_client
