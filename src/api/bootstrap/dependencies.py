"""Dependency injection for the bootstrap context (server render pass)."""

from __future__ import annotations

from typing import Annotated

import httpx
from fastapi import Depends, Request

from bootstrap.application.observability import DefaultRenderProbe, RenderProbe
from bootstrap.application.render_service import RenderService
from bootstrap.infrastructure.html_document_renderer import HtmlDocumentRenderer
from catalog.infrastructure.http_catalog_gateway import HttpCatalogGateway
from infrastructure.dependencies import get_http_client
from infrastructure.settings import StorefrontSettings, get_storefront_settings
from shared_kernel.api_client import ApiClient
from shared_kernel.observability_context import ObservationContext
from tenancy.application.resolver import TenantResolver
from tenancy.infrastructure.http_tenant_lookup import HttpTenantLookup


def get_storefront_settings_dep() -> StorefrontSettings:
    """Dependency for storefront settings."""
    return get_storefront_settings()


def get_render_probe() -> RenderProbe:
    """Get RenderProbe instance.

    Returns:
        DefaultRenderProbe instance for observability
    """
    return DefaultRenderProbe()


def get_api_client(
    http: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> ApiClient:
    """Get an ApiClient without session credentials.

    The render pass never acts on behalf of the visitor, so the session
    cookie is not forwarded.
    """
    return ApiClient(http)


def get_render_service(
    request: Request,
    client: Annotated[ApiClient, Depends(get_api_client)],
    settings: Annotated[StorefrontSettings, Depends(get_storefront_settings_dep)],
    probe: Annotated[RenderProbe, Depends(get_render_probe)],
) -> RenderService:
    """Get RenderService instance.

    Args:
        client: Storefront API client (shared connection pool)
        settings: Storefront settings
        probe: Render probe for observability, bound to the request

    Returns:
        RenderService instance
    """
    return RenderService(
        resolver=TenantResolver(HttpTenantLookup(client), settings.landing_hostnames),
        catalog=HttpCatalogGateway(client),
        renderer=HtmlDocumentRenderer(
            scripts=settings.client_scripts,
            styles=settings.client_styles,
        ),
        settings=settings,
        probe=probe.with_context(
            ObservationContext(
                request_id=request.headers.get("x-request-id"),
                hostname=request.headers.get("host"),
            )
        ),
    )
