"""Port for the storefront catalog API."""

from __future__ import annotations

from typing import Any, Protocol

from catalog.domain.value_objects import Category, Product, ProductPage
from shared_kernel.tenant_scope import TenantScope


class CatalogGateway(Protocol):
    """Public, tenant-scoped catalog reads."""

    async def list_categories(
        self, scope: TenantScope, limit: int = 100
    ) -> list[Category]: ...

    async def get_category(self, slug: str, scope: TenantScope) -> Category | None:
        """Fetch a category by slug, or None when the tenant has no such category."""
        ...

    async def list_products(
        self,
        scope: TenantScope,
        *,
        limit: int = 30,
        category_id: str | None = None,
        category_slug: str | None = None,
    ) -> ProductPage:
        """List the newest published products, optionally filtered by category."""
        ...

    async def get_product(self, slug: str, scope: TenantScope) -> Product | None:
        """Fetch a product by slug, or None when the tenant has no such product."""
        ...

    async def list_public_plans(self) -> list[dict[str, Any]]:
        """List the platform plans shown on the landing page (not tenant-scoped)."""
        ...
