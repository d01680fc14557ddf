"""Catalog gateway against the storefront API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from catalog.domain.value_objects import Category, Product, ProductPage
from shared_kernel.api_client import ApiClient, ApiError
from shared_kernel.tenant_scope import TenantScope


class HttpCatalogGateway:
    """Implements CatalogGateway over the public catalog endpoints.

    List endpoints answer ``{"data": {"items": [...], "pagination": {...}}}``
    and detail endpoints ``{"data": {...}}``. A 404 on a detail endpoint
    means the entity does not exist for the tenant.
    """

    CATEGORIES_PATH = "/public/categories"
    PRODUCTS_PATH = "/public/products"
    PLANS_PATH = "/public/plans"

    def __init__(self, client: ApiClient):
        self._client = client

    async def list_categories(
        self, scope: TenantScope, limit: int = 100
    ) -> list[Category]:
        body = await self._client.get(
            self.CATEGORIES_PATH,
            scope=scope,
            params={"page": "1", "limit": str(limit)},
        )
        return [
            Category.from_api(item)
            for item in _items(body)
            if isinstance(item, dict) and "id" in item
        ]

    async def get_category(self, slug: str, scope: TenantScope) -> Category | None:
        data = await self._get_detail(f"{self.CATEGORIES_PATH}/{quote(slug, safe='')}", scope)
        return Category.from_api(data) if data is not None else None

    async def list_products(
        self,
        scope: TenantScope,
        *,
        limit: int = 30,
        category_id: str | None = None,
        category_slug: str | None = None,
    ) -> ProductPage:
        params = {
            "page": "1",
            "limit": str(limit),
            "sortBy": "createdAt",
            "sortOrder": "desc",
        }
        if category_id:
            params["categoryId"] = category_id
        if category_slug:
            params["categorySlug"] = category_slug

        body = await self._client.get(self.PRODUCTS_PATH, scope=scope, params=params)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            return ProductPage.empty(limit)
        return ProductPage.from_api(data, limit=limit)

    async def get_product(self, slug: str, scope: TenantScope) -> Product | None:
        data = await self._get_detail(f"{self.PRODUCTS_PATH}/{quote(slug, safe='')}", scope)
        return Product.from_api(data) if data is not None else None

    async def list_public_plans(self) -> list[dict[str, Any]]:
        body = await self._client.get(self.PLANS_PATH, scope=TenantScope.none())
        plans = body.get("data") if isinstance(body, dict) else body
        if not isinstance(plans, list):
            return []
        return [plan for plan in plans if isinstance(plan, dict)]

    async def _get_detail(self, path: str, scope: TenantScope) -> dict[str, Any] | None:
        try:
            body = await self._client.get(path, scope=scope)
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict) or "id" not in data:
            return None
        return data


def _items(body: Any) -> list[Any]:
    data = body.get("data") if isinstance(body, dict) else None
    if isinstance(data, dict):
        items = data.get("items")
        return items if isinstance(items, list) else []
    return []
