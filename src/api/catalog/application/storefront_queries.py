"""Storefront catalog reads through the query cache.

The same methods serve the rendering pass (which prefetches into a fresh
cache and dehydrates it) and the client (which hydrates its cache from the
snapshot first). Both sides therefore use identical keys, and a prefetched
result satisfies the client's first fetch within the freshness window.
"""

from __future__ import annotations

from typing import Any

from catalog.domain.value_objects import Category, Product, ProductPage
from catalog.ports.gateway import CatalogGateway
from shared_kernel.query_cache import QueryCache
from shared_kernel.query_keys import storefront_query_keys
from shared_kernel.tenant_scope import ScopeProvider

CATEGORY_LIST_LIMIT = 100
PRODUCT_LIST_LIMIT = 30


class StorefrontQueries:
    """Cached catalog queries for the current tenant."""

    def __init__(
        self,
        gateway: CatalogGateway,
        cache: QueryCache,
        scope_provider: ScopeProvider,
    ):
        self._gateway = gateway
        self._cache = cache
        self._scope_provider = scope_provider

    @property
    def cache(self) -> QueryCache:
        return self._cache

    async def categories(self) -> list[Category]:
        async def fetch() -> list[dict[str, Any]]:
            categories = await self._gateway.list_categories(
                self._scope_provider(), limit=CATEGORY_LIST_LIMIT
            )
            return [category.to_dict() for category in categories]

        data = await self._cache.fetch(storefront_query_keys.categories_list(), fetch)
        return [Category.from_api(item) for item in data]

    async def category_by_slug(self, slug: str) -> Category | None:
        async def fetch() -> dict[str, Any] | None:
            category = await self._gateway.get_category(slug, self._scope_provider())
            return category.to_dict() if category is not None else None

        data = await self._cache.fetch(
            storefront_query_keys.category_by_slug(slug), fetch
        )
        return Category.from_api(data) if data is not None else None

    async def products(
        self,
        category_id: str | None = None,
        category_slug: str | None = None,
        limit: int = PRODUCT_LIST_LIMIT,
    ) -> ProductPage:
        """List products, newest first.

        The key does not include ``limit``: a shorter prefetched list
        satisfies a later fetch of the same filter.
        """

        async def fetch() -> dict[str, Any]:
            page = await self._gateway.list_products(
                self._scope_provider(),
                limit=limit,
                category_id=category_id or None,
                category_slug=category_slug or None,
            )
            return page.to_dict()

        data = await self._cache.fetch(
            storefront_query_keys.products_list(category_id, category_slug), fetch
        )
        return ProductPage.from_api(data, limit=limit)

    async def product_detail(self, slug: str) -> Product | None:
        async def fetch() -> dict[str, Any] | None:
            product = await self._gateway.get_product(slug, self._scope_provider())
            return product.to_dict() if product is not None else None

        data = await self._cache.fetch(
            storefront_query_keys.product_detail(slug), fetch
        )
        return Product.from_api(data) if data is not None else None

    async def public_plans(self) -> list[dict[str, Any]]:
        return await self._cache.fetch(
            storefront_query_keys.public_plans(), self._gateway.list_public_plans
        )

    def seed_public_plans(self, plans: list[dict[str, Any]]) -> None:
        """Store a public plans result obtained outside ``public_plans``."""
        self._cache.set(storefront_query_keys.public_plans(), plans)
