"""Query keys shared by the server prefetch and the client fetch layer.

A prefetched result only satisfies a later client fetch when both sides
build the key the same way, so every key is produced here.
"""

from __future__ import annotations

QueryKey = tuple[str | None, ...]


class StorefrontQueryKeys:
    """Factory for storefront query keys."""

    @staticmethod
    def categories_list() -> QueryKey:
        return ("storefront", "categories", "list")

    @staticmethod
    def category_by_slug(slug: str) -> QueryKey:
        return ("storefront", "categories", "slug", slug)

    @staticmethod
    def products_list(
        category_id: str | None = None,
        category_slug: str | None = None,
    ) -> QueryKey:
        return (
            "storefront",
            "products",
            "list",
            category_id or None,
            category_slug or None,
        )

    @staticmethod
    def product_detail(slug: str) -> QueryKey:
        return ("storefront", "products", "detail", slug)

    @staticmethod
    def public_plans() -> QueryKey:
        return ("storefront", "billing", "public-plans")


storefront_query_keys = StorefrontQueryKeys()
