"""Catalog application layer."""

from catalog.application.storefront_queries import StorefrontQueries

__all__ = ["StorefrontQueries"]
