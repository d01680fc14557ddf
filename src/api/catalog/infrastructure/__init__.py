"""Catalog infrastructure adapters."""

from catalog.infrastructure.http_catalog_gateway import HttpCatalogGateway

__all__ = ["HttpCatalogGateway"]
