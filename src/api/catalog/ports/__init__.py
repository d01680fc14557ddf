"""Catalog ports."""

from catalog.ports.gateway import CatalogGateway

__all__ = ["CatalogGateway"]
