"""Catalog domain layer."""

from catalog.domain.value_objects import (
    Category,
    Pagination,
    Product,
    ProductPage,
)

__all__ = [
    "Category",
    "Pagination",
    "Product",
    "ProductPage",
]
