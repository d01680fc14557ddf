"""Value objects for the storefront catalog.

Each object converts from the API payload with ``from_api`` and back to
its JSON form with ``to_dict``. ``from_api(x.to_dict())`` rebuilds ``x``,
which lets the query cache hold JSON while callers work with objects.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

PUBLISHED_STATUS = "PUBLISHED"


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _price(value: Any) -> float:
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    return price if math.isfinite(price) else 0.0


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    slug: str
    image: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Category:
        category_id = str(raw["id"])
        return cls(
            id=category_id,
            name=str(raw.get("name") or ""),
            slug=str(raw.get("slug") or category_id),
            image=_optional_str(raw.get("image")),
            meta_title=_optional_str(raw.get("metaTitle")),
            meta_description=_optional_str(raw.get("metaDescription")),
            updated_at=_optional_str(raw.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "image": self.image,
            "metaTitle": self.meta_title,
            "metaDescription": self.meta_description,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Product:
    """A published storefront product.

    ``slug`` falls back to the id; ``images`` falls back to the single
    ``image`` field; SEO fields fall back to the product ``metadata``.
    """

    id: str
    name: str
    slug: str
    description: str = ""
    price: float = 0.0
    images: tuple[str, ...] = ()
    stock: int = 0
    active: bool = True
    category_id: str | None = None
    category_name: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Product:
        product_id = str(raw["id"])
        images = [str(image) for image in raw.get("images") or [] if image]
        if not images and raw.get("image"):
            images = [str(raw["image"])]

        status = raw.get("status")
        active = status == PUBLISHED_STATUS if status else bool(raw.get("active", True))

        category = raw.get("category") if isinstance(raw.get("category"), Mapping) else {}
        metadata = raw.get("metadata") if isinstance(raw.get("metadata"), Mapping) else {}

        return cls(
            id=product_id,
            name=str(raw.get("name") or ""),
            slug=str(raw.get("slug") or product_id),
            description=str(raw.get("description") or ""),
            price=_price(raw.get("price")),
            images=tuple(images),
            stock=int(raw.get("stock") or 0),
            active=active,
            category_id=_optional_str(raw.get("categoryId")),
            category_name=_optional_str(raw.get("categoryName") or category.get("name")),
            meta_title=_optional_str(raw.get("metaTitle") or metadata.get("title")),
            meta_description=_optional_str(
                raw.get("metaDescription") or metadata.get("description")
            ),
            updated_at=_optional_str(raw.get("updatedAt")),
        )

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "price": self.price,
            "images": list(self.images),
            "stock": self.stock,
            "active": self.active,
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "metaTitle": self.meta_title,
            "metaDescription": self.meta_description,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def first_page(cls, total: int, limit: int) -> Pagination:
        return cls(
            page=1,
            limit=limit,
            total=total,
            total_pages=max(1, math.ceil(total / limit)) if limit > 0 else 1,
        )

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Pagination:
        return cls(
            page=int(raw.get("page") or 1),
            limit=int(raw.get("limit") or 0),
            total=int(raw.get("total") or 0),
            total_pages=int(raw.get("totalPages") or 1),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


@dataclass(frozen=True)
class ProductPage:
    items: tuple[Product, ...]
    pagination: Pagination

    @classmethod
    def empty(cls, limit: int) -> ProductPage:
        return cls(items=(), pagination=Pagination.first_page(0, limit))

    @classmethod
    def from_api(cls, raw: Mapping[str, Any], limit: int = 30) -> ProductPage:
        items = tuple(
            Product.from_api(item)
            for item in raw.get("items") or []
            if isinstance(item, Mapping)
        )
        pagination = raw.get("pagination")
        return cls(
            items=items,
            pagination=(
                Pagination.from_api(pagination)
                if isinstance(pagination, Mapping)
                else Pagination.first_page(len(items), limit)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "pagination": self.pagination.to_dict(),
        }
