"""SEO metadata for server-rendered pages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

from bootstrap.domain.routes import RouteKind
from catalog.domain.value_objects import Category, Product
from tenancy.domain.value_objects import TenantIdentity

INDEX = "index,follow"
NO_INDEX = "noindex,follow"

DEFAULT_DESCRIPTION = (
    "Control de stock, ventas y tienda online. Simple para cualquier negocio."
)

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class OpenGraph:
    type: Literal["website", "product"]
    title: str
    description: str
    url: str
    site_name: str
    image: str | None = None


@dataclass(frozen=True)
class TwitterCard:
    title: str
    description: str
    card: Literal["summary_large_image"] = "summary_large_image"
    image: str | None = None


@dataclass(frozen=True)
class SeoPayload:
    title: str
    description: str
    canonical_url: str
    robots: str
    og: OpenGraph
    twitter: TwitterCard
    json_ld: dict[str, Any] | None = None


def absolute_url(base_url: str, path: str) -> str:
    path = path if path.startswith("/") else f"/{path}"
    return f"{base_url.rstrip('/')}{path}"


def absolute_image_url(base_url: str, image: str | None) -> str | None:
    if not image:
        return None
    if _ABSOLUTE_URL.match(image):
        return image
    return absolute_url(base_url, image)


def _page(
    *,
    title: str,
    description: str,
    canonical_url: str,
    site_name: str,
    robots: str = INDEX,
    og_type: Literal["website", "product"] = "website",
    image: str | None = None,
    json_ld: dict[str, Any] | None = None,
) -> SeoPayload:
    return SeoPayload(
        title=title,
        description=description,
        canonical_url=canonical_url,
        robots=robots,
        og=OpenGraph(
            type=og_type,
            title=title,
            description=description,
            url=canonical_url,
            site_name=site_name,
            image=image,
        ),
        twitter=TwitterCard(title=title, description=description, image=image),
        json_ld=json_ld,
    )


def product_json_ld(
    product: Product,
    *,
    brand: str,
    canonical_url: str,
    currency: str,
) -> dict[str, Any]:
    """schema.org Product structured data."""
    data: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Product",
        "name": product.name,
        "sku": product.id,
        "brand": {"@type": "Brand", "name": brand},
        "offers": {
            "@type": "Offer",
            "priceCurrency": currency,
            "price": product.price,
            "availability": (
                "https://schema.org/InStock"
                if product.in_stock
                else "https://schema.org/OutOfStock"
            ),
            "url": canonical_url,
        },
    }
    if product.primary_image:
        data["image"] = [product.primary_image]
    if product.description:
        data["description"] = product.description
    return data


def build_seo(
    route_kind: RouteKind,
    *,
    base_url: str,
    path: str,
    site_name: str,
    tenant: TenantIdentity | None = None,
    product: Product | None = None,
    category: Category | None = None,
    currency: str = "ARS",
) -> SeoPayload:
    """Build the metadata of a rendered page.

    Product and category pages without their entity, unknown stores and the
    ``spa`` fallback get a generic ``noindex`` page.
    """
    canonical_url = absolute_url(base_url, path)
    tenant_name = tenant.name if tenant is not None else site_name
    tenant_image = (
        absolute_image_url(base_url, tenant.banner or tenant.logo)
        if tenant is not None
        else None
    )

    if route_kind is RouteKind.LANDING:
        return _page(
            title=f"{site_name} - Tu tienda online en minutos",
            description=(
                "Crea tu tienda online, gestiona productos y vende con una "
                "plataforma simple."
            ),
            canonical_url=canonical_url,
            site_name=site_name,
        )

    if route_kind is RouteKind.PRODUCT and product is not None:
        image = absolute_image_url(base_url, product.primary_image)
        return _page(
            title=product.meta_title or f"{product.name} | {tenant_name}",
            description=(
                product.meta_description
                or product.description
                or f"Compra {product.name} en {tenant_name}."
            ),
            canonical_url=canonical_url,
            site_name=tenant_name,
            og_type="product",
            image=image,
            json_ld=product_json_ld(
                product,
                brand=tenant_name,
                canonical_url=canonical_url,
                currency=currency,
            ),
        )

    if route_kind is RouteKind.CATEGORY and category is not None:
        return _page(
            title=category.meta_title or f"{category.name} | {tenant_name}",
            description=(
                category.meta_description
                or f"Explora productos de {category.name} en {tenant_name}."
            ),
            canonical_url=canonical_url,
            site_name=tenant_name,
            image=absolute_image_url(base_url, category.image),
        )

    if route_kind is RouteKind.PRODUCTS and tenant is not None:
        return _page(
            title=f"Productos | {tenant_name}",
            description=f"Catálogo de productos de {tenant_name}.",
            canonical_url=canonical_url,
            site_name=tenant_name,
            image=tenant_image,
        )

    if route_kind is RouteKind.HOME and tenant is not None:
        return _page(
            title=f"{tenant_name} | Tienda online",
            description=f"Compra online en {tenant_name}.",
            canonical_url=canonical_url,
            site_name=tenant_name,
            image=tenant_image,
        )

    return _page(
        title=f"{tenant_name} | {site_name}" if tenant is not None else site_name,
        description=DEFAULT_DESCRIPTION,
        canonical_url=canonical_url,
        site_name=tenant_name,
        robots=NO_INDEX,
    )
