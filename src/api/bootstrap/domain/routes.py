"""Route classification for the render pass."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from urllib.parse import unquote

_PRODUCT_PATH = re.compile(r"^/products/([^/]+)$")
_CATEGORY_PATH = re.compile(r"^/category/([^/]+)$")
_STATIC_EXTENSION = re.compile(
    r"\.(?:js|css|png|jpg|jpeg|gif|svg|webp|ico|txt|xml|map|json)$"
)


class RouteKind(StrEnum):
    LANDING = "landing"
    HOME = "home"
    PRODUCTS = "products"
    PRODUCT = "product"
    CATEGORY = "category"
    SPA = "spa"


@dataclass(frozen=True)
class RouteMatch:
    """A classified request path.

    ``slug`` is set for product and category routes only.
    """

    kind: RouteKind
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    slug: str | None = None

    def with_kind(self, kind: RouteKind) -> RouteMatch:
        return replace(self, kind=kind)


def classify_route(path: str, query: Mapping[str, str] | None = None) -> RouteMatch:
    """Map a request path to the route kind the render pass knows about.

    Anything unrecognized is the ``spa`` fallback.
    """
    query = dict(query or {})
    if path == "/":
        return RouteMatch(RouteKind.HOME, path, query)
    if path == "/products":
        return RouteMatch(RouteKind.PRODUCTS, path, query)
    if match := _PRODUCT_PATH.match(path):
        return RouteMatch(RouteKind.PRODUCT, path, query, slug=unquote(match.group(1)))
    if match := _CATEGORY_PATH.match(path):
        return RouteMatch(RouteKind.CATEGORY, path, query, slug=unquote(match.group(1)))
    return RouteMatch(RouteKind.SPA, path, query)


def should_bypass_render(path: str) -> bool:
    """API, docs and static asset paths are never server rendered."""
    if path.startswith(("/api", "/docs", "/assets/")):
        return True
    return bool(_STATIC_EXTENSION.search(path))
