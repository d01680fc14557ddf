"""Unit tests for the server render pass."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bootstrap.application.observability import RenderProbe
from bootstrap.application.render_service import RenderRequest, RenderService
from bootstrap.domain.request_host import RequestHost
from bootstrap.domain.routes import RouteKind
from bootstrap.infrastructure.html_channel import extract_snapshot
from bootstrap.infrastructure.html_document_renderer import HtmlDocumentRenderer
from catalog.domain.value_objects import Category, Product, ProductPage
from shared_kernel.api_client import ApiError
from shared_kernel.query_keys import storefront_query_keys
from shared_kernel.tenant_scope import TenantScope
from tenancy.domain.value_objects import ResolutionReason, TenantResolution

TENANT_HOST = RequestHost.from_headers(host="tienda.shopfront.app", scheme="https")
LANDING_HOST = RequestHost.from_headers(host="shopfront.app", scheme="https")


@pytest.fixture
def mock_resolver(tenant) -> AsyncMock:
    resolver = AsyncMock()
    resolver.resolve.return_value = TenantResolution.resolved(tenant)
    return resolver


@pytest.fixture
def mock_catalog() -> AsyncMock:
    catalog = AsyncMock()
    catalog.list_categories.return_value = [
        Category(id="c1", name="Bazar", slug="bazar", updated_at="2024-05-01")
    ]
    catalog.get_category.return_value = Category(id="c1", name="Bazar", slug="bazar")
    catalog.list_products.return_value = ProductPage.from_api(
        {
            "items": [
                {"id": "p1", "slug": "mate", "stock": 2, "updatedAt": "2024-05-02"},
                {"id": "p2", "slug": "termo", "stock": 0},
                {"id": "p3", "slug": "bombilla", "stock": 5, "status": "DRAFT"},
            ]
        }
    )
    catalog.get_product.return_value = Product(id="p1", name="Mate", slug="mate", stock=2)
    catalog.list_public_plans.return_value = [{"id": "basic"}]
    return catalog


@pytest.fixture
def mock_probe() -> MagicMock:
    return MagicMock(spec=RenderProbe)


@pytest.fixture
def service(mock_resolver, mock_catalog, mock_probe, storefront_settings) -> RenderService:
    return RenderService(
        resolver=mock_resolver,
        catalog=mock_catalog,
        renderer=HtmlDocumentRenderer(scripts=storefront_settings.client_scripts),
        settings=storefront_settings,
        probe=mock_probe,
        clock=lambda: 1000.0,
    )


def request_for(path: str, host: RequestHost = TENANT_HOST, **kwargs) -> RenderRequest:
    return RenderRequest(path=path, host=host, **kwargs)


def query_keys(result) -> list[tuple]:
    return [query.query_key for query in result.snapshot.queries]


class TestBypassAndRedirects:
    @pytest.mark.asyncio
    async def test_static_paths_are_not_rendered(self, service, mock_resolver):
        assert await service.render(request_for("/assets/app.js")) is None
        mock_resolver.resolve.assert_not_called()

    @pytest.mark.asyncio
    async def test_landing_host_redirects_deep_paths(self, service, mock_resolver):
        """The landing site only serves its root page."""
        result = await service.render(request_for("/products/mate", host=LANDING_HOST))

        assert result.is_redirect
        assert result.status_code == 302
        assert result.location == "/"
        mock_resolver.resolve.assert_not_called()


class TestSpaFallback:
    @pytest.mark.asyncio
    async def test_unknown_route_gets_shell_without_server_work(
        self, service, mock_resolver, mock_catalog
    ):
        """Client-only routes skip tenant resolution and prefetch."""
        result = await service.render(request_for("/cart", has_auth_cookie=True))

        assert result.status_code == 200
        assert result.snapshot.route_kind is RouteKind.SPA
        assert result.snapshot.auth_state.has_auth_cookie is True
        assert result.snapshot.queries == []
        mock_resolver.resolve.assert_not_called()
        mock_catalog.list_products.assert_not_called()
        assert extract_snapshot(result.body) == result.snapshot


class TestLanding:
    @pytest.mark.asyncio
    async def test_landing_prefetches_public_plans(self, service, mock_resolver):
        mock_resolver.resolve.return_value = TenantResolution.landing()

        result = await service.render(request_for("/", host=LANDING_HOST))

        assert result.status_code == 200
        assert result.snapshot.route_kind is RouteKind.LANDING
        assert result.snapshot.tenant_state.is_landing_domain is True
        assert query_keys(result) == [storefront_query_keys.public_plans()]
        assert result.snapshot.queries[0].data == [{"id": "basic"}]

    @pytest.mark.asyncio
    async def test_plans_failure_is_seeded_empty(
        self, service, mock_resolver, mock_catalog, mock_probe
    ):
        """Public plans are optional for the landing page."""
        mock_resolver.resolve.return_value = TenantResolution.landing()
        mock_catalog.list_public_plans.side_effect = ApiError(500, "down")

        result = await service.render(request_for("/", host=LANDING_HOST))

        assert result.status_code == 200
        assert result.snapshot.queries[0].data == []
        mock_probe.public_plans_unavailable.assert_called_once()


class TestTenantPages:
    @pytest.mark.asyncio
    async def test_home_prefetches_categories_and_latest_products(
        self, service, mock_catalog, tenant
    ):
        """Home dehydrates the categories and the newest products."""
        result = await service.render(request_for("/"))

        assert result.status_code == 200
        assert result.headers == {
            "Cache-Control": "public, max-age=30, stale-while-revalidate=120",
            "Vary": "Cookie",
        }
        assert set(query_keys(result)) == {
            storefront_query_keys.categories_list(),
            storefront_query_keys.products_list(None, None),
        }
        assert all(query.updated_at == 1000.0 for query in result.snapshot.queries)
        mock_catalog.list_products.assert_awaited_once_with(
            TenantScope.for_tenant(tenant.id),
            limit=12,
            category_id=None,
            category_slug=None,
        )
        assert result.snapshot.tenant_state.tenant == tenant
        assert result.snapshot.auth_state.user is None

    @pytest.mark.asyncio
    async def test_products_page_uses_query_filters(self, service, mock_catalog):
        """category and categorySlug query params filter the listing."""
        result = await service.render(
            request_for("/products", query={"categorySlug": "bazar"})
        )

        assert storefront_query_keys.products_list(None, "bazar") in query_keys(result)
        assert mock_catalog.list_products.await_args.kwargs["category_slug"] == "bazar"

    @pytest.mark.asyncio
    async def test_product_page(self, service):
        result = await service.render(request_for("/products/mate"))

        assert result.status_code == 200
        assert query_keys(result) == [storefront_query_keys.product_detail("mate")]
        assert result.snapshot.seo.og.type == "product"

    @pytest.mark.asyncio
    async def test_missing_product_is_404_and_not_cached(self, service, mock_catalog):
        """Shared caches must not keep a missing product page."""
        mock_catalog.get_product.return_value = None

        result = await service.render(request_for("/products/ghost"))

        assert result.status_code == 404
        assert result.headers["Cache-Control"] == "no-store"
        assert result.snapshot.queries[0].data is None

    @pytest.mark.asyncio
    async def test_category_page_prefetches_three_queries(self, service):
        """Category pages prefetch the category with its products, plus the menu."""
        result = await service.render(request_for("/category/bazar"))

        assert result.status_code == 200
        assert set(query_keys(result)) == {
            storefront_query_keys.category_by_slug("bazar"),
            storefront_query_keys.products_list(None, "bazar"),
            storefront_query_keys.categories_list(),
        }

    @pytest.mark.asyncio
    async def test_prefetch_error_renders_shell_with_500(
        self, service, mock_catalog, mock_probe
    ):
        """API failures during prefetch fall back to the bare shell."""
        mock_catalog.list_categories.side_effect = ApiError(503, "down")

        result = await service.render(request_for("/"))

        assert result.status_code == 500
        assert result.headers["Cache-Control"] == "no-store"
        assert result.snapshot.route_kind is RouteKind.SPA
        mock_probe.prefetch_failed.assert_called_once()


class TestUnknownStore:
    @pytest.mark.asyncio
    async def test_unknown_store_renders_404_with_redirect_screen(
        self, service, mock_resolver, mock_catalog
    ):
        """Unknown stores get a 404 page that counts down to the landing site."""
        mock_resolver.resolve.return_value = TenantResolution.not_found(
            ResolutionReason.NOT_FOUND
        )
        host = RequestHost.from_headers(host="nope.com", scheme="https")

        result = await service.render(request_for("/", host=host))

        assert result.status_code == 404
        assert result.headers["Cache-Control"] == "no-store"
        assert result.snapshot.tenant_state.store_not_found is True
        assert result.snapshot.queries == []
        assert 'content="5;url=https://shopfront.app"' in result.body
        mock_catalog.list_categories.assert_not_called()


class TestSitemapAndRobots:
    @pytest.mark.asyncio
    async def test_store_sitemap_lists_sellable_products_and_categories(self, service):
        """Only active products with stock reach the sitemap."""
        result = await service.render_sitemap(TENANT_HOST)

        assert result.status_code == 200
        assert "<loc>https://tienda.shopfront.app/</loc>" in result.body
        assert "<loc>https://tienda.shopfront.app/products</loc>" in result.body
        assert (
            "<loc>https://tienda.shopfront.app/products/mate</loc>"
            "<lastmod>2024-05-02</lastmod>"
        ) in result.body
        assert "termo" not in result.body
        assert "bombilla" not in result.body
        assert "<loc>https://tienda.shopfront.app/category/bazar</loc>" in result.body

    @pytest.mark.asyncio
    async def test_landing_sitemap(self, service, mock_resolver):
        result = await service.render_sitemap(LANDING_HOST)

        assert result.status_code == 200
        assert "<loc>https://shopfront.app/</loc>" in result.body
        mock_resolver.resolve.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_store_sitemap_is_404(self, service, mock_resolver):
        """An unknown store answers an empty urlset."""
        mock_resolver.resolve.return_value = TenantResolution.not_found(
            ResolutionReason.LOOKUP_FAILED
        )

        result = await service.render_sitemap(TENANT_HOST)

        assert result.status_code == 404
        assert "<url>" not in result.body

    @pytest.mark.asyncio
    async def test_store_sitemap_is_503_when_catalog_fails(
        self, service, mock_catalog, mock_probe
    ):
        """A failed catalog read answers an empty, uncached urlset."""
        mock_catalog.list_products.side_effect = ApiError(500, "down")

        result = await service.render_sitemap(TENANT_HOST)

        assert result.status_code == 503
        assert result.headers["Cache-Control"] == "no-store"
        assert "<url>" not in result.body
        assert "<urlset" in result.body
        mock_probe.sitemap_failed.assert_called_once()
        assert mock_probe.sitemap_failed.call_args.kwargs["tenant_id"] == "tenant-1"

    @pytest.mark.asyncio
    async def test_store_sitemap_is_cacheable(self, service):
        result = await service.render_sitemap(TENANT_HOST)

        assert result.headers["Cache-Control"].startswith("public, max-age=")

    def test_robots_points_at_sitemap(self, service):
        assert service.render_robots(TENANT_HOST) == (
            "User-agent: *\nAllow: /\n\nSitemap: https://tienda.shopfront.app/sitemap.xml\n"
        )
