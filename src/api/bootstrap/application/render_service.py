"""Server render pass.

For one navigation: resolve the tenant from the host, prefetch the data the
route needs into a fresh query cache, build SEO metadata, and return an
HTML shell carrying the hydration snapshot. The client bootstrap then skips
whatever this pass already computed.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from bootstrap.application.observability import DefaultRenderProbe, RenderProbe
from bootstrap.domain.request_host import RequestHost
from bootstrap.domain.routes import (
    RouteKind,
    RouteMatch,
    classify_route,
    should_bypass_render,
)
from bootstrap.domain.seo import build_seo
from bootstrap.domain.snapshot import HydrationSnapshot
from bootstrap.ports.renderer import DocumentRenderer, SitemapEntry
from catalog.application.storefront_queries import StorefrontQueries
from catalog.domain.value_objects import Category, Product
from catalog.ports.gateway import CatalogGateway
from infrastructure.settings import StorefrontSettings
from session.domain.value_objects import AuthBootstrapState
from shared_kernel.api_client import ApiError
from shared_kernel.query_cache import QueryCache
from tenancy.application.resolver import TenantResolver
from tenancy.domain.landing import (
    StoreNotFoundFallback,
    is_landing_hostname,
    landing_url_for,
)
from tenancy.domain.value_objects import TenantResolution, TenantResolutionState

HOME_PRODUCT_LIMIT = 12
SITEMAP_PRODUCT_LIMIT = 100
NO_STORE = "no-store"


@dataclass(frozen=True)
class RenderRequest:
    path: str
    host: RequestHost
    query: Mapping[str, str] = field(default_factory=dict)
    has_auth_cookie: bool = False


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a render: a page, or a redirect when ``location`` is set."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    location: str | None = None
    snapshot: HydrationSnapshot | None = None

    @classmethod
    def redirect(cls, location: str) -> RenderResult:
        return cls(status_code=302, location=location)

    @property
    def is_redirect(self) -> bool:
        return self.location is not None


@dataclass(frozen=True)
class _Prefetched:
    product: Product | None = None
    category: Category | None = None


class RenderService:
    """Renders storefront navigations and their crawler documents."""

    def __init__(
        self,
        resolver: TenantResolver,
        catalog: CatalogGateway,
        renderer: DocumentRenderer,
        settings: StorefrontSettings,
        probe: RenderProbe | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._resolver = resolver
        self._catalog = catalog
        self._renderer = renderer
        self._settings = settings
        self._probe = probe or DefaultRenderProbe()
        self._clock = clock

    async def render(self, request: RenderRequest) -> RenderResult | None:
        """Render one navigation.

        Returns:
            The page or redirect, or None when the path is not server
            rendered (API, docs, static assets).
        """
        if should_bypass_render(request.path):
            return None

        host = request.host
        route = classify_route(request.path, request.query)
        landing = is_landing_hostname(host.hostname, self._settings.landing_hostnames)

        if landing and request.path != "/":
            self._probe.landing_redirected(path=request.path)
            return RenderResult.redirect("/")

        if route.kind is RouteKind.SPA:
            return self._render_spa_shell(request, status_code=200)

        if landing:
            route = route.with_kind(RouteKind.LANDING)

        resolution = await self._resolver.resolve(host.hostname)
        cache = QueryCache(
            stale_seconds=self._settings.query_stale_seconds, clock=self._clock
        )
        scope = resolution.scope
        queries = StorefrontQueries(self._catalog, cache, lambda: scope)

        try:
            prefetched = await self._prefetch(route, resolution, queries)
        except ApiError as e:
            self._probe.prefetch_failed(
                path=request.path, route_kind=route.kind.value, error=e
            )
            return self._render_spa_shell(request, status_code=500)

        state = resolution.state
        not_found = (
            state.store_not_found
            or (route.kind is RouteKind.PRODUCT and prefetched.product is None)
            or (route.kind is RouteKind.CATEGORY and prefetched.category is None)
        )
        status_code = 404 if not_found else 200

        seo = build_seo(
            route.kind,
            base_url=host.base_url,
            path=request.path,
            site_name=self._settings.site_name,
            tenant=state.tenant,
            product=prefetched.product,
            category=prefetched.category,
            currency=self._settings.currency,
        )
        snapshot = HydrationSnapshot(
            route_kind=route.kind,
            tenant_state=state,
            auth_state=self._auth_state(request),
            queries=cache.dehydrate(),
            seo=seo,
        )
        body = self._renderer.render_page(
            seo,
            snapshot,
            favicon=state.tenant.favicon if state.tenant is not None else None,
            fallback=self._fallback(host) if state.store_not_found else None,
        )
        self._probe.page_rendered(
            path=request.path,
            route_kind=route.kind.value,
            status_code=status_code,
            tenant_id=scope.tenant_id,
        )
        return RenderResult(
            status_code=status_code,
            body=body,
            headers=self._page_headers(status_code),
            snapshot=snapshot,
        )

    async def render_sitemap(self, host: RequestHost) -> RenderResult:
        """Sitemap of the store (or of the landing site) behind ``host``."""
        if is_landing_hostname(host.hostname, self._settings.landing_hostnames):
            entries = [SitemapEntry(loc=f"{host.base_url}/")]
            return self._sitemap_result(entries, status_code=200)

        resolution = await self._resolver.resolve(host.hostname)
        if resolution.state.tenant is None:
            return self._sitemap_result([], status_code=404)

        scope = resolution.scope
        try:
            categories, page = await asyncio.gather(
                self._catalog.list_categories(scope),
                self._catalog.list_products(scope, limit=SITEMAP_PRODUCT_LIMIT),
            )
        except ApiError as e:
            self._probe.sitemap_failed(tenant_id=scope.tenant_id, error=e)
            return self._sitemap_result([], status_code=503)
        entries = [
            SitemapEntry(loc=f"{host.base_url}/"),
            SitemapEntry(loc=f"{host.base_url}/products"),
        ]
        entries.extend(
            SitemapEntry(
                loc=f"{host.base_url}/products/{product.slug}",
                lastmod=product.updated_at,
            )
            for product in page.items
            if product.slug and product.active and product.in_stock
        )
        entries.extend(
            SitemapEntry(
                loc=f"{host.base_url}/category/{category.slug}",
                lastmod=category.updated_at,
            )
            for category in categories
            if category.slug
        )
        return self._sitemap_result(entries, status_code=200)

    def render_robots(self, host: RequestHost) -> str:
        return f"User-agent: *\nAllow: /\n\nSitemap: {host.base_url}/sitemap.xml\n"

    async def _prefetch(
        self,
        route: RouteMatch,
        resolution: TenantResolution,
        queries: StorefrontQueries,
    ) -> _Prefetched:
        if route.kind is RouteKind.LANDING:
            try:
                await queries.public_plans()
            except ApiError as e:
                self._probe.public_plans_unavailable(error=e)
                queries.seed_public_plans([])
            return _Prefetched()

        if resolution.state.tenant is None:
            return _Prefetched()

        if route.kind is RouteKind.HOME:
            await asyncio.gather(
                queries.categories(),
                queries.products(limit=HOME_PRODUCT_LIMIT),
            )
            return _Prefetched()

        if route.kind is RouteKind.PRODUCTS:
            await asyncio.gather(
                queries.categories(),
                queries.products(
                    category_id=route.query.get("category") or None,
                    category_slug=route.query.get("categorySlug") or None,
                ),
            )
            return _Prefetched()

        if route.kind is RouteKind.PRODUCT:
            product = await queries.product_detail(route.slug or "")
            return _Prefetched(product=product)

        if route.kind is RouteKind.CATEGORY:
            category, _, _ = await asyncio.gather(
                queries.category_by_slug(route.slug or ""),
                queries.products(category_slug=route.slug),
                queries.categories(),
            )
            return _Prefetched(category=category)

        return _Prefetched()

    def _render_spa_shell(self, request: RenderRequest, status_code: int) -> RenderResult:
        """Shell without server computation; the client bootstraps from scratch."""
        seo = build_seo(
            RouteKind.SPA,
            base_url=request.host.base_url,
            path=request.path,
            site_name=self._settings.site_name,
        )
        snapshot = HydrationSnapshot(
            route_kind=RouteKind.SPA,
            tenant_state=TenantResolutionState(tenant=None, loading=False),
            auth_state=self._auth_state(request),
            seo=seo,
        )
        self._probe.page_rendered(
            path=request.path,
            route_kind=RouteKind.SPA.value,
            status_code=status_code,
            tenant_id=None,
        )
        return RenderResult(
            status_code=status_code,
            body=self._renderer.render_page(seo, snapshot),
            headers=self._page_headers(status_code),
            snapshot=snapshot,
        )

    def _auth_state(self, request: RenderRequest) -> AuthBootstrapState:
        return AuthBootstrapState(
            user=None,
            loading=False,
            billing_required=False,
            has_auth_cookie=request.has_auth_cookie,
        )

    def _fallback(self, host: RequestHost) -> StoreNotFoundFallback:
        return StoreNotFoundFallback(
            landing_url=landing_url_for(
                host.hostname,
                root_domain=self._settings.root_domain,
                protocol=host.protocol,
                port=host.port,
                local_dev_port=self._settings.local_dev_port,
            ),
            seconds=self._settings.not_found_redirect_seconds,
        )

    def _page_headers(self, status_code: int) -> dict[str, str]:
        return {**self._cache_headers(status_code), "Vary": "Cookie"}

    def _cache_headers(self, status_code: int) -> dict[str, str]:
        if status_code >= 400:
            cache_control = NO_STORE
        else:
            cache_control = (
                f"public, max-age={self._settings.cache_max_age_seconds}, "
                f"stale-while-revalidate={self._settings.stale_while_revalidate_seconds}"
            )
        return {"Cache-Control": cache_control}

    def _sitemap_result(
        self, entries: list[SitemapEntry], status_code: int
    ) -> RenderResult:
        self._probe.sitemap_rendered(url_count=len(entries), status_code=status_code)
        return RenderResult(
            status_code=status_code,
            body=self._renderer.render_sitemap(entries),
            headers=self._cache_headers(status_code),
        )
