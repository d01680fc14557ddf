"""Client startup: from the delivered page to a bootstrapped storefront.

This module is the composition root of the storefront client. It checks the
page, takes over its hydration snapshot, seeds the stores through their
initialization operations and runs the bootstrap coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from bootstrap.application.coordinator import BootstrapCoordinator
from bootstrap.application.hydration import HydrationSlot, get_ssr_bootstrap_payload
from bootstrap.application.observability import BootstrapProbe, DefaultBootstrapProbe
from bootstrap.application.plan import BootstrapPath, BootstrapPlan
from bootstrap.domain.exceptions import MountPointMissingError
from bootstrap.domain.snapshot import HydrationSnapshot
from bootstrap.infrastructure.html_channel import (
    MOUNT_POINT_ID,
    extract_snapshot,
    has_mount_point,
)
from cart.application.reconciler import CartReconciler
from cart.infrastructure.http_cart_gateway import HttpCartGateway
from catalog.application.storefront_queries import StorefrontQueries
from catalog.infrastructure.http_catalog_gateway import HttpCatalogGateway
from infrastructure.settings import StorefrontSettings, get_storefront_settings
from session.application.auth_store import AuthStore
from session.infrastructure.http_session_gateway import HttpSessionGateway
from shared_kernel.api_client import ApiClient, SessionCredentials
from shared_kernel.observability_context import ObservationContext
from shared_kernel.query_cache import QueryCache
from tenancy.application.resolver import TenantResolver
from tenancy.application.store import TenantStore
from tenancy.domain.landing import StoreNotFoundFallback, landing_url_for
from tenancy.infrastructure.http_tenant_lookup import HttpTenantLookup


@dataclass
class StorefrontRuntime:
    """Everything the storefront UI reads from once startup has finished."""

    hostname: str
    protocol: str
    port: int | None
    path: BootstrapPath
    snapshot: HydrationSnapshot | None
    api: ApiClient
    tenant_store: TenantStore
    auth_store: AuthStore
    queries: StorefrontQueries
    cart: CartReconciler
    coordinator: BootstrapCoordinator
    settings: StorefrontSettings

    @property
    def store_not_found_fallback(self) -> StoreNotFoundFallback | None:
        """The redirect screen to show, when the store does not exist."""
        if not self.tenant_store.state.store_not_found:
            return None
        return StoreNotFoundFallback(
            landing_url=landing_url_for(
                self.hostname,
                root_domain=self.settings.root_domain,
                protocol=self.protocol,
                port=self.port,
                local_dev_port=self.settings.local_dev_port,
            ),
            seconds=self.settings.not_found_redirect_seconds,
        )


def seed_stores(
    snapshot: HydrationSnapshot,
    tenant_store: TenantStore,
    auth_store: AuthStore,
    cache: QueryCache,
) -> None:
    """Seed the client stores from a consumed snapshot.

    A spa snapshot was rendered without resolving the tenant, so its tenant
    state is not seeded and the scope stays unset until resolution applies.
    """
    if not snapshot.is_spa_fallback:
        tenant_store.initialize_from_snapshot(snapshot.tenant_state)
    auth_store.initialize_from_snapshot(snapshot.auth_state)
    cache.hydrate(snapshot.dehydrated_queries())


async def start_storefront(
    page_html: str,
    hostname: str,
    http: httpx.AsyncClient,
    *,
    protocol: str = "https",
    port: int | None = None,
    session_token: str | None = None,
    slot: HydrationSlot | None = None,
    settings: StorefrontSettings | None = None,
    probe: BootstrapProbe | None = None,
) -> StorefrontRuntime:
    """Start the storefront client for one page.

    Args:
        page_html: The delivered document.
        hostname: Hostname of the current location.
        http: Client for the storefront API (base URL and timeout set).
        session_token: Bearer token read from the session cookie, if any.
        slot: Slot already holding the page's snapshot. When omitted, the
            snapshot is read from ``page_html``.

    Raises:
        MountPointMissingError: If the page has no mount point. Nothing is
            fetched in that case.
    """
    settings = settings or get_storefront_settings()
    probe = (probe or DefaultBootstrapProbe()).with_context(
        ObservationContext(hostname=hostname)
    )

    if not has_mount_point(page_html):
        probe.mount_point_missing(element_id=MOUNT_POINT_ID)
        raise MountPointMissingError(MOUNT_POINT_ID)

    if slot is None:
        slot = HydrationSlot()
        extracted = extract_snapshot(page_html)
        if extracted is not None:
            slot.publish(extracted)
    snapshot = get_ssr_bootstrap_payload(slot)

    credentials = SessionCredentials(session_token)
    api = ApiClient(http, credentials)
    tenant_store = TenantStore()
    auth_store = AuthStore(HttpSessionGateway(api), credentials)
    api.set_on_unauthorized(auth_store.logout)
    api.set_on_billing_required(auth_store.set_billing_required)
    cache = QueryCache(stale_seconds=settings.query_stale_seconds)

    if snapshot is not None:
        probe.snapshot_consumed(
            route_kind=snapshot.route_kind.value, query_count=len(snapshot.queries)
        )
        seed_stores(snapshot, tenant_store, auth_store, cache)
    else:
        probe.snapshot_absent()

    coordinator = BootstrapCoordinator(
        plan=BootstrapPlan.from_snapshot(snapshot),
        resolver=TenantResolver(
            HttpTenantLookup(api), settings.landing_hostnames
        ),
        tenant_store=tenant_store,
        auth_store=auth_store,
        probe=probe,
    )
    path = await coordinator.run(hostname)

    return StorefrontRuntime(
        hostname=hostname,
        protocol=protocol,
        port=port,
        path=path,
        snapshot=snapshot,
        api=api,
        tenant_store=tenant_store,
        auth_store=auth_store,
        queries=StorefrontQueries(
            HttpCatalogGateway(api), cache, tenant_store.current_scope
        ),
        cart=CartReconciler(HttpCartGateway(api), tenant_store.current_scope),
        coordinator=coordinator,
        settings=settings,
    )
