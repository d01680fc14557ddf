"""Bootstrap coordinator: runs tenant resolution and auth hydration once.

Ordering: the tenant scope is settled (resolved, or seeded from the
snapshot before ``run``) before auth hydration starts, and auth hydration
receives that scope. Nothing is cancellable; an abandoned run lets its
in-flight calls finish and drops their results.
"""

from __future__ import annotations

from ulid import ULID

from bootstrap.application.observability import (
    BootstrapProbe,
    DefaultBootstrapProbe,
)
from bootstrap.application.plan import BootstrapPath, BootstrapPlan
from bootstrap.domain.exceptions import BootstrapAlreadyStartedError
from session.application.auth_store import AuthStore
from tenancy.application.resolver import TenantResolver
from tenancy.application.store import TenantStore


class BootstrapCoordinator:
    """Executes a BootstrapPlan against the tenant and auth stores.

    One instance serves one page; ``run`` may be called once.
    """

    def __init__(
        self,
        plan: BootstrapPlan,
        resolver: TenantResolver,
        tenant_store: TenantStore,
        auth_store: AuthStore,
        probe: BootstrapProbe | None = None,
        bootstrap_id: str | None = None,
    ):
        self._plan = plan
        self._resolver = resolver
        self._tenant_store = tenant_store
        self._auth_store = auth_store
        self._bootstrap_id = bootstrap_id or str(ULID())
        self._probe = probe or DefaultBootstrapProbe()
        self._started = False
        self._abandoned = False

    @property
    def bootstrap_id(self) -> str:
        return self._bootstrap_id

    @property
    def plan(self) -> BootstrapPlan:
        return self._plan

    @property
    def is_current(self) -> bool:
        return not self._abandoned

    def abandon(self) -> None:
        """Mark this bootstrap as no longer current (navigation away)."""
        self._abandoned = True

    async def run(self, hostname: str) -> BootstrapPath:
        """Bring tenant and auth state to their ready state.

        Raises:
            BootstrapAlreadyStartedError: If called a second time.
        """
        if self._started:
            raise BootstrapAlreadyStartedError()
        self._started = True

        path = self._plan.path(self._auth_store.has_credentials)
        self._probe.bootstrap_started(path=path.value, hostname=hostname)

        if not self._plan.skip_tenant_bootstrap:
            if not await self._resolve_tenant(hostname):
                return path

        if self._plan.runs_auth_hydration:
            if not await self._hydrate_auth():
                return path
        else:
            self._auth_store.mark_loaded()

        self._probe.bootstrap_completed(
            path=path.value, tenant_id=self._tenant_store.current_scope().tenant_id
        )
        return path

    async def _resolve_tenant(self, hostname: str) -> bool:
        self._tenant_store.begin_resolution()
        resolution = await self._resolver.resolve(hostname)
        if self._abandoned:
            self._probe.stale_result_discarded(stage="tenant_resolution")
            return False
        self._tenant_store.apply(resolution)
        return True

    async def _hydrate_auth(self) -> bool:
        await self._auth_store.hydrate(
            self._tenant_store.current_scope(), is_current=lambda: self.is_current
        )
        if self._abandoned:
            self._probe.stale_result_discarded(stage="auth_hydration")
            return False
        return True
