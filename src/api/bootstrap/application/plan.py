"""Bootstrap plan: what the client still has to do after a render pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bootstrap.domain.routes import RouteKind
from bootstrap.domain.snapshot import HydrationSnapshot


class BootstrapPath(StrEnum):
    """The execution path of one bootstrap.

    COLD_START: resolve the tenant, no session credential to verify.
    COLD_START_WITH_SESSION: resolve the tenant, then verify the session.
    SNAPSHOT_VERIFY_SESSION: reuse the snapshot, verify the cookie's session.
    SNAPSHOT_TRUSTED: reuse the snapshot as-is, no network call.
    """

    COLD_START = "cold_start"
    COLD_START_WITH_SESSION = "cold_start_with_session"
    SNAPSHOT_VERIFY_SESSION = "snapshot_verify_session"
    SNAPSHOT_TRUSTED = "snapshot_trusted"


@dataclass(frozen=True)
class BootstrapPlan:
    skip_tenant_bootstrap: bool = False
    hydrate_auth_from_cookie: bool = False
    route_kind: RouteKind | None = None

    @classmethod
    def from_snapshot(cls, snapshot: HydrationSnapshot | None) -> BootstrapPlan:
        """Derive the plan from the page's snapshot.

        The ``spa`` fallback means no server computation happened, so it is
        planned exactly like a page without a snapshot.
        """
        if snapshot is None:
            return cls()
        skip = not snapshot.is_spa_fallback
        auth = snapshot.auth_state
        return cls(
            skip_tenant_bootstrap=skip,
            hydrate_auth_from_cookie=skip and auth.has_auth_cookie and auth.user is None,
            route_kind=snapshot.route_kind,
        )

    @property
    def runs_auth_hydration(self) -> bool:
        return not self.skip_tenant_bootstrap or self.hydrate_auth_from_cookie

    def path(self, has_credentials: bool) -> BootstrapPath:
        if not self.skip_tenant_bootstrap:
            if has_credentials:
                return BootstrapPath.COLD_START_WITH_SESSION
            return BootstrapPath.COLD_START
        if self.hydrate_auth_from_cookie:
            return BootstrapPath.SNAPSHOT_VERIFY_SESSION
        return BootstrapPath.SNAPSHOT_TRUSTED
