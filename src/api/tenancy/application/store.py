"""Client-side tenant state store."""

from __future__ import annotations

from dataclasses import replace

from shared_kernel.tenant_scope import TenantScope
from tenancy.domain.value_objects import (
    ResolutionReason,
    TenantIdentity,
    TenantResolution,
    TenantResolutionState,
)


class TenantStore:
    """Holds the tenant resolution state and the tenant scope.

    This store is the only writer of the scope. State and scope are always
    written together, synchronously, so no reader can see a new tenant
    paired with the previous tenant's scope.
    """

    def __init__(self) -> None:
        self._state = TenantResolutionState.initial()
        self._scope = TenantScope.none()
        self._reason: ResolutionReason | None = None

    @property
    def state(self) -> TenantResolutionState:
        return self._state

    @property
    def tenant(self) -> TenantIdentity | None:
        return self._state.tenant

    @property
    def reason(self) -> ResolutionReason | None:
        """Internal reason of the last applied resolution, if any."""
        return self._reason

    def current_scope(self) -> TenantScope:
        """Scope provider: read at call time, never cached by callers."""
        return self._scope

    def begin_resolution(self) -> None:
        """Enter the loading state ahead of a resolution."""
        self._state = replace(
            self._state,
            loading=True,
            error=None,
            is_landing_domain=False,
            store_not_found=False,
        )

    def apply(self, resolution: TenantResolution) -> None:
        """Apply a resolution, scope first."""
        self._scope = resolution.scope
        self._state = resolution.state
        self._reason = resolution.reason

    def initialize_from_snapshot(self, state: TenantResolutionState) -> None:
        """Seed the store with state computed during server rendering."""
        tenant = state.tenant
        self._scope = (
            TenantScope.for_tenant(tenant.id) if tenant is not None else TenantScope.none()
        )
        self._state = state
        self._reason = None
