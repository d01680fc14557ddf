"""Fixtures for bootstrap tests."""

from __future__ import annotations

import pytest

from bootstrap.domain.routes import RouteKind
from bootstrap.domain.snapshot import HydrationSnapshot
from session.domain.value_objects import AuthBootstrapState
from tenancy.domain.value_objects import TenantResolutionState


@pytest.fixture
def make_snapshot(tenant):
    """Build a snapshot for a resolved tenant, overridable per test."""

    def _make(
        route_kind: RouteKind = RouteKind.HOME,
        has_auth_cookie: bool = False,
        tenant_state: TenantResolutionState | None = None,
        queries: list[dict] | None = None,
    ) -> HydrationSnapshot:
        return HydrationSnapshot(
            route_kind=route_kind,
            tenant_state=tenant_state or TenantResolutionState.resolved(tenant),
            auth_state=AuthBootstrapState(
                user=None, loading=False, has_auth_cookie=has_auth_cookie
            ),
            queries=queries or [],
        )

    return _make
