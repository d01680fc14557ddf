"""Tenant resolver: hostname to TenantResolution."""

from __future__ import annotations

from collections.abc import Collection

from tenancy.application.observability import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)
from tenancy.domain.landing import is_landing_hostname
from tenancy.domain.value_objects import (
    ResolutionReason,
    TenantIdentity,
    TenantResolution,
)
from tenancy.ports.exceptions import TenantLookupError
from tenancy.ports.lookup import TenantLookup


class TenantResolver:
    """Resolves hostnames to tenants.

    Landing hostnames short-circuit without a remote call. Every other
    hostname costs exactly one lookup. Lookup failures never escape: they
    become a not-found resolution with reason LOOKUP_FAILED.

    The resolver holds no client state; applying the resulting scope is the
    tenant store's job.
    """

    def __init__(
        self,
        lookup: TenantLookup,
        landing_hostnames: Collection[str],
        probe: TenantResolutionProbe | None = None,
    ):
        self._lookup = lookup
        self._landing_hostnames = frozenset(h.lower() for h in landing_hostnames)
        self._probe = probe or DefaultTenantResolutionProbe()

    async def resolve(self, hostname: str) -> TenantResolution:
        """Resolve a hostname.

        Args:
            hostname: Hostname of the current navigation; passed to the
                remote lookup unchanged.

        Returns:
            TenantResolution with the new state, scope and reason.
        """
        if is_landing_hostname(hostname, self._landing_hostnames):
            self._probe.landing_domain_detected(hostname=hostname)
            return TenantResolution.landing()

        try:
            record = await self._lookup.lookup(hostname)
        except TenantLookupError as e:
            self._probe.tenant_lookup_failed(hostname=hostname, error=e)
            return TenantResolution.not_found(ResolutionReason.LOOKUP_FAILED)

        if record is None or not record.tenant_id:
            self._probe.tenant_not_found(hostname=hostname)
            return TenantResolution.not_found(ResolutionReason.NOT_FOUND)

        tenant = TenantIdentity.from_record(record)
        self._probe.tenant_resolved(hostname=hostname, tenant_id=tenant.id)
        return TenantResolution.resolved(tenant)
