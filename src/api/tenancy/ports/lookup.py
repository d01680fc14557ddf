"""Port for the remote hostname-to-tenant lookup."""

from __future__ import annotations

from typing import Protocol

from tenancy.domain.value_objects import TenantRecord


class TenantLookup(Protocol):
    """Looks up the tenant serving a hostname."""

    async def lookup(self, hostname: str) -> TenantRecord | None:
        """Look up a hostname exactly as received.

        Returns:
            The tenant record, or None when the platform confirms no tenant
            serves this hostname.

        Raises:
            TenantLookupError: If the lookup could not be completed.
        """
        ...
