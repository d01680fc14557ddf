"""Tenant scope value object attached to outgoing storefront API calls.

The scope is passed explicitly to every data-fetch call instead of living
in a process-wide mutable slot. The tenant store is its only writer; readers
take it through a provider callable at call time and never keep a copy.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

TENANT_HEADER = "x-tenant-id"


@dataclass(frozen=True)
class TenantScope:
    """Tenant scoping for a single outgoing request.

    Attributes:
        tenant_id: Resolved tenant identifier, or None for unscoped calls
            (landing domain, unknown store, or before resolution).
    """

    tenant_id: str | None = None

    @classmethod
    def none(cls) -> TenantScope:
        """Scope that carries no tenant."""
        return cls(tenant_id=None)

    @classmethod
    def for_tenant(cls, tenant_id: str) -> TenantScope:
        if not tenant_id:
            raise ValueError("tenant_id must not be empty")
        return cls(tenant_id=tenant_id)

    @property
    def is_scoped(self) -> bool:
        return self.tenant_id is not None

    def as_headers(self) -> dict[str, str]:
        """Headers that carry this scope on the wire."""
        if self.tenant_id is None:
            return {}
        return {TENANT_HEADER: self.tenant_id}


ScopeProvider = Callable[[], TenantScope]
