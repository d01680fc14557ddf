"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped and domain-relevant metadata that should be
    included with all instrumentation events.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        tenant_id: Resolved tenant identifier (if applicable).
        hostname: Hostname the navigation was made against (if applicable).
        bootstrap_id: Identifier of the client bootstrap run (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(hostname="tienda.shopfront.app")
        probe = DefaultTenantResolutionProbe().with_context(context)
    """

    request_id: str | None = None
    tenant_id: str | None = None
    hostname: str | None = None
    bootstrap_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.tenant_id is not None:
            result["tenant_id"] = self.tenant_id
        if self.hostname is not None:
            result["hostname"] = self.hostname
        if self.bootstrap_id is not None:
            result["bootstrap_id"] = self.bootstrap_id
        result.update(self.extra)
        return result

    def with_tenant(self, tenant_id: str | None) -> ObservationContext:
        """Create a new context with the tenant id set."""
        return replace(self, tenant_id=tenant_id)

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return replace(self, extra={**self.extra, **kwargs})
