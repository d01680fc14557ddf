"""Domain probe for hostname-to-tenant resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the tenant resolution protocol.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantResolutionProbe(Protocol):
    """Domain probe for tenant resolution operations."""

    def landing_domain_detected(self, hostname: str) -> None:
        """Record that the hostname belongs to the landing set."""
        ...

    def tenant_resolved(self, hostname: str, tenant_id: str) -> None:
        """Record that the hostname resolved to a tenant."""
        ...

    def tenant_not_found(self, hostname: str) -> None:
        """Record that the platform confirmed no tenant for the hostname."""
        ...

    def tenant_lookup_failed(self, hostname: str, error: Exception) -> None:
        """Record that the lookup could not be completed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantResolutionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantResolutionProbe:
    """Default implementation of TenantResolutionProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultTenantResolutionProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantResolutionProbe(logger=self._logger, context=context)

    def landing_domain_detected(self, hostname: str) -> None:
        """Record that the hostname belongs to the landing set."""
        self._logger.debug(
            "tenant_resolution_landing_domain",
            requested_hostname=hostname,
            **self._get_context_kwargs(),
        )

    def tenant_resolved(self, hostname: str, tenant_id: str) -> None:
        """Record that the hostname resolved to a tenant."""
        self._logger.info(
            "tenant_resolution_resolved",
            requested_hostname=hostname,
            resolved_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, hostname: str) -> None:
        """Record that the platform confirmed no tenant for the hostname."""
        self._logger.info(
            "tenant_resolution_not_found",
            requested_hostname=hostname,
            reason="not_found",
            **self._get_context_kwargs(),
        )

    def tenant_lookup_failed(self, hostname: str, error: Exception) -> None:
        """Record that the lookup could not be completed."""
        self._logger.warning(
            "tenant_resolution_lookup_failed",
            requested_hostname=hostname,
            reason="lookup_failed",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
