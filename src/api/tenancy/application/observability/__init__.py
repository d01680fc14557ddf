"""Domain-Oriented Observability for the tenancy application layer."""

from tenancy.application.observability.tenant_resolution_probe import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)

__all__ = [
    "DefaultTenantResolutionProbe",
    "TenantResolutionProbe",
]
