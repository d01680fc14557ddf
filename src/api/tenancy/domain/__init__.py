"""Tenancy domain layer."""

from tenancy.domain.landing import (
    StoreNotFoundFallback,
    is_landing_hostname,
    landing_url_for,
    normalize_hostname,
)
from tenancy.domain.value_objects import (
    ResolutionReason,
    SocialLinks,
    TenantIdentity,
    TenantRecord,
    TenantResolution,
    TenantResolutionState,
)

__all__ = [
    "ResolutionReason",
    "SocialLinks",
    "StoreNotFoundFallback",
    "TenantIdentity",
    "TenantRecord",
    "TenantResolution",
    "TenantResolutionState",
    "is_landing_hostname",
    "landing_url_for",
    "normalize_hostname",
]
