"""Value objects for the tenancy domain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from shared_kernel.tenant_scope import TenantScope
from shared_kernel.normalization import capitalize_words, slugify

DEFAULT_BUSINESS_NAME = "Tienda"


@dataclass(frozen=True)
class SocialLinks:
    facebook: str | None = None
    instagram: str | None = None
    whatsapp: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> SocialLinks | None:
        """Keep only the supported networks; None when nothing is given."""
        if not raw:
            return None
        return cls(
            facebook=raw.get("facebook"),
            instagram=raw.get("instagram"),
            whatsapp=raw.get("whatsapp"),
        )


@dataclass(frozen=True)
class TenantRecord:
    """Raw tenant payload returned by the remote lookup, before normalization."""

    tenant_id: str | None
    business_name: str | None = None
    logo: str | None = None
    banner: str | None = None
    favicon: str | None = None
    social_media: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class TenantIdentity:
    """Identity of a tenant resolved for the current navigation.

    Immutable once resolved; replaced when the hostname changes.
    """

    id: str
    name: str
    slug: str
    logo: str | None = None
    banner: str | None = None
    favicon: str | None = None
    social_links: SocialLinks | None = None

    @classmethod
    def from_record(cls, record: TenantRecord) -> TenantIdentity:
        """Normalize a lookup record into a tenant identity.

        Raises:
            ValueError: If the record carries no tenant id.
        """
        if not record.tenant_id:
            raise ValueError("Tenant record has no tenant id")
        raw_name = record.business_name or DEFAULT_BUSINESS_NAME
        return cls(
            id=record.tenant_id,
            name=capitalize_words(raw_name),
            slug=slugify(raw_name),
            logo=record.logo or None,
            banner=record.banner or None,
            favicon=record.favicon or None,
            social_links=SocialLinks.from_mapping(record.social_media),
        )


class ResolutionReason(StrEnum):
    """Why a resolution ended the way it did.

    NOT_FOUND and LOOKUP_FAILED produce the same observable state; the reason
    keeps them apart for logging and future retry policies.
    """

    LANDING = "landing"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    LOOKUP_FAILED = "lookup_failed"


@dataclass(frozen=True)
class TenantResolutionState:
    """Tenant resolution state as seen by consumers.

    At steady state exactly one of: a tenant is present, is_landing_domain,
    store_not_found, or loading. ``error`` is advisory.
    """

    tenant: TenantIdentity | None = None
    loading: bool = True
    error: str | None = None
    is_landing_domain: bool = False
    store_not_found: bool = False

    @classmethod
    def initial(cls) -> TenantResolutionState:
        return cls()

    @classmethod
    def landing(cls) -> TenantResolutionState:
        return cls(tenant=None, loading=False, is_landing_domain=True)

    @classmethod
    def resolved(cls, tenant: TenantIdentity) -> TenantResolutionState:
        return cls(tenant=tenant, loading=False)

    @classmethod
    def not_found(cls) -> TenantResolutionState:
        return cls(tenant=None, loading=False, store_not_found=True)


@dataclass(frozen=True)
class TenantResolution:
    """Outcome of resolving one hostname: the new state and its scope."""

    state: TenantResolutionState
    reason: ResolutionReason
    scope: TenantScope = field(default_factory=TenantScope.none)

    @classmethod
    def landing(cls) -> TenantResolution:
        return cls(
            state=TenantResolutionState.landing(),
            reason=ResolutionReason.LANDING,
        )

    @classmethod
    def resolved(cls, tenant: TenantIdentity) -> TenantResolution:
        return cls(
            state=TenantResolutionState.resolved(tenant),
            reason=ResolutionReason.RESOLVED,
            scope=TenantScope.for_tenant(tenant.id),
        )

    @classmethod
    def not_found(cls, reason: ResolutionReason) -> TenantResolution:
        return cls(state=TenantResolutionState.not_found(), reason=reason)
