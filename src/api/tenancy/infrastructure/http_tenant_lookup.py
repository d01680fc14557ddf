"""Tenant lookup against the storefront API."""

from __future__ import annotations

from typing import Any

from shared_kernel.api_client import ApiClient, ApiError
from shared_kernel.tenant_scope import TenantScope
from tenancy.domain.value_objects import TenantRecord
from tenancy.ports.exceptions import TenantLookupError


class HttpTenantLookup:
    """Implements TenantLookup with ``GET /public/tenant/resolve?url=<hostname>``.

    The endpoint answers ``{"data": {...} | null}``. A 404 or a null/idless
    payload is a confirmed absence; every other failure is a TenantLookupError.
    """

    RESOLVE_PATH = "/public/tenant/resolve"

    def __init__(self, client: ApiClient):
        self._client = client

    async def lookup(self, hostname: str) -> TenantRecord | None:
        try:
            body = await self._client.get(
                self.RESOLVE_PATH,
                scope=TenantScope.none(),
                params={"url": hostname},
            )
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise TenantLookupError(f"Tenant lookup for {hostname} failed: {e}") from e

        if not isinstance(body, dict):
            raise TenantLookupError(
                f"Tenant lookup for {hostname} returned a malformed body"
            )

        data = body.get("data")
        if not isinstance(data, dict) or not data.get("tenantId"):
            return None

        return TenantRecord(
            tenant_id=str(data["tenantId"]),
            business_name=_optional_str(data.get("businessName")),
            logo=_optional_str(data.get("logo")),
            banner=_optional_str(data.get("banner")),
            favicon=_optional_str(data.get("favicon")),
            social_media=(
                data["socialMedia"] if isinstance(data.get("socialMedia"), dict) else None
            ),
        )


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
