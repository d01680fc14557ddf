"""Tenancy infrastructure adapters."""

from tenancy.infrastructure.http_tenant_lookup import HttpTenantLookup

__all__ = ["HttpTenantLookup"]
