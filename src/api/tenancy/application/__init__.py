"""Tenancy application layer."""

from tenancy.application.resolver import TenantResolver
from tenancy.application.store import TenantStore

__all__ = ["TenantResolver", "TenantStore"]
