"""Ports for the tenancy context."""

from tenancy.ports.exceptions import TenantLookupError
from tenancy.ports.lookup import TenantLookup

__all__ = ["TenantLookup", "TenantLookupError"]
