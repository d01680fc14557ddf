"""Tenancy bounded context.

Maps an inbound hostname to a tenant identity, a landing-domain verdict or a
not-found verdict, and owns the tenant scope attached to API calls.
"""
