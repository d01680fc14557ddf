"""Shared Kernel module.

This module contains foundational components that are explicitly shared across
the storefront bounded contexts: the tenant scope passed to every API call,
the query keys and cache that cross the hydration boundary, the storefront
API client, and the observation context used by domain probes.

Changes to this module affect multiple contexts and should be carefully
coordinated.
"""
