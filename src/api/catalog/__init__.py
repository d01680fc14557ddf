"""Catalog bounded context.

Read-only storefront view of a tenant's categories and products, plus the
platform's public plans shown on the landing page.
"""
