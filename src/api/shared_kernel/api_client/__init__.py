"""Storefront API client shared by all bounded contexts."""

from shared_kernel.api_client.client import ApiClient, ApiError
from shared_kernel.api_client.credentials import SessionCredentials
from shared_kernel.api_client.observability import (
    ApiClientProbe,
    DefaultApiClientProbe,
)

__all__ = [
    "ApiClient",
    "ApiClientProbe",
    "ApiError",
    "DefaultApiClientProbe",
    "SessionCredentials",
]
